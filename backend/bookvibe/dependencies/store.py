"""
Store and service dependencies.
"""
from fastapi import Depends, Request

from bookvibe.database.connections import MongoStore
from bookvibe.services.cart_service import CartService
from bookvibe.services.catalog_service import CatalogService
from bookvibe.services.user_service import UserService


def get_store(request: Request) -> MongoStore:
    """The MongoStore opened for this application at startup."""
    return request.app.state.store


def get_user_service(store: MongoStore = Depends(get_store)) -> UserService:
    """Dependency to get UserService instance."""
    return UserService(store.db)


def get_catalog_service(store: MongoStore = Depends(get_store)) -> CatalogService:
    """Dependency to get CatalogService instance."""
    return CatalogService(store.db)


def get_cart_service(store: MongoStore = Depends(get_store)) -> CartService:
    """Dependency to get CartService instance."""
    return CartService(store.db)
