"""
Service layer for business logic.
"""
from bookvibe.services.user_service import UserService
from bookvibe.services.catalog_service import CatalogService
from bookvibe.services.cart_service import CartService

__all__ = [
    "UserService",
    "CatalogService",
    "CartService",
]
