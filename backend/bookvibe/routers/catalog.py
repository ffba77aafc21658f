"""
Catalog router for books, upcoming releases and reviews.
"""
from fastapi import APIRouter, Depends

from bookvibe.dependencies.store import get_catalog_service
from bookvibe.models.book import Book, Review, UpcomingRelease
from bookvibe.services.catalog_service import CatalogService

router = APIRouter(tags=["Catalog"])


@router.get("/books", response_model=list[Book], summary="List books")
async def list_books(
    catalog_service: CatalogService = Depends(get_catalog_service),
):
    """List every book in the catalog."""
    return await catalog_service.list_books()


@router.get("/upcoming", response_model=list[UpcomingRelease], summary="List upcoming releases")
async def list_upcoming(
    catalog_service: CatalogService = Depends(get_catalog_service),
):
    """List every upcoming release."""
    return await catalog_service.list_upcoming()


@router.get("/reviews", response_model=list[Review], summary="List reviews")
async def list_reviews(
    catalog_service: CatalogService = Depends(get_catalog_service),
):
    """List every customer review."""
    return await catalog_service.list_reviews()
