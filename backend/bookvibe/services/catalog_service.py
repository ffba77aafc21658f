"""
Catalog service: read-only listings of books, upcoming releases and reviews.
"""
from motor.motor_asyncio import AsyncIOMotorDatabase

from bookvibe.database.collections import Collections
from bookvibe.models.book import Book, Review, UpcomingRelease


class CatalogService:
    """Service for catalog reads."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the Book-vibe database."""
        self.db = db
        self.books_col = db[Collections.BOOKS]
        self.upcoming_col = db[Collections.UPCOMING]
        self.reviews_col = db[Collections.REVIEWS]

    async def list_books(self) -> list[Book]:
        docs = await self.books_col.find().to_list(length=None)
        return [Book.from_mongo(doc) for doc in docs]

    async def list_upcoming(self) -> list[UpcomingRelease]:
        docs = await self.upcoming_col.find().to_list(length=None)
        return [UpcomingRelease.from_mongo(doc) for doc in docs]

    async def list_reviews(self) -> list[Review]:
        docs = await self.reviews_col.find().to_list(length=None)
        return [Review.from_mongo(doc) for doc in docs]
