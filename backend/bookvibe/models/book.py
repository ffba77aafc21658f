"""
Catalog models: books, upcoming releases and reviews.
"""
from typing import Optional

from pydantic import Field

from bookvibe.models.base import MongoDocument


class Book(MongoDocument):
    """Catalog record from the books collection. Price, rating, tags etc. are extras."""
    name: Optional[str] = Field(None, description="Book title")
    author: Optional[str] = Field(None, description="Author name")
    image: Optional[str] = Field(None, description="Cover image URL")


class UpcomingRelease(Book):
    """Record from the upcoming collection; same shape as a book."""
    pass


class Review(MongoDocument):
    """Free-form customer review."""
    name: Optional[str] = Field(None, description="Reviewer name")
    details: Optional[str] = Field(None, description="Review text")
