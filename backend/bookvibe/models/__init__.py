"""
Pydantic models for database documents.
"""
from bookvibe.models.base import MongoDocument, stringify_object_ids
from bookvibe.models.user import User, UserRole
from bookvibe.models.book import Book, UpcomingRelease, Review
from bookvibe.models.cart import CartItem

__all__ = [
    "MongoDocument",
    "stringify_object_ids",
    "User",
    "UserRole",
    "Book",
    "UpcomingRelease",
    "Review",
    "CartItem",
]
