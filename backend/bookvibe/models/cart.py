"""
Cart item model for the carts collection.
"""
from typing import Optional

from pydantic import Field

from bookvibe.models.base import MongoDocument


class CartItem(MongoDocument):
    """One item added to a user's cart. Item fields (bookId, price, ...) are extras."""
    email: Optional[str] = Field(None, description="Owning user email")
