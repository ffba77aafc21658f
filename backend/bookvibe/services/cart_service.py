"""
Cart service for adding and listing cart items.
"""
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase

from bookvibe.database.collections import Collections
from bookvibe.models.cart import CartItem
from bookvibe.schemas.cart import CartItemCreate
from bookvibe.schemas.results import InsertResultResponse


class CartService:
    """Service for cart operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the Book-vibe database."""
        self.db = db
        self.carts_col = db[Collections.CARTS]

    async def add_item(self, item: CartItemCreate) -> InsertResultResponse:
        """
        Insert a cart item as given.

        The owning email is not checked against the users collection. An item
        sent without one is stored without an ``email`` key.
        """
        result = await self.carts_col.insert_one(item.model_dump(exclude_none=True))
        return InsertResultResponse.from_result(result)

    async def list_items(self, email: Optional[str]) -> list[CartItem]:
        """
        List cart items owned by ``email``.

        A missing email queries ``{"email": None}``, which matches items
        stored without an owner.
        """
        docs = await self.carts_col.find({"email": email}).to_list(length=None)
        return [CartItem.from_mongo(doc) for doc in docs]
