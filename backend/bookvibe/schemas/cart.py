"""
Cart request schemas.
"""
from typing import Optional

from pydantic import BaseModel, Field


class CartItemCreate(BaseModel):
    """
    Item to add to a cart; item fields (bookId, name, price, ...) are extras.

    The email is stored exactly as sent so that ``GET /carts?email=`` finds it.
    """
    email: Optional[str] = Field(None, description="Owning user email")

    class Config:
        extra = "allow"
