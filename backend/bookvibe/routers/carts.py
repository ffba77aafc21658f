"""
Carts router for adding and listing cart items.
"""
import logging
from typing import Optional

from fastapi import APIRouter, Depends, HTTPException, Query, status

from bookvibe.dependencies.store import get_cart_service
from bookvibe.models.cart import CartItem
from bookvibe.schemas.cart import CartItemCreate
from bookvibe.schemas.results import InsertResultResponse
from bookvibe.services.cart_service import CartService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/carts", tags=["Carts"])


@router.post(
    "",
    response_model=InsertResultResponse,
    summary="Add item to cart",
)
async def add_cart_item(
    body: CartItemCreate,
    cart_service: CartService = Depends(get_cart_service),
):
    """
    Add an item to a cart.

    - **email**: Owning user email (not checked against registered users)
    - any item fields, e.g. **bookId**, **name**, **price**
    """
    return await cart_service.add_item(body)


@router.get(
    "",
    response_model=list[CartItem],
    summary="List cart items",
)
async def list_cart_items(
    email: Optional[str] = Query(None, description="Owner email"),
    cart_service: CartService = Depends(get_cart_service),
):
    """
    List the cart items owned by `email`.

    Any store failure answers 500 with a generic message.
    """
    try:
        return await cart_service.list_items(email)
    except Exception:
        logger.exception(f"Failed to list cart items for {email}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail="Internal Server Error",
        )
