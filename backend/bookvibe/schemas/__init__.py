"""
Request and response schemas for API endpoints.
"""
from bookvibe.schemas.auth import AdminStatusResponse, TokenResponse
from bookvibe.schemas.user import RegisterResponse, UserCreate
from bookvibe.schemas.cart import CartItemCreate
from bookvibe.schemas.results import (
    DeleteResultResponse,
    InsertResultResponse,
    UpdateResultResponse,
)

__all__ = [
    # Auth
    "TokenResponse",
    "AdminStatusResponse",
    # User
    "UserCreate",
    "RegisterResponse",
    # Cart
    "CartItemCreate",
    # Write results
    "InsertResultResponse",
    "UpdateResultResponse",
    "DeleteResultResponse",
]
