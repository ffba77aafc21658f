"""
Token router for issuing access tokens.
"""
from typing import Any

from fastapi import APIRouter, Body

from bookvibe.core.security import create_access_token
from bookvibe.schemas.auth import TokenResponse

router = APIRouter(tags=["Authentication"])


@router.post(
    "/jwt",
    response_model=TokenResponse,
    summary="Issue an access token",
)
async def issue_token(identity: dict[str, Any] = Body(...)):
    """
    Sign the identity payload into a JWT valid for one hour.

    Any JSON object is accepted and embedded as-is. Guarded routes read its
    **email** claim.

    The identity is not checked against registered users. Send the token
    back as `Authorization: Bearer <token>` on protected endpoints.
    """
    token = create_access_token(identity)
    return TokenResponse(token=token)
