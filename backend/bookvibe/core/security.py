"""
Security utilities for JWT token management.
"""
from datetime import datetime, timedelta, timezone
from typing import Any

from jose import jwt

from bookvibe.config import get_settings


def create_access_token(
    payload: dict[str, Any],
    expires_delta: timedelta | None = None,
) -> str:
    """
    Create a signed JWT access token embedding an identity payload.

    The payload is not checked against the users collection.

    Args:
        payload: Identity claims to embed (e.g. {"email": "a@x.com"})
        expires_delta: Optional custom expiration time

    Returns:
        Encoded JWT token string
    """
    settings = get_settings()

    if expires_delta is None:
        expires_delta = timedelta(minutes=settings.access_token_expire_minutes)

    now = datetime.now(timezone.utc)
    to_encode = dict(payload)
    to_encode.update({
        "exp": now + expires_delta,
        "iat": now,
    })

    return jwt.encode(
        to_encode,
        settings.access_token_secret,
        algorithm=settings.jwt_algorithm,
    )


def decode_token(token: str) -> dict[str, Any]:
    """
    Decode and validate a JWT token.

    Args:
        token: The JWT token string to decode

    Returns:
        Decoded payload dictionary (identity claims plus exp, iat)

    Raises:
        JWTError: If token is malformed, badly signed or expired
    """
    settings = get_settings()

    return jwt.decode(
        token,
        settings.access_token_secret,
        algorithms=[settings.jwt_algorithm],
    )
