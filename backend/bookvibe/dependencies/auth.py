"""
Authentication dependencies for route protection.
"""
import logging
from typing import Annotated, Any, Optional

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError

from bookvibe.core.security import decode_token

logger = logging.getLogger(__name__)

# Missing or non-bearer headers come through as None and are rejected in verify_token
bearer_scheme = HTTPBearer(auto_error=False)


async def verify_token(
    request: Request,
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
) -> dict[str, Any]:
    """
    Dependency to validate the bearer token of a request.

    Expects the header ``Authorization: Bearer <token>``. The decoded payload
    is stored on ``request.state.token_payload`` and returned.

    Raises:
        HTTPException 401: If the header is missing, or the token is invalid or expired
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Unauthorized access",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None:
        raise credentials_exception

    try:
        payload = decode_token(credentials.credentials)
    except JWTError as e:
        logger.debug(f"Rejected token: {e}")
        raise credentials_exception

    request.state.token_payload = payload
    return payload


# Type alias for cleaner route signatures
TokenPayload = Annotated[dict[str, Any], Depends(verify_token)]
