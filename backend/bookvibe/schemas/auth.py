"""
Token response schemas.
"""
from pydantic import BaseModel, Field


class TokenResponse(BaseModel):
    """Issued access token."""
    token: str = Field(..., description="JWT access token")


class AdminStatusResponse(BaseModel):
    """Admin flag for the requested email."""
    admin: bool = Field(..., description="True if the user holds the admin role")
