"""
User request/response schemas.
"""
from typing import Optional

from pydantic import BaseModel, Field


class UserCreate(BaseModel):
    """
    Self-registration body.

    Profile fields beyond name/photoURL are kept as extras. A ``role`` sent by
    the caller is dropped by the service; new users always start as default.
    """
    email: str = Field(..., description="User email address, stored as sent")
    name: Optional[str] = Field(None, description="Display name")
    photoURL: Optional[str] = Field(None, description="Profile picture URL")

    class Config:
        extra = "allow"


class RegisterResponse(BaseModel):
    """Registration outcome: an insert acknowledgement or an 'already exists' notice."""
    acknowledged: Optional[bool] = Field(None, description="Write acknowledged by server")
    inserted_id: Optional[str] = Field(None, alias="insertedId", description="New user id")
    message: Optional[str] = Field(None, description="Set when the email is already registered")

    class Config:
        populate_by_name = True
