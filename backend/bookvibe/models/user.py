"""
User model for the users collection.
"""
from enum import Enum
from typing import Optional

from pydantic import Field

from bookvibe.models.base import MongoDocument


class UserRole(str, Enum):
    """User role levels."""
    DEFAULT = "default"
    ADMIN = "admin"


class User(MongoDocument):
    """
    User document model for the Book-vibe users collection.

    Email is unique by convention only. Profile fields (name, photoURL, ...)
    are kept as extra fields.
    """
    email: Optional[str] = Field(None, description="User email address")
    role: Optional[str] = Field(
        default=None,
        description="Role assigned to user ('default' or 'admin'); missing means default",
    )

    @property
    def is_admin(self) -> bool:
        return self.role == UserRole.ADMIN.value
