"""
User service for registration, role lookups and admin management.
"""
import logging
from typing import Optional

from bson import ObjectId
from bson.errors import InvalidId
from motor.motor_asyncio import AsyncIOMotorDatabase

from bookvibe.database.collections import Collections
from bookvibe.models.user import User, UserRole
from bookvibe.schemas.results import DeleteResultResponse, UpdateResultResponse
from bookvibe.schemas.user import RegisterResponse, UserCreate

logger = logging.getLogger(__name__)


def to_object_id(value: str) -> ObjectId:
    """
    Parse a 24-hex-character document id.

    Raises:
        ValueError: If the id is not a valid ObjectId
    """
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        raise ValueError("Invalid id")


class UserService:
    """Service for user operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with the Book-vibe database."""
        self.db = db
        self.users_collection = db[Collections.USERS]

    async def list_users(self) -> list[User]:
        """Return every user document."""
        docs = await self.users_collection.find().to_list(length=None)
        return [User.from_mongo(doc) for doc in docs]

    async def get_user_by_email(self, email: str) -> Optional[User]:
        """
        Get user by email.

        Args:
            email: User email address

        Returns:
            User model or None if not found
        """
        user_doc = await self.users_collection.find_one({"email": email})

        if not user_doc:
            return None

        return User.from_mongo(user_doc)

    async def is_admin(self, email: str) -> bool:
        """True if a user with this email holds the admin role."""
        user = await self.get_user_by_email(email)
        return user is not None and user.is_admin

    async def register_user(self, request: UserCreate) -> RegisterResponse:
        """
        Register a user unless the email is already taken.

        Args:
            request: Registration body

        Returns:
            RegisterResponse with the inserted id, or an "already exists"
            notice with a null id
        """
        existing = await self.users_collection.find_one({"email": request.email})
        if existing:
            return RegisterResponse(message="User already exists", inserted_id=None)

        user_doc = request.model_dump(exclude_none=True)
        user_doc["role"] = UserRole.DEFAULT.value

        result = await self.users_collection.insert_one(user_doc)
        logger.info(f"Registered user {request.email}")

        return RegisterResponse(
            acknowledged=result.acknowledged,
            inserted_id=str(result.inserted_id),
        )

    async def promote_to_admin(self, user_id: str) -> UpdateResultResponse:
        """
        Set role=admin on the user with this id.

        An unknown id matches nothing and reports zero counts.

        Raises:
            ValueError: If the id is malformed
        """
        result = await self.users_collection.update_one(
            {"_id": to_object_id(user_id)},
            {"$set": {"role": UserRole.ADMIN.value}},
        )
        logger.info(f"Promote user {user_id}: matched={result.matched_count}")
        return UpdateResultResponse.from_result(result)

    async def delete_user(self, user_id: str) -> DeleteResultResponse:
        """
        Delete the user with this id.

        An unknown id deletes nothing and reports ``deletedCount`` 0.

        Raises:
            ValueError: If the id is malformed
        """
        result = await self.users_collection.delete_one({"_id": to_object_id(user_id)})
        logger.info(f"Delete user {user_id}: deleted={result.deleted_count}")
        return DeleteResultResponse.from_result(result)
