"""
Base model for MongoDB documents.
"""
from typing import Any, Optional

from bson import ObjectId
from pydantic import BaseModel, Field, field_validator


def stringify_object_ids(value: Any) -> Any:
    """Recursively replace ObjectId values with their hex string."""
    if isinstance(value, ObjectId):
        return str(value)
    if isinstance(value, dict):
        return {k: stringify_object_ids(v) for k, v in value.items()}
    if isinstance(value, list):
        return [stringify_object_ids(v) for v in value]
    return value


class MongoDocument(BaseModel):
    """
    Loosely-typed document: ``_id`` plus whatever fields the collection holds.

    Serialized by alias so the identifier keeps its ``_id`` key on the wire.
    """
    id: Optional[str] = Field(None, alias="_id", description="MongoDB ObjectId as string")

    class Config:
        populate_by_name = True
        extra = "allow"

    @field_validator("id", mode="before")
    @classmethod
    def _object_id_to_str(cls, value: Any) -> Any:
        if isinstance(value, ObjectId):
            return str(value)
        return value

    @classmethod
    def from_mongo(cls, doc: dict[str, Any]):
        """Build a model from a raw document, stringifying nested ObjectIds."""
        return cls.model_validate(stringify_object_ids(doc))
