"""
Write-result schemas mirroring MongoDB's insert/update/delete acknowledgements.
"""
from typing import Optional

from pydantic import BaseModel, Field
from pymongo.results import DeleteResult, InsertOneResult, UpdateResult


class InsertResultResponse(BaseModel):
    """Result of a single-document insert."""
    acknowledged: bool = Field(..., description="Write acknowledged by server")
    inserted_id: Optional[str] = Field(None, alias="insertedId", description="New document id")

    class Config:
        populate_by_name = True

    @classmethod
    def from_result(cls, result: InsertOneResult) -> "InsertResultResponse":
        return cls(acknowledged=result.acknowledged, inserted_id=str(result.inserted_id))


class UpdateResultResponse(BaseModel):
    """Result of a single-document update."""
    acknowledged: bool = Field(..., description="Write acknowledged by server")
    matched_count: int = Field(..., alias="matchedCount")
    modified_count: int = Field(..., alias="modifiedCount")
    upserted_count: int = Field(0, alias="upsertedCount")
    upserted_id: Optional[str] = Field(None, alias="upsertedId")

    class Config:
        populate_by_name = True

    @classmethod
    def from_result(cls, result: UpdateResult) -> "UpdateResultResponse":
        upserted_id = result.upserted_id
        return cls(
            acknowledged=result.acknowledged,
            matched_count=result.matched_count,
            modified_count=result.modified_count,
            upserted_count=1 if upserted_id is not None else 0,
            upserted_id=str(upserted_id) if upserted_id is not None else None,
        )


class DeleteResultResponse(BaseModel):
    """Result of a single-document delete."""
    acknowledged: bool = Field(..., description="Write acknowledged by server")
    deleted_count: int = Field(..., alias="deletedCount")

    class Config:
        populate_by_name = True

    @classmethod
    def from_result(cls, result: DeleteResult) -> "DeleteResultResponse":
        return cls(acknowledged=result.acknowledged, deleted_count=result.deleted_count)
