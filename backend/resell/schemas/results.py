from typing import Literal, Optional

from pydantic import BaseModel


class InsertResultOut(BaseModel):
    acknowledged: bool
    insertedId: str


class UpdateResultOut(BaseModel):
    acknowledged: bool
    matchedCount: int
    modifiedCount: int
    upsertedCount: int = 0
    upsertedId: Optional[str] = None


class DeleteResultOut(BaseModel):
    acknowledged: bool
    deletedCount: int


class SoftFailureOut(BaseModel):
    """Returned with HTTP 200 when a write was skipped (already exists / already ordered)."""

    acknowledged: Literal[False] = False
    message: str
