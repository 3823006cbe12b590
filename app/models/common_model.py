# /app/models/common_model.py

from typing import Generic, Optional, TypeVar

from pydantic import BaseModel, Field

RecordT = TypeVar("RecordT")


class MutationResult(BaseModel, Generic[RecordT]):
    """
    The response of every create and update: a success flag, the identity of
    the affected row and the row as stored.
    """
    success: bool = True
    id: int = Field(..., description="The identity of the created or updated record.")
    message: str
    data: Optional[RecordT] = None


class DeleteResult(BaseModel):
    success: bool = True
    message: str
