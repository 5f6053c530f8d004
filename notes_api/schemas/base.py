"""
Base Schemas.

Response envelopes shared by every endpoint.
"""

from typing import Generic, TypeVar

from pydantic import BaseModel

DataT = TypeVar("DataT")


class ApiResponse(BaseModel, Generic[DataT]):
    """
    Standard success envelope.

    {"success": true, "data": ..., "message": "..."}
    """

    success: bool = True
    data: DataT
    message: str


class ListResponse(BaseModel, Generic[DataT]):
    """Success envelope for collections, with an item count."""

    success: bool = True
    data: list[DataT]
    count: int
    message: str


class ErrorResponse(BaseModel):
    """
    Standard error envelope.

    `error` is the category (Bad Request, Validation Error, Not Found,
    Internal Server Error). `stack` is only populated when detailed errors
    are enabled and is dropped from the payload otherwise.
    """

    success: bool = False
    error: str
    message: str
    stack: str | None = None


# Example usage:
#
# @router.get("/notes/{note_id}", response_model=ApiResponse[Note])
# async def get_note(note_id: str, store: Store):
#     return ApiResponse(data=store.get(note_id), message="Note retrieved successfully")
