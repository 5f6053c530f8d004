# Pydantic schemas package
from notes_api.schemas.base import (
    ApiResponse,
    ErrorResponse,
    ListResponse,
)

__all__ = [
    "ApiResponse",
    "ErrorResponse",
    "ListResponse",
]
