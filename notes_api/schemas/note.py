"""
Note Schemas.

Validated request values produced by NoteValidator. The routes never
build these from the raw body directly.
"""

from pydantic import BaseModel, ConfigDict


class NoteCreate(BaseModel):
    """Trimmed title and content for a new note."""

    title: str
    content: str

    model_config = ConfigDict(frozen=True)


class NoteUpdate(BaseModel):
    """Trimmed fields to change on an existing note. None means unchanged."""

    title: str | None = None
    content: str | None = None

    model_config = ConfigDict(frozen=True)

    def changes(self) -> dict[str, str]:
        """Fields that were provided, by name."""
        return self.model_dump(exclude_none=True)
