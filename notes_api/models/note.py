"""
Note Model.

The sole entity of the service. Instances are frozen: the store replaces
a note with an updated copy instead of mutating it, so every Note handed
to a caller is already an immutable snapshot.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field, field_serializer
from pydantic.alias_generators import to_camel

from notes_api.core.utils import format_timestamp


class Note(BaseModel):
    """A note as held by the store and returned over the wire."""

    id: str = Field(description="Note unique identifier (UUID4)")
    title: str = Field(description="Note title")
    content: str = Field(description="Note content")
    created_at: datetime = Field(description="Creation timestamp")
    updated_at: datetime = Field(description="Last update timestamp")

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    @field_serializer("created_at", "updated_at")
    def _serialize_timestamp(self, value: datetime) -> str:
        return format_timestamp(value)

    def to_json(self) -> dict:
        """Wire representation: {id, title, content, createdAt, updatedAt}."""
        return self.model_dump(mode="json", by_alias=True)
