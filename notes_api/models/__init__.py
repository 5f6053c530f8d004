# Domain models package
from notes_api.models.note import Note

__all__ = ["Note"]
