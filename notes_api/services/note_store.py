"""
Note Store.

Owns the authoritative in-memory collection of notes and executes
validated mutations. One lock guards the collection; every operation,
reads included, runs under it, so no caller can observe a half-applied
write (e.g. an id allocated but not yet appended).

Notes are frozen pydantic models. Updates swap in a modified copy, which
means callers only ever hold snapshots, never the live record.

Usage:
    store = NoteStore()
    note = store.create("Meeting Notes", "Discuss project timeline")
    store.update(note.id, title="Updated")
    store.delete(note.id)
"""

import threading
import uuid
from collections.abc import Callable
from datetime import datetime

from notes_api.core.exceptions import (
    InvalidContentError,
    InvalidTitleError,
    NoFieldsProvidedError,
    NotFoundError,
)
from notes_api.core.utils import MILLISECOND, utc_now
from notes_api.models.note import Note
from notes_api.services.base import BaseService


class NoteStore(BaseService):
    """
    In-memory note collection in insertion order.

    Args:
        clock: Source of the current time. Defaults to utc_now.
    """

    def __init__(self, clock: Callable[[], datetime] = utc_now) -> None:
        super().__init__()
        self._clock = clock
        self._notes: list[Note] = []
        self._lock = threading.Lock()

    def create(self, title: str, content: str) -> Note:
        """
        Append a new note.

        Title and content are expected to be validated and trimmed already.

        Returns:
            The created note

        Raises:
            InvalidTitleError / InvalidContentError: Blank value handed in
        """
        if not title or not title.strip():
            raise InvalidTitleError()
        if not content or not content.strip():
            raise InvalidContentError()

        with self._lock:
            now = self._clock()
            note = Note(
                id=str(uuid.uuid4()),
                title=title.strip(),
                content=content.strip(),
                created_at=now,
                updated_at=now,
            )
            self._notes.append(note)

        self._log_operation("Note created", note_id=note.id)
        return note

    def list(self) -> list[Note]:
        """All notes in insertion order. Empty list when there are none."""
        with self._lock:
            return list(self._notes)

    def get(self, note_id: str) -> Note:
        """
        Get a note by ID.

        Raises:
            NotFoundError: If no note has this ID
        """
        with self._lock:
            return self._notes[self._index_of(note_id)]

    def update(
        self,
        note_id: str,
        title: str | None = None,
        content: str | None = None,
    ) -> Note:
        """
        Apply the provided fields to an existing note.

        Fields left as None keep their current value. created_at is never
        touched; updated_at moves strictly forward.

        Returns:
            The updated note

        Raises:
            NotFoundError: If no note has this ID
            NoFieldsProvidedError: If both fields are None
        """
        changes = {}
        if title is not None:
            changes["title"] = title
        if content is not None:
            changes["content"] = content

        with self._lock:
            index = self._index_of(note_id)
            if not changes:
                raise NoFieldsProvidedError()

            current = self._notes[index]
            changes["updated_at"] = self._next_timestamp(current.updated_at)
            updated = current.model_copy(update=changes)
            self._notes[index] = updated

        self._log_operation(
            "Note updated",
            note_id=note_id,
            fields=[name for name in changes if name != "updated_at"],
        )
        return updated

    def delete(self, note_id: str) -> Note:
        """
        Remove a note. Survivors keep their relative order.

        Returns:
            The removed note, for echoing back to the caller

        Raises:
            NotFoundError: If no note has this ID
        """
        with self._lock:
            removed = self._notes.pop(self._index_of(note_id))

        self._log_operation("Note deleted", note_id=note_id)
        return removed

    def clear(self) -> None:
        """Drop every note. Test and admin support; not exposed over HTTP."""
        with self._lock:
            self._notes.clear()
        self._log_debug("Note store cleared")

    def count(self) -> int:
        """Number of live notes."""
        with self._lock:
            return len(self._notes)

    def _index_of(self, note_id: str) -> int:
        # Caller holds the lock.
        for index, note in enumerate(self._notes):
            if note.id == note_id:
                return index
        raise NotFoundError()

    def _next_timestamp(self, previous: datetime) -> datetime:
        now = self._clock()
        if now <= previous:
            return previous + MILLISECOND
        return now
