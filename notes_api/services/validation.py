"""
Note Validator.

Gate-keeps the two write paths. Takes the loosely-typed body decoded by
the request layer and either returns a validated request value or raises
one of the taxonomy errors. Never touches the store.

Check order for create is fixed and the first failure wins:
    empty body -> title present/string/non-blank -> content present/string/non-blank
    -> title length -> content length
"""

from collections.abc import Mapping
from typing import Any

from notes_api.core.exceptions import (
    ContentTooLongError,
    EmptyBodyError,
    InvalidContentError,
    InvalidTitleError,
    NoFieldsProvidedError,
    TitleTooLongError,
)
from notes_api.schemas.note import NoteCreate, NoteUpdate

DEFAULT_TITLE_MAX_LENGTH = 200
DEFAULT_CONTENT_MAX_LENGTH = 5000


def _trimmed_text(value: Any) -> str | None:
    """Trimmed string, or None if value is not a string or is blank."""
    if not isinstance(value, str):
        return None
    trimmed = value.strip()
    return trimmed or None


class NoteValidator:
    """Validates create and update payloads."""

    def __init__(
        self,
        title_max_length: int = DEFAULT_TITLE_MAX_LENGTH,
        content_max_length: int = DEFAULT_CONTENT_MAX_LENGTH,
    ) -> None:
        self.title_max_length = title_max_length
        self.content_max_length = content_max_length

    def validate_create(self, payload: Mapping[str, Any] | None) -> NoteCreate:
        """
        Validate a creation payload.

        Args:
            payload: Raw request body as a key/value mapping

        Returns:
            NoteCreate with trimmed title and content

        Raises:
            EmptyBodyError: Payload missing or has no keys
            InvalidTitleError: Title missing, not a string, or blank
            InvalidContentError: Content missing, not a string, or blank
            TitleTooLongError: Trimmed title over the limit
            ContentTooLongError: Trimmed content over the limit
        """
        if not payload:
            raise EmptyBodyError()

        title = _trimmed_text(payload.get("title"))
        if title is None:
            raise InvalidTitleError()

        content = _trimmed_text(payload.get("content"))
        if content is None:
            raise InvalidContentError()

        if len(title) > self.title_max_length:
            raise TitleTooLongError(self.title_max_length)
        if len(content) > self.content_max_length:
            raise ContentTooLongError(self.content_max_length)

        return NoteCreate(title=title, content=content)

    def validate_update(self, payload: Mapping[str, Any] | None) -> NoteUpdate:
        """
        Validate an update payload.

        Either field may be omitted (or null) to leave it unchanged, but at
        least one must be present. Present fields follow the same rules and
        limits as create.

        Args:
            payload: Raw request body as a key/value mapping

        Returns:
            NoteUpdate holding the trimmed fields that were provided

        Raises:
            NoFieldsProvidedError: Neither title nor content provided
            InvalidTitleError / InvalidContentError: Field not a non-blank string
            TitleTooLongError / ContentTooLongError: Field over the limit
        """
        payload = payload or {}
        raw_title = payload.get("title")
        raw_content = payload.get("content")

        if raw_title is None and raw_content is None:
            raise NoFieldsProvidedError()

        title = None
        if raw_title is not None:
            title = _trimmed_text(raw_title)
            if title is None:
                raise InvalidTitleError()

        content = None
        if raw_content is not None:
            content = _trimmed_text(raw_content)
            if content is None:
                raise InvalidContentError()

        if title is not None and len(title) > self.title_max_length:
            raise TitleTooLongError(self.title_max_length)
        if content is not None and len(content) > self.content_max_length:
            raise ContentTooLongError(self.content_max_length)

        return NoteUpdate(title=title, content=content)
