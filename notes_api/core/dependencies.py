"""
FastAPI Dependencies.

Shared dependencies for request handling. The note store and validator
are created by create_app() and kept on app.state; routes receive them
through these dependencies instead of importing a module-level instance.
"""

import json
from typing import Annotated, Any

from fastapi import Depends, Request

from notes_api.core.exceptions import MalformedBodyError
from notes_api.core.logging import get_logger
from notes_api.services.note_store import NoteStore
from notes_api.services.validation import NoteValidator

logger = get_logger(__name__)

FORM_CONTENT_TYPES = ("application/x-www-form-urlencoded", "multipart/form-data")


def get_note_store(request: Request) -> NoteStore:
    """Note store owned by the running application."""
    return request.app.state.note_store


def get_note_validator(request: Request) -> NoteValidator:
    """Validator configured with the application's field limits."""
    return request.app.state.note_validator


Store = Annotated[NoteStore, Depends(get_note_store)]
Validator = Annotated[NoteValidator, Depends(get_note_validator)]


async def get_payload(request: Request) -> dict[str, Any]:
    """
    Decode the request body into a loose key/value mapping.

    JSON and URL-encoded form bodies are accepted. An absent body, or a
    JSON value that is not an object, decodes to an empty mapping; shape
    checks are left to NoteValidator.

    Raises:
        MalformedBodyError: If a JSON body cannot be parsed
    """
    content_type = request.headers.get("content-type", "").split(";")[0].strip().lower()

    if content_type in FORM_CONTENT_TYPES:
        form = await request.form()
        return dict(form)

    body = await request.body()
    if not body.strip():
        return {}

    try:
        decoded = json.loads(body)
    except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as e:
        logger.warning(
            "Request body is not valid JSON",
            extra={"content_type": content_type, "error": str(e)},
        )
        raise MalformedBodyError() from e

    if not isinstance(decoded, dict):
        return {}
    return decoded


Payload = Annotated[dict[str, Any], Depends(get_payload)]
