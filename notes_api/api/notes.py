"""
Notes API Endpoints.

REST API endpoints for note management. Write routes pass the decoded
body through NoteValidator before it reaches the store; read routes go
straight to the store.
"""

from fastapi import APIRouter

from notes_api.core.dependencies import Payload, Store, Validator
from notes_api.models.note import Note
from notes_api.schemas.base import ApiResponse, ListResponse

router = APIRouter()


@router.post(
    "",
    response_model=ApiResponse[Note],
    status_code=201,
    summary="Create a note",
    description="Create a new note with a title and content.",
)
async def create_note(
    payload: Payload,
    store: Store,
    validator: Validator,
) -> ApiResponse[Note]:
    """Create a new note."""
    data = validator.validate_create(payload)
    note = store.create(data.title, data.content)
    return ApiResponse(data=note, message="Note created successfully")


@router.get(
    "",
    response_model=ListResponse[Note],
    summary="List notes",
    description="Get every note in creation order.",
)
async def list_notes(store: Store) -> ListResponse[Note]:
    """List all notes."""
    notes = store.list()
    return ListResponse(
        data=notes,
        count=len(notes),
        message="Notes retrieved successfully",
    )


@router.get(
    "/{note_id}",
    response_model=ApiResponse[Note],
    summary="Get a note",
    description="Get a single note by ID.",
)
async def get_note(note_id: str, store: Store) -> ApiResponse[Note]:
    """Get a note by ID."""
    return ApiResponse(data=store.get(note_id), message="Note retrieved successfully")


@router.put(
    "/{note_id}",
    response_model=ApiResponse[Note],
    summary="Update a note",
    description="Update the title and/or content of a note. Omitted fields are unchanged.",
)
async def update_note(
    note_id: str,
    payload: Payload,
    store: Store,
    validator: Validator,
) -> ApiResponse[Note]:
    """Update a note."""
    data = validator.validate_update(payload)
    note = store.update(note_id, **data.changes())
    return ApiResponse(data=note, message="Note updated successfully")


@router.delete(
    "/{note_id}",
    response_model=ApiResponse[Note],
    summary="Delete a note",
    description="Permanently delete a note and return its last state.",
)
async def delete_note(note_id: str, store: Store) -> ApiResponse[Note]:
    """Delete a note."""
    return ApiResponse(data=store.delete(note_id), message="Note deleted successfully")
