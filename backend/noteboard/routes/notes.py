"""
Noteboard Backend: Notes Route Handlers
========================================

What:  The five REST operations over the Note resource.
How:   Parses the body, delegates to NoteService, returns JSON. Errors raised
       by the service are turned into responses by the global handlers in
       main.py; no route catches exceptions itself.
Who:   Called by the note client (noteboard.client.api.NotesApi).

Endpoints:
    POST   /notes        → 201 + Note        (400 if title/content missing)
    GET    /notes        → 200 + [Note]
    GET    /notes/{id}   → 200 + Note        (404 if absent)
    PATCH  /notes/{id}   → 200 + Note        (404 if absent)
    DELETE /notes/{id}   → 204               (404 if absent)

The id path parameter is a plain string: an id that is not a valid
identifier answers 404 like any other unknown id, not 422.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Depends, Response, status

from noteboard.dependencies import get_note_service
from noteboard.schemas.note import ErrorResponse, NoteCreate, NoteResponse, NoteUpdate
from noteboard.services.note_service import NoteService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/notes", tags=["Notes"])

_NOT_FOUND = {404: {"description": "Note not found", "model": ErrorResponse}}


@router.post(
    "",
    response_model=NoteResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"description": "title or content missing", "model": ErrorResponse}},
    summary="Create a note",
)
async def create_note(
    payload: NoteCreate,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    """Create a note; color falls back to the configured default."""
    return await service.create_note(payload)


@router.get(
    "",
    response_model=List[NoteResponse],
    summary="List all notes",
    description="Returns every note, most recently updated first. No pagination.",
)
async def list_notes(
    service: NoteService = Depends(get_note_service),
) -> List[NoteResponse]:
    return await service.list_notes()


@router.get(
    "/{note_id}",
    response_model=NoteResponse,
    responses=_NOT_FOUND,
    summary="Get a single note by ID",
)
async def get_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    return await service.get_note(note_id)


@router.patch(
    "/{note_id}",
    response_model=NoteResponse,
    responses=_NOT_FOUND,
    summary="Update some fields of a note",
    description=(
        "Applies only the supplied fields (title, content, color). "
        "Empty strings are stored as sent; the note's updatedAt is refreshed. "
        "A request without a body changes no fields."
    ),
)
async def update_note(
    note_id: str,
    payload: Optional[NoteUpdate] = None,
    service: NoteService = Depends(get_note_service),
) -> NoteResponse:
    return await service.update_note(note_id, payload or NoteUpdate())


@router.delete(
    "/{note_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_NOT_FOUND,
    summary="Delete a note",
)
async def delete_note(
    note_id: str,
    service: NoteService = Depends(get_note_service),
) -> Response:
    await service.delete_note(note_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
