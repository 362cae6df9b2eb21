"""
Noteboard Backend: Note Service (Business Logic)
=================================================

What:  The five note operations: create, list, get, update, remove.
How:   Applies the required-field rule on creation, delegates storage to a
       NoteRepository, converts "no record" results into NotFoundError and
       wraps unexpected store failures in DatabaseError.
Who:   Called by route handlers; calls exactly one repository method per
       operation.

Error Handling:
    ValidationError / NotFoundError propagate unchanged.
    Anything else raised by the repository is logged with its traceback and
    re-raised as DatabaseError, so driver details never reach the client.

NoteService holds no per-request state besides the repository it was built
with; a new instance is created for each request by get_note_service().
"""

import logging
from typing import List, Optional

from noteboard.config import settings
from noteboard.exceptions import DatabaseError, NoteboardError, NotFoundError, ValidationError
from noteboard.repositories.base import NoteRepository
from noteboard.schemas.note import NoteCreate, NoteResponse, NoteUpdate

logger = logging.getLogger(__name__)


class NoteService:
    """
    Business logic layer for note operations.

    Args:
        repository:    Store the operations run against
        default_color: Color given to notes created without one
    """

    def __init__(self, repository: NoteRepository, default_color: Optional[str] = None):
        self.repository = repository
        self.default_color = default_color or settings.default_note_color

    async def create_note(self, payload: NoteCreate) -> NoteResponse:
        """
        Insert a new note.

        Raises:
            ValidationError: title or content is missing or empty (→ 400)
            DatabaseError: the insert failed (→ 500)
        """
        if not payload.title:
            raise ValidationError(message="title should not be empty", field="title")
        if not payload.content:
            raise ValidationError(message="content should not be empty", field="content")

        color = payload.color or self.default_color
        try:
            note = await self.repository.create(
                title=payload.title,
                content=payload.content,
                color=color,
            )
        except Exception as e:
            raise self._store_failure("create", e)

        logger.info("Note %s created", note.id)
        return note

    async def list_notes(self) -> List[NoteResponse]:
        """All notes, most recently updated first. Never raises for an empty store."""
        try:
            return await self.repository.list()
        except Exception as e:
            raise self._store_failure("list", e)

    async def get_note(self, note_id: str) -> NoteResponse:
        """
        Retrieve a single note by id.

        Raises:
            NotFoundError: no note with this id (→ 404)
        """
        try:
            note = await self.repository.get(note_id)
        except Exception as e:
            raise self._store_failure("get", e, note_id)

        if note is None:
            raise NotFoundError(resource="note", resource_id=note_id)
        return note

    async def update_note(self, note_id: str, payload: NoteUpdate) -> NoteResponse:
        """
        Apply a partial update.

        Only the supplied fields change; empty strings are written as-is.
        An update with no fields still refreshes updated_at.

        Raises:
            NotFoundError: no note with this id (→ 404)
        """
        changes = payload.changes()
        try:
            note = await self.repository.update(note_id, changes)
        except Exception as e:
            raise self._store_failure("update", e, note_id)

        if note is None:
            raise NotFoundError(resource="note", resource_id=note_id)

        logger.info("Note %s updated (fields: %s)", note_id, ", ".join(sorted(changes)) or "none")
        return note

    async def delete_note(self, note_id: str) -> None:
        """
        Remove a note.

        Raises:
            NotFoundError: no note with this id (→ 404)
        """
        try:
            deleted = await self.repository.delete(note_id)
        except Exception as e:
            raise self._store_failure("delete", e, note_id)

        if not deleted:
            raise NotFoundError(resource="note", resource_id=note_id)
        logger.info("Note %s deleted", note_id)

    @staticmethod
    def _store_failure(operation: str, error: Exception, note_id: Optional[str] = None) -> NoteboardError:
        """Translate a repository exception into the error the caller should see."""
        if isinstance(error, NoteboardError):
            return error
        logger.error(
            "Store error during %s (note=%s): %s",
            operation,
            note_id or "-",
            str(error),
            exc_info=error,
        )
        context = {"operation": operation, "error_type": type(error).__name__}
        if note_id:
            context["note_id"] = note_id
        return DatabaseError(
            message=f"The note {operation} operation failed. Please try again.",
            context=context,
        )
