"""
Noteboard Backend: Request Dependencies
========================================

What:  FastAPI dependencies that assemble the per-request service stack.
How:   get_db_session → get_note_repository → get_note_service.
       Tests replace get_note_repository through app.dependency_overrides to
       run every route against a substitute store.
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from noteboard.database import get_db_session
from noteboard.repositories.base import NoteRepository
from noteboard.repositories.sqlalchemy_repository import SqlAlchemyNoteRepository
from noteboard.services.note_service import NoteService


async def get_note_repository(
    session: AsyncSession = Depends(get_db_session),
) -> NoteRepository:
    """SQLAlchemy repository bound to this request's session."""
    return SqlAlchemyNoteRepository(session)


async def get_note_service(
    request: Request,
    repository: NoteRepository = Depends(get_note_repository),
) -> NoteService:
    """NoteService for one request, using the app's configured default color."""
    return NoteService(repository, default_color=request.app.state.settings.default_note_color)
