"""
Noteboard Backend: SQLAlchemy Note Repository
==============================================

What:  NoteRepository backed by the `notes` table through an AsyncSession.
How:   One repository per request, wrapping the request's session. Writes are
       committed before the method returns, so a failed commit surfaces as
       an error of that operation rather than after the response is sent.

Query plans:
    list:   SELECT ... ORDER BY updated_at DESC, created_at DESC
            → idx_notes_updated_at
    get:    SELECT ... WHERE id = :uuid → primary key lookup
"""

import logging
from typing import Dict, List, Optional

from sqlalchemy import desc, select
from sqlalchemy.ext.asyncio import AsyncSession

from noteboard.models.note import Note
from noteboard.repositories.base import (
    NoteRepository,
    issue_timestamp,
    next_update_time,
    parse_note_id,
)
from noteboard.schemas.note import NoteResponse

logger = logging.getLogger(__name__)


class SqlAlchemyNoteRepository(NoteRepository):
    """
    Note storage on top of async SQLAlchemy.

    Args:
        session: AsyncSession owned by the caller (one per request)
    """

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _load(self, note_id: str) -> Optional[Note]:
        key = parse_note_id(note_id)
        if key is None:
            return None
        result = await self.session.execute(select(Note).where(Note.id == key))
        return result.scalar_one_or_none()

    async def create(self, title: str, content: str, color: str) -> NoteResponse:
        # created_at and updated_at start out identical; issue_timestamp keeps
        # inserts from this process strictly ordered
        now = issue_timestamp()
        note = Note(title=title, content=content, color=color, created_at=now, updated_at=now)
        self.session.add(note)
        await self.session.commit()
        logger.debug("Inserted note row %s", note.id)
        return NoteResponse.model_validate(note)

    async def list(self) -> List[NoteResponse]:
        result = await self.session.execute(
            select(Note).order_by(desc(Note.updated_at), desc(Note.created_at))
        )
        return [NoteResponse.model_validate(note) for note in result.scalars().all()]

    async def get(self, note_id: str) -> Optional[NoteResponse]:
        note = await self._load(note_id)
        if note is None:
            return None
        return NoteResponse.model_validate(note)

    async def update(self, note_id: str, changes: Dict[str, str]) -> Optional[NoteResponse]:
        note = await self._load(note_id)
        if note is None:
            return None
        for field, value in changes.items():
            setattr(note, field, value)
        note.updated_at = next_update_time(note.updated_at)
        await self.session.commit()
        return NoteResponse.model_validate(note)

    async def delete(self, note_id: str) -> bool:
        note = await self._load(note_id)
        if note is None:
            return False
        await self.session.delete(note)
        await self.session.commit()
        return True
