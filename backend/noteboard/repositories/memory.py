"""
Noteboard Backend: In-Memory Note Repository
=============================================

What:  NoteRepository that keeps notes in a dict.
Who:   Tests (as a substitute store injected through dependency overrides)
       and quick local runs without a database.

Not shared between processes and lost on restart.
"""

import uuid
from datetime import datetime, timezone
from typing import Dict, List, Optional

from noteboard.repositories.base import NoteRepository, next_update_time, parse_note_id
from noteboard.schemas.note import NoteResponse


class InMemoryNoteRepository(NoteRepository):
    """Dict-backed note store keyed by canonical id string, in insertion order."""

    def __init__(self):
        self._notes: Dict[str, NoteResponse] = {}
        self._clock = datetime.min.replace(tzinfo=timezone.utc)

    def __len__(self) -> int:
        return len(self._notes)

    def _tick(self) -> datetime:
        """Store-wide write time; every create and update gets a later one."""
        self._clock = next_update_time(self._clock)
        return self._clock

    async def create(self, title: str, content: str, color: str) -> NoteResponse:
        now = self._tick()
        note = NoteResponse(
            id=str(uuid.uuid4()),
            title=title,
            content=content,
            color=color,
            created_at=now,
            updated_at=now,
        )
        self._notes[note.id] = note
        return note

    async def list(self) -> List[NoteResponse]:
        # Newest insertion first, then a stable sort keeps that order for ties
        newest_first = list(reversed(self._notes.values()))
        return sorted(
            newest_first,
            key=lambda note: (note.updated_at, note.created_at),
            reverse=True,
        )

    @staticmethod
    def _key(note_id: str) -> Optional[str]:
        key = parse_note_id(note_id)
        return None if key is None else str(key)

    async def get(self, note_id: str) -> Optional[NoteResponse]:
        return self._notes.get(self._key(note_id))

    async def update(self, note_id: str, changes: Dict[str, str]) -> Optional[NoteResponse]:
        key = self._key(note_id)
        note = self._notes.get(key)
        if note is None:
            return None
        updated = note.model_copy(
            update={**changes, "updated_at": self._tick()}
        )
        self._notes[key] = updated
        return updated

    async def delete(self, note_id: str) -> bool:
        return self._notes.pop(self._key(note_id), None) is not None
