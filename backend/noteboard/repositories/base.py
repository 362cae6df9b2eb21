"""
Noteboard Backend: Abstract Note Repository
============================================

What:  Abstract base class defining the contract for note storage.
How:   Concrete stores inherit from NoteRepository and implement exactly the
       five operations the service needs. NoteService only ever talks to
       this interface, so the store technology can change without touching
       request handling.
Who:   Called by NoteService.

Implementations:
    - SqlAlchemyNoteRepository: async SQLAlchemy over the `notes` table
    - InMemoryNoteRepository: dict-backed store for tests and local runs
"""

import uuid
from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Dict, List, Optional

from noteboard.schemas.note import NoteResponse


def next_update_time(previous: datetime) -> datetime:
    """
    Timestamp for a modification that happens after `previous`.

    Returns the current UTC time, or one microsecond past `previous` when the
    clock has not moved on, so updated_at strictly advances on every update.
    """
    if previous.tzinfo is None:
        previous = previous.replace(tzinfo=timezone.utc)
    now = datetime.now(timezone.utc)
    if now <= previous:
        return previous + timedelta(microseconds=1)
    return now


_last_issued = datetime.min.replace(tzinfo=timezone.utc)


def issue_timestamp() -> datetime:
    """Current UTC time, strictly later than any value issued before in this process."""
    global _last_issued
    _last_issued = next_update_time(_last_issued)
    return _last_issued


def parse_note_id(note_id: str) -> Optional[uuid.UUID]:
    """
    Canonical form of a note id.

    Accepts every spelling uuid.UUID does (upper case, braces, urn:uuid:).
    Malformed ids map to None, which every store treats as "no record".
    """
    try:
        return uuid.UUID(str(note_id))
    except ValueError:
        return None


class NoteRepository(ABC):
    """
    Abstract interface for note persistence.

    Contract:
        - Missing records are reported as None (get, update) or False
          (delete); converting that to NotFoundError is the service's job
        - An id that is not a well-formed identifier is a missing record
        - Store-assigned fields (id, created_at, updated_at) are set here
        - Driver errors propagate; the service wraps them in DatabaseError
    """

    @abstractmethod
    async def create(self, title: str, content: str, color: str) -> NoteResponse:
        """Insert a new note and return it with its generated id and timestamps."""
        ...

    @abstractmethod
    async def list(self) -> List[NoteResponse]:
        """
        Return every note, most recently updated first.

        Ties on updated_at are broken by created_at, newest first.
        An empty store returns an empty list.
        """
        ...

    @abstractmethod
    async def get(self, note_id: str) -> Optional[NoteResponse]:
        """Return the note with this id, or None."""
        ...

    @abstractmethod
    async def update(self, note_id: str, changes: Dict[str, str]) -> Optional[NoteResponse]:
        """
        Apply `changes` to the note and refresh its updated_at.

        Only the keys present in `changes` are written; values are stored as
        given, empty strings included. Returns the updated note, or None when
        the id has no record.
        """
        ...

    @abstractmethod
    async def delete(self, note_id: str) -> bool:
        """Remove the note; True if a record was deleted, False if none existed."""
        ...
