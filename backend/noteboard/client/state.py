"""
Noteboard Client: Board State and Reducer
==========================================

What:  Immutable state of the note board and the actions that change it.
How:   reduce(state, action) returns a new BoardState; nothing mutates a
       state in place. NoteBoard dispatches one action per remote result, so
       every UI transition can be tested without HTTP.

Actions:
    LoadStarted   → loading on, error cleared
    Loaded        → notes replaced, loading off
    Created       → note prepended
    Updated       → entry with the same id replaced
    Deleted       → entry with the id removed
    Errored       → error message set, loading off, notes untouched
    ErrorDismissed→ error cleared
"""

from dataclasses import dataclass, field, replace
from typing import Optional, Tuple, Union

from noteboard.schemas.note import NoteResponse


@dataclass(frozen=True)
class BoardState:
    """Everything the board view renders."""
    notes: Tuple[NoteResponse, ...] = ()
    loading: bool = False
    error: Optional[str] = None

    def find(self, note_id: str) -> Optional[NoteResponse]:
        for note in self.notes:
            if note.id == note_id:
                return note
        return None


# ── Actions ───────────────────────────────────────────────────────────────

@dataclass(frozen=True)
class LoadStarted:
    pass


@dataclass(frozen=True)
class Loaded:
    notes: Tuple[NoteResponse, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Created:
    note: NoteResponse


@dataclass(frozen=True)
class Updated:
    note: NoteResponse


@dataclass(frozen=True)
class Deleted:
    note_id: str


@dataclass(frozen=True)
class Errored:
    message: str


@dataclass(frozen=True)
class ErrorDismissed:
    pass


Action = Union[LoadStarted, Loaded, Created, Updated, Deleted, Errored, ErrorDismissed]


def reduce(state: BoardState, action: Action) -> BoardState:
    """Apply one action to a board state and return the resulting state."""
    if isinstance(action, LoadStarted):
        return replace(state, loading=True, error=None)
    if isinstance(action, Loaded):
        return replace(state, notes=tuple(action.notes), loading=False)
    if isinstance(action, Created):
        return replace(state, notes=(action.note,) + state.notes)
    if isinstance(action, Updated):
        notes = tuple(
            action.note if note.id == action.note.id else note
            for note in state.notes
        )
        return replace(state, notes=notes)
    if isinstance(action, Deleted):
        notes = tuple(note for note in state.notes if note.id != action.note_id)
        return replace(state, notes=notes)
    if isinstance(action, Errored):
        return replace(state, error=action.message, loading=False)
    if isinstance(action, ErrorDismissed):
        return replace(state, error=None)
    raise TypeError(f"Unknown board action: {action!r}")
