"""
Noteboard Client: Text View
============================

Renders a BoardState as plain text. While loading, only the loading
indicator is shown; an error adds a banner with a retry hint above whatever
else is on screen.
"""

from datetime import datetime
from typing import List

from noteboard.client.state import BoardState
from noteboard.schemas.note import NoteResponse

LOADING_TEXT = "Loading notes..."
EMPTY_TEXT = "No notes yet. Create your first note to get started!"
RETRY_HINT = "Try again"


def format_timestamp(value: datetime) -> str:
    """e.g. 'Jan 15, 09:30 AM'."""
    return value.strftime("%b %d, %I:%M %p")


def render_note(note: NoteResponse) -> str:
    return "\n".join(
        [
            f"[{note.color}] {note.title}",
            f"  {note.content}",
            f"  {format_timestamp(note.updated_at)}",
        ]
    )


def render_board(state: BoardState) -> str:
    lines: List[str] = []
    if state.error:
        lines.append(f"Error: {state.error} ({RETRY_HINT})")

    if state.loading:
        lines.append(LOADING_TEXT)
    elif not state.notes:
        lines.append(EMPTY_TEXT)
    else:
        lines.extend(render_note(note) for note in state.notes)

    return "\n".join(lines)
