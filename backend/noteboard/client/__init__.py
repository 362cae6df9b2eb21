"""
Noteboard Client
================

The user-facing half of Noteboard, without a browser:

    - api.py:   NotesApi, the HTTP wrapper around /notes
    - state.py: BoardState plus the reducer and its action set
    - form.py:  NoteForm, the color palette and submission rules
    - board.py: NoteBoard, which maps user gestures to API calls and actions
    - view.py:  plain-text rendering of a board state
"""

from noteboard.client.api import NotesApi, NotesApiError
from noteboard.client.board import NoteBoard
from noteboard.client.form import DEFAULT_COLOR, PALETTE, NoteForm
from noteboard.client.state import BoardState, reduce

__all__ = [
    "NotesApi",
    "NotesApiError",
    "NoteBoard",
    "NoteForm",
    "PALETTE",
    "DEFAULT_COLOR",
    "BoardState",
    "reduce",
]
