"""
Noteboard Client: Board Controller
===================================

What:  Turns user gestures into API calls and board state transitions.
How:   Holds the current BoardState and the open NoteForm (if any). Each
       gesture issues at most one request through NotesApi and dispatches
       the matching reducer action for its outcome. Failures are never
       retried; they become a visible error message.

Gestures:
    load() / retry()   fetch the full list (on mount, or from the error banner)
    open_create()      open an empty form
    open_edit(id)      open a form pre-filled from the note
    cancel_form()      close the form without saving
    submit_form()      create or update, depending on how the form was opened
    delete(id)         ask for confirmation, then remove
"""

import logging
from typing import Callable, Optional

from noteboard.client.api import NotesApi, NotesApiError
from noteboard.client.form import NoteForm
from noteboard.client.state import (
    Action,
    BoardState,
    Created,
    Deleted,
    ErrorDismissed,
    Errored,
    LoadStarted,
    Loaded,
    Updated,
    reduce,
)
from noteboard.schemas.note import NoteResponse

logger = logging.getLogger(__name__)

LOAD_ERROR = "Failed to load notes. Make sure the backend server is running."
CREATE_ERROR = "Failed to create note"
UPDATE_ERROR = "Failed to update note"
DELETE_ERROR = "Failed to delete note"

ConfirmDelete = Callable[[NoteResponse], bool]


class NoteBoard:
    """
    View-model of the notes page.

    Args:
        api:     NotesApi used for every remote call
        confirm: Called with the note before a delete; returning False
                 cancels the delete without contacting the service
    """

    def __init__(self, api: NotesApi, confirm: ConfirmDelete):
        self.api = api
        self.confirm = confirm
        self.state = BoardState()
        self.form: Optional[NoteForm] = None

    def dispatch(self, action: Action) -> BoardState:
        self.state = reduce(self.state, action)
        return self.state

    # ── Loading ───────────────────────────────────────────────────────────

    async def load(self) -> bool:
        """Fetch every note, replacing the local list. False on failure."""
        self.dispatch(LoadStarted())
        try:
            notes = await self.api.list_notes()
        except NotesApiError as e:
            logger.error("Failed to load notes: %s", e.message)
            self.dispatch(Errored(LOAD_ERROR))
            return False
        self.dispatch(Loaded(tuple(notes)))
        return True

    async def retry(self) -> bool:
        return await self.load()

    def dismiss_error(self) -> None:
        self.dispatch(ErrorDismissed())

    # ── Form ──────────────────────────────────────────────────────────────

    def open_create(self) -> NoteForm:
        self.form = NoteForm.blank()
        return self.form

    def open_edit(self, note_id: str) -> NoteForm:
        note = self.state.find(note_id)
        if note is None:
            raise KeyError(f"No note with id '{note_id}' on the board")
        self.form = NoteForm.for_note(note)
        return self.form

    def cancel_form(self) -> None:
        self.form = None

    async def submit_form(self) -> bool:
        """
        Save the open form.

        Returns False, leaving the form open, when there is no form, when
        title or content is blank, or when the service call fails.
        """
        form = self.form
        if form is None or not form.can_submit():
            return False

        try:
            if form.is_edit:
                note = await self.api.update_note(form.note_id, form.payload())
            else:
                note = await self.api.create_note(form.payload())
        except NotesApiError as e:
            message = UPDATE_ERROR if form.is_edit else CREATE_ERROR
            logger.error("%s: %s", message, e.message)
            self.dispatch(Errored(message))
            return False

        self.dispatch(Updated(note) if form.is_edit else Created(note))
        self.form = None
        return True

    # ── Delete ────────────────────────────────────────────────────────────

    async def delete(self, note_id: str) -> bool:
        """Remove a note after the user confirms. False if declined or failed."""
        note = self.state.find(note_id)
        if note is None:
            raise KeyError(f"No note with id '{note_id}' on the board")
        if not self.confirm(note):
            return False

        try:
            await self.api.delete_note(note_id)
        except NotesApiError as e:
            logger.error("%s: %s", DELETE_ERROR, e.message)
            self.dispatch(Errored(DELETE_ERROR))
            return False

        self.dispatch(Deleted(note_id))
        return True
