"""
Noteboard Client: Reducer Tests
================================

Every action applied to a known state, checked without HTTP.
"""

from datetime import datetime, timedelta, timezone

import pytest

from noteboard.client.state import (
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

T0 = datetime(2026, 1, 15, 9, 30, tzinfo=timezone.utc)


def make_note(note_id: str, title: str = "Note", minutes: int = 0) -> NoteResponse:
    stamp = T0 + timedelta(minutes=minutes)
    return NoteResponse(
        id=note_id,
        title=title,
        content=f"{title} content",
        color="#3B82F6",
        created_at=stamp,
        updated_at=stamp,
    )


class TestReducer:

    def test_load_started_sets_loading_and_clears_error(self):
        state = BoardState(error="Failed to delete note")

        new_state = reduce(state, LoadStarted())

        assert new_state.loading is True
        assert new_state.error is None

    def test_loaded_replaces_notes(self):
        state = BoardState(notes=(make_note("old"),), loading=True)
        fresh = (make_note("a"), make_note("b"))

        new_state = reduce(state, Loaded(fresh))

        assert new_state.notes == fresh
        assert new_state.loading is False

    def test_created_prepends(self):
        state = BoardState(notes=(make_note("a"),))

        new_state = reduce(state, Created(make_note("b")))

        assert [n.id for n in new_state.notes] == ["b", "a"]

    def test_updated_replaces_matching_entry_in_place(self):
        state = BoardState(notes=(make_note("a"), make_note("b"), make_note("c")))
        changed = make_note("b", title="Changed", minutes=5)

        new_state = reduce(state, Updated(changed))

        assert [n.id for n in new_state.notes] == ["a", "b", "c"]
        assert new_state.find("b").title == "Changed"

    def test_deleted_removes_entry(self):
        state = BoardState(notes=(make_note("a"), make_note("b")))

        new_state = reduce(state, Deleted("a"))

        assert [n.id for n in new_state.notes] == ["b"]

    def test_errored_keeps_notes(self):
        notes = (make_note("a"),)
        state = BoardState(notes=notes, loading=True)

        new_state = reduce(state, Errored("Failed to load notes"))

        assert new_state.error == "Failed to load notes"
        assert new_state.loading is False
        assert new_state.notes == notes

    def test_error_dismissed(self):
        state = BoardState(error="boom")
        assert reduce(state, ErrorDismissed()).error is None

    def test_reduce_does_not_mutate_input(self):
        state = BoardState(notes=(make_note("a"),))

        reduce(state, Deleted("a"))

        assert [n.id for n in state.notes] == ["a"]

    def test_unknown_action_rejected(self):
        with pytest.raises(TypeError):
            reduce(BoardState(), object())
