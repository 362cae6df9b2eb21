"""
Noteboard Client: Text View Tests
==================================
"""

from datetime import datetime, timezone

from noteboard.client.state import BoardState
from noteboard.client.view import (
    EMPTY_TEXT,
    LOADING_TEXT,
    RETRY_HINT,
    format_timestamp,
    render_board,
)
from noteboard.schemas.note import NoteResponse

STAMP = datetime(2026, 1, 15, 9, 30, tzinfo=timezone.utc)


def make_note(title: str) -> NoteResponse:
    return NoteResponse(
        id=title.lower(),
        title=title,
        content=f"{title} body",
        color="#EF4444",
        created_at=STAMP,
        updated_at=STAMP,
    )


class TestRenderBoard:

    def test_loading_hides_notes(self):
        state = BoardState(notes=(make_note("Hidden"),), loading=True)

        output = render_board(state)

        assert output == LOADING_TEXT
        assert "Hidden" not in output

    def test_empty_state(self):
        assert render_board(BoardState()) == EMPTY_TEXT

    def test_notes_rendered_in_order(self):
        state = BoardState(notes=(make_note("Alpha"), make_note("Beta")))

        output = render_board(state)

        assert output.index("Alpha") < output.index("Beta")
        assert "[#EF4444] Alpha" in output
        assert "  Alpha body" in output
        assert "Jan 15, 09:30 AM" in output
        assert EMPTY_TEXT not in output

    def test_error_banner_above_content(self):
        state = BoardState(notes=(make_note("Alpha"),), error="Failed to delete note")

        lines = render_board(state).splitlines()

        assert lines[0] == f"Error: Failed to delete note ({RETRY_HINT})"
        assert "[#EF4444] Alpha" in lines[1]


def test_format_timestamp():
    assert format_timestamp(datetime(2026, 3, 7, 16, 5, tzinfo=timezone.utc)) == "Mar 07, 04:05 PM"
