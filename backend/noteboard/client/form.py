"""
Noteboard Client: Note Edit Form
=================================

What:  The create/edit form and its submission rules.
How:   NoteForm holds the field values the user is typing. It can only be
       submitted when title and content are non-empty after trimming; the
       payload it produces carries trimmed title/content and the color, never
       the note id.
"""

from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from noteboard.schemas.note import NoteResponse

# Blue, green, yellow, red, purple, orange
PALETTE: Tuple[str, ...] = (
    "#3B82F6",
    "#10B981",
    "#F59E0B",
    "#EF4444",
    "#8B5CF6",
    "#F97316",
)
DEFAULT_COLOR = PALETTE[0]


@dataclass
class NoteForm:
    """
    Field values of an open form.

    Attributes:
        note_id: id of the note being edited; None for a new note
    """
    title: str = ""
    content: str = ""
    color: str = DEFAULT_COLOR
    note_id: Optional[str] = None

    @classmethod
    def blank(cls) -> "NoteForm":
        return cls()

    @classmethod
    def for_note(cls, note: NoteResponse) -> "NoteForm":
        """A form pre-filled with an existing note's fields."""
        return cls(title=note.title, content=note.content, color=note.color, note_id=note.id)

    @property
    def is_edit(self) -> bool:
        return self.note_id is not None

    def choose_color(self, color: str) -> None:
        """Pick one of the palette colors."""
        if color not in PALETTE:
            raise ValueError(f"Color '{color}' is not in the palette: {', '.join(PALETTE)}")
        self.color = color

    def can_submit(self) -> bool:
        return bool(self.title.strip()) and bool(self.content.strip())

    def payload(self) -> Dict[str, str]:
        """Fields sent to the service on submit: title, content, color."""
        return {
            "title": self.title.strip(),
            "content": self.content.strip(),
            "color": self.color,
        }
