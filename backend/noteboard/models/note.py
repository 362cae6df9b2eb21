"""
Noteboard Backend: Note SQLAlchemy Model
=========================================

What:  ORM model representing the `notes` table.
How:   Inherits from the package's DeclarativeBase; Alembic reads this for migrations.
Who:   Used by SqlAlchemyNoteRepository and by Alembic for schema management.

Table Design:
    - UUID primary key generated in Python, so the same model runs on
      PostgreSQL and SQLite
    - title / content: TEXT, no length limit
    - color: hex code (#RRGGBB); updates are stored as sent
    - created_at / updated_at: UTC with timezone

    Index on updated_at DESC:
        The list endpoint returns the most recently updated notes first.
"""

import uuid
from datetime import datetime, timezone

from sqlalchemy import DateTime, Index, Text, Uuid
from sqlalchemy.orm import Mapped, mapped_column

from noteboard.database import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Note(Base):
    """
    A single note. Each row is an independent record with no relationships.

    Lifecycle:
        1. Inserted by the create operation (created_at == updated_at)
        2. Updated in place; only supplied columns change, updated_at advances
        3. Deleted by the remove operation (no soft delete)
    """

    __tablename__ = "notes"

    # ── Primary Key ───────────────────────────────────────────────────────
    id: Mapped[uuid.UUID] = mapped_column(
        Uuid(as_uuid=True),
        primary_key=True,
        default=uuid.uuid4,
        comment="Unique identifier assigned at creation",
    )

    # ── Content ───────────────────────────────────────────────────────────
    title: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Note title, non-empty when created",
    )

    content: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Note body, non-empty when created",
    )

    color: Mapped[str] = mapped_column(
        Text,
        nullable=False,
        comment="Hex color code; the service supplies DEFAULT_NOTE_COLOR when omitted",
    )

    # ── Timestamps ────────────────────────────────────────────────────────
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        comment="When this note was created (UTC)",
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=utcnow,
        comment="When this note was last modified (UTC)",
    )

    __table_args__ = (
        Index("idx_notes_updated_at", updated_at.desc()),
    )

    def __repr__(self) -> str:
        return f"<Note(id={self.id}, title='{self.title}', updated_at='{self.updated_at}')>"
