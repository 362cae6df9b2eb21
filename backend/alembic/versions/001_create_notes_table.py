"""Create notes table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `notes` table holding every note as an independent row.
How:   Portable column types (UUID via sa.Uuid, TIMESTAMP WITH TIME ZONE) so the
       same revision runs on PostgreSQL and SQLite.

Rollback: downgrade() drops the table entirely (all notes are lost).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the notes table and its updated_at index."""
    op.create_table(
        "notes",
        sa.Column(
            "id",
            sa.Uuid(as_uuid=True),
            nullable=False,
            comment="Unique identifier assigned at creation",
        ),
        sa.Column(
            "title",
            sa.Text(),
            nullable=False,
            comment="Note title, non-empty when created",
        ),
        sa.Column(
            "content",
            sa.Text(),
            nullable=False,
            comment="Note body, non-empty when created",
        ),
        sa.Column(
            "color",
            sa.Text(),
            nullable=False,
            comment="Hex color code; the service supplies DEFAULT_NOTE_COLOR when omitted",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this note was created (UTC)",
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this note was last modified (UTC)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )

    # The list endpoint sorts by updated_at DESC
    op.create_index(
        "idx_notes_updated_at",
        "notes",
        [sa.text("updated_at DESC")],
    )


def downgrade() -> None:
    """Drop the notes table. Destructive: every note is deleted."""
    op.drop_index("idx_notes_updated_at", table_name="notes")
    op.drop_table("notes")
