"""Create generation_sources and flashcards tables.

Revision ID: 001
Revises:
Create Date: 2026-10-17

"""

from collections.abc import Sequence

import sqlalchemy as sa

from alembic import op

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Create generation_sources and flashcards tables."""
    op.create_table(
        "generation_sources",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("input_text_hash", sa.String(64), nullable=False),
        sa.Column("model_name", sa.String(255), nullable=True),
        sa.Column("total_generated", sa.Integer(), server_default="0", nullable=False),
        sa.Column("total_accepted", sa.Integer(), server_default="0", nullable=False),
        sa.Column("total_accepted_edited", sa.Integer(), server_default="0", nullable=False),
        sa.Column("total_rejected", sa.Integer(), server_default="0", nullable=False),
        sa.Column("error_message", sa.Text(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.CheckConstraint("total_generated >= 0", name="ck_generation_sources_total_generated"),
        sa.CheckConstraint("total_accepted >= 0", name="ck_generation_sources_total_accepted"),
        sa.CheckConstraint(
            "total_accepted_edited >= 0", name="ck_generation_sources_total_accepted_edited"
        ),
        sa.CheckConstraint("total_rejected >= 0", name="ck_generation_sources_total_rejected"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(
        op.f("ix_generation_sources_user_id"), "generation_sources", ["user_id"], unique=False
    )
    op.create_index(
        op.f("ix_generation_sources_input_text_hash"),
        "generation_sources",
        ["input_text_hash"],
        unique=False,
    )

    op.create_table(
        "flashcards",
        sa.Column("id", sa.Uuid(), nullable=False),
        sa.Column("user_id", sa.Uuid(), nullable=False),
        sa.Column("front", sa.String(200), nullable=False),
        sa.Column("back", sa.String(500), nullable=False),
        sa.Column("source_type", sa.String(20), nullable=False),
        sa.Column("generation_source_id", sa.Uuid(), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("(CURRENT_TIMESTAMP)"),
            nullable=False,
        ),
        sa.CheckConstraint(
            "source_type IN ('ai-full', 'ai-edited', 'manual')",
            name="ck_flashcards_source_type",
        ),
        sa.ForeignKeyConstraint(
            ["generation_source_id"], ["generation_sources.id"], ondelete="SET NULL"
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_flashcards_user_id"), "flashcards", ["user_id"], unique=False)
    op.create_index(
        op.f("ix_flashcards_generation_source_id"),
        "flashcards",
        ["generation_source_id"],
        unique=False,
    )


def downgrade() -> None:
    """Drop flashcards and generation_sources tables."""
    op.drop_index(op.f("ix_flashcards_generation_source_id"), table_name="flashcards")
    op.drop_index(op.f("ix_flashcards_user_id"), table_name="flashcards")
    op.drop_table("flashcards")
    op.drop_index(op.f("ix_generation_sources_input_text_hash"), table_name="generation_sources")
    op.drop_index(op.f("ix_generation_sources_user_id"), table_name="generation_sources")
    op.drop_table("generation_sources")
