"""Database models."""

import uuid
from datetime import datetime

from sqlalchemy import CheckConstraint, DateTime, ForeignKey, Integer, String, Text, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from src.database import Base


class GenerationSource(Base):
    """A single flashcard generation attempt and its acceptance statistics."""

    __tablename__ = "generation_sources"
    __table_args__ = (
        CheckConstraint("total_generated >= 0", name="ck_generation_sources_total_generated"),
        CheckConstraint("total_accepted >= 0", name="ck_generation_sources_total_accepted"),
        CheckConstraint(
            "total_accepted_edited >= 0", name="ck_generation_sources_total_accepted_edited"
        ),
        CheckConstraint("total_rejected >= 0", name="ck_generation_sources_total_rejected"),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    input_text_hash: Mapped[str] = mapped_column(String(64), nullable=False, index=True)
    model_name: Mapped[str | None] = mapped_column(String(255), nullable=True)
    total_generated: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default="0"
    )
    total_accepted: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default="0"
    )
    total_accepted_edited: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default="0"
    )
    total_rejected: Mapped[int] = mapped_column(
        Integer, nullable=False, default=0, server_default="0"
    )
    error_message: Mapped[str | None] = mapped_column(Text, nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    flashcards: Mapped[list["Flashcard"]] = relationship(back_populates="generation_source")

    def __repr__(self) -> str:
        """String representation of GenerationSource."""
        return (
            f"<GenerationSource(id={self.id}, model_name={self.model_name!r}, "
            f"total_generated={self.total_generated})>"
        )


class Flashcard(Base):
    """Flashcard accepted by a user, either generated or written by hand."""

    __tablename__ = "flashcards"
    __table_args__ = (
        CheckConstraint(
            "source_type IN ('ai-full', 'ai-edited', 'manual')",
            name="ck_flashcards_source_type",
        ),
    )

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)
    user_id: Mapped[uuid.UUID] = mapped_column(Uuid, nullable=False, index=True)
    front: Mapped[str] = mapped_column(String(200), nullable=False)
    back: Mapped[str] = mapped_column(String(500), nullable=False)
    source_type: Mapped[str] = mapped_column(String(20), nullable=False)
    generation_source_id: Mapped[uuid.UUID | None] = mapped_column(
        Uuid,
        ForeignKey("generation_sources.id", ondelete="SET NULL"),
        nullable=True,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        onupdate=func.now(),
        nullable=False,
    )

    generation_source: Mapped[GenerationSource | None] = relationship(
        back_populates="flashcards"
    )

    def __repr__(self) -> str:
        """String representation of Flashcard."""
        return f"<Flashcard(id={self.id}, front='{self.front[:50]}', source_type={self.source_type})>"
