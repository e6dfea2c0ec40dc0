"""Pydantic schemas for GenerationSource API request/response validation."""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

from src.constants import INPUT_TEXT_MAX_LENGTH, INPUT_TEXT_MIN_LENGTH

InputText = Annotated[
    str,
    StringConstraints(
        strip_whitespace=True,
        min_length=INPUT_TEXT_MIN_LENGTH,
        max_length=INPUT_TEXT_MAX_LENGTH,
    ),
]


class _CamelModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class GenerationSourceCreateRequest(_CamelModel):
    """Schema for POST /generation-sources."""

    input_text: InputText = Field(
        ..., description="Text to generate flashcards from, 1000-10000 characters"
    )


class FlashcardCandidateItem(_CamelModel):
    """Schema for a single generated flashcard candidate."""

    front: str = Field(..., description="Suggested question")
    back: str = Field(..., description="Suggested answer")


class GenerationSourceCreateResponse(_CamelModel):
    """Schema for a created generation source and its candidates."""

    id: UUID
    created_at: datetime | None
    candidates: list[FlashcardCandidateItem] = Field(
        ..., description="Generated flashcard candidates"
    )


class GenerationSourceResponse(_CamelModel):
    """Schema for generation source statistics."""

    id: UUID
    model_name: str | None
    total_generated: int
    total_accepted: int
    total_accepted_edited: int
    total_rejected: int
    error_message: str | None
    created_at: datetime | None
    updated_at: datetime | None
