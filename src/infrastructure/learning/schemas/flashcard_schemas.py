"""Pydantic schemas for Flashcard API request/response validation."""

from datetime import datetime
from typing import Annotated
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, StringConstraints
from pydantic.alias_generators import to_camel

from src.constants import FLASHCARD_BACK_MAX_LENGTH, FLASHCARD_FRONT_MAX_LENGTH
from src.domain.learning.value_objects import FlashcardSourceType

FlashcardFront = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=FLASHCARD_FRONT_MAX_LENGTH),
]
FlashcardBack = Annotated[
    str,
    StringConstraints(strip_whitespace=True, min_length=1, max_length=FLASHCARD_BACK_MAX_LENGTH),
]


class FlashcardCreateRequest(BaseModel):
    """Schema for one flashcard in a POST /flashcards batch."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    front: FlashcardFront = Field(..., description="Question side, 1-200 characters")
    back: FlashcardBack = Field(..., description="Answer side, 1-500 characters")
    source_type: FlashcardSourceType = Field(..., description="How the flashcard was created")
    generation_source_id: UUID | None = Field(
        None, description="Generation source the flashcard was generated by"
    )


class FlashcardResponse(BaseModel):
    """Schema for a created flashcard."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: UUID
    front: str
    back: str
    source_type: FlashcardSourceType
    generation_source_id: UUID | None
    created_at: datetime | None
    updated_at: datetime | None
