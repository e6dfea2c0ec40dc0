"""Learning context schemas."""

from src.infrastructure.learning.schemas.flashcard_schemas import (
    FlashcardCreateRequest,
    FlashcardResponse,
)
from src.infrastructure.learning.schemas.generation_source_schemas import (
    FlashcardCandidateItem,
    GenerationSourceCreateRequest,
    GenerationSourceCreateResponse,
    GenerationSourceResponse,
)

__all__ = [
    "FlashcardCandidateItem",
    "FlashcardCreateRequest",
    "FlashcardResponse",
    "GenerationSourceCreateRequest",
    "GenerationSourceCreateResponse",
    "GenerationSourceResponse",
]
