"""DTOs for flashcard use cases."""

from dataclasses import dataclass
from uuid import UUID

from src.domain.learning.value_objects import FlashcardSourceType


@dataclass(frozen=True)
class CreateFlashcardCommand:
    """One flashcard the user accepts, edits or writes by hand."""

    front: str
    back: str
    source_type: FlashcardSourceType
    generation_source_id: UUID | None = None
