"""
Flashcard entity.
"""

from dataclasses import dataclass
from datetime import datetime

from src.domain.common.entity import Entity
from src.domain.common.exceptions import DomainError
from src.domain.common.value_objects import FlashcardId, GenerationSourceId, UserId
from src.domain.learning.value_objects import FlashcardSourceType


@dataclass(eq=False)
class Flashcard(Entity[FlashcardId]):
    """
    Flashcard accepted by a user.

    Business Rules:
    - Front and back cannot be empty
    - Flashcard can optionally reference the generation source it came from
    - A manual flashcard conventionally has no generation source, but this
      is not enforced
    """

    id: FlashcardId
    user_id: UserId
    front: str
    back: str
    source_type: FlashcardSourceType
    generation_source_id: GenerationSourceId | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        if not self.front or not self.front.strip():
            raise DomainError("Front cannot be empty")
        if not self.back or not self.back.strip():
            raise DomainError("Back cannot be empty")

    @classmethod
    def create(
        cls,
        user_id: UserId,
        front: str,
        back: str,
        source_type: FlashcardSourceType,
        generation_source_id: GenerationSourceId | None = None,
    ) -> "Flashcard":
        """Create a new flashcard (timestamps are set when persisted)."""
        return cls(
            id=FlashcardId.generate(),
            user_id=user_id,
            front=front.strip(),
            back=back.strip(),
            source_type=source_type,
            generation_source_id=generation_source_id,
        )

    @classmethod
    def create_with_id(
        cls,
        id: FlashcardId,
        user_id: UserId,
        front: str,
        back: str,
        source_type: FlashcardSourceType,
        created_at: datetime,
        updated_at: datetime,
        generation_source_id: GenerationSourceId | None = None,
    ) -> "Flashcard":
        """Reconstitute a flashcard from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            front=front,
            back=back,
            source_type=source_type,
            generation_source_id=generation_source_id,
            created_at=created_at,
            updated_at=updated_at,
        )
