"""
GenerationSource entity.

A generation source records one attempt at generating flashcard candidates
from a piece of input text, along with the statistics of how many of those
candidates the user eventually accepted.
"""

from dataclasses import dataclass
from datetime import datetime

from src.domain.common.entity import Entity
from src.domain.common.exceptions import InvariantViolationError, ValidationError
from src.domain.common.value_objects import ContentHash, GenerationSourceId, UserId


@dataclass(eq=False)
class GenerationSource(Entity[GenerationSourceId]):
    """
    One flashcard generation attempt.

    Business Rules:
    - Created pending: all counters zero, no model name, no error message
    - The generation outcome is recorded exactly once, either success
      (model name + number of generated candidates) or failure (error message)
    - Counters never go negative
    - Acceptance counters only grow; they are not checked against
      total_generated
    """

    id: GenerationSourceId
    user_id: UserId
    input_text_hash: ContentHash
    model_name: str | None = None
    total_generated: int = 0
    total_accepted: int = 0
    total_accepted_edited: int = 0
    total_rejected: int = 0
    error_message: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def __post_init__(self) -> None:
        """Validate invariants."""
        for name in ("total_generated", "total_accepted", "total_accepted_edited", "total_rejected"):
            if getattr(self, name) < 0:
                raise ValidationError(f"{name} cannot be negative", field=name)

    @property
    def is_pending(self) -> bool:
        """Whether the generation outcome has not been recorded yet."""
        return self.model_name is None and self.error_message is None

    @property
    def has_failed(self) -> bool:
        return self.error_message is not None

    def _ensure_pending(self) -> None:
        if not self.is_pending:
            raise InvariantViolationError(
                "GenerationSource", "generation outcome has already been recorded"
            )

    def record_success(self, model_name: str, total_generated: int) -> None:
        """
        Record a successful generation.

        Args:
            model_name: Name of the model that produced the candidates
            total_generated: Number of candidates produced

        Raises:
            InvariantViolationError: If an outcome was already recorded
            ValidationError: If the model name is empty or the count negative
        """
        self._ensure_pending()
        if not model_name or not model_name.strip():
            raise ValidationError("Model name cannot be empty", field="model_name")
        if total_generated < 0:
            raise ValidationError("total_generated cannot be negative", field="total_generated")
        self.model_name = model_name
        self.total_generated = total_generated

    def record_failure(self, error_message: str) -> None:
        """
        Record a failed generation.

        Raises:
            InvariantViolationError: If an outcome was already recorded
        """
        self._ensure_pending()
        self.error_message = error_message.strip() or "Unknown error"

    @classmethod
    def create(cls, user_id: UserId, input_text: str) -> "GenerationSource":
        """Create a new pending generation source for the given input text."""
        return cls(
            id=GenerationSourceId.generate(),
            user_id=user_id,
            input_text_hash=ContentHash.compute(input_text),
        )

    @classmethod
    def create_with_id(
        cls,
        id: GenerationSourceId,
        user_id: UserId,
        input_text_hash: ContentHash,
        model_name: str | None,
        total_generated: int,
        total_accepted: int,
        total_accepted_edited: int,
        total_rejected: int,
        error_message: str | None,
        created_at: datetime,
        updated_at: datetime,
    ) -> "GenerationSource":
        """Reconstitute a generation source from persistence."""
        return cls(
            id=id,
            user_id=user_id,
            input_text_hash=input_text_hash,
            model_name=model_name,
            total_generated=total_generated,
            total_accepted=total_accepted,
            total_accepted_edited=total_accepted_edited,
            total_rejected=total_rejected,
            error_message=error_message,
            created_at=created_at,
            updated_at=updated_at,
        )
