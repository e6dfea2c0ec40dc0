"""DTOs for generation source use cases."""

from dataclasses import dataclass
from datetime import datetime

from src.application.learning.protocols.flashcard_generation_service import FlashcardCandidate
from src.domain.common.value_objects import GenerationSourceId


@dataclass
class GenerationSourceCreated:
    """A freshly created generation source together with its candidates."""

    id: GenerationSourceId
    created_at: datetime | None
    candidates: list[FlashcardCandidate]
