"""
Domain service for generation source acceptance statistics.

This is a pure domain service with no infrastructure dependencies.
"""

from dataclasses import dataclass

from src.domain.common.value_objects import GenerationSourceId
from src.domain.learning.entities.flashcard import Flashcard
from src.domain.learning.value_objects import FlashcardSourceType


@dataclass(frozen=True)
class AcceptanceDelta:
    """Counter increments to apply to one generation source."""

    accepted: int = 0
    accepted_edited: int = 0

    @property
    def is_empty(self) -> bool:
        return self.accepted == 0 and self.accepted_edited == 0

    def __add__(self, other: "AcceptanceDelta") -> "AcceptanceDelta":
        return AcceptanceDelta(
            accepted=self.accepted + other.accepted,
            accepted_edited=self.accepted_edited + other.accepted_edited,
        )


_DELTA_BY_SOURCE_TYPE = {
    FlashcardSourceType.AI_FULL: AcceptanceDelta(accepted=1),
    FlashcardSourceType.AI_EDITED: AcceptanceDelta(accepted_edited=1),
}


class AcceptanceStatsService:
    """
    Derives how much each generation source's acceptance counters grow
    when a batch of flashcards is accepted.

    - ai-full flashcards count as accepted
    - ai-edited flashcards count as accepted-edited
    - manual flashcards and flashcards without a generation source count nowhere
    """

    def compute_deltas(
        self, flashcards: list[Flashcard]
    ) -> dict[GenerationSourceId, AcceptanceDelta]:
        """
        Group counter increments by generation source.

        Args:
            flashcards: Flashcards accepted in one batch

        Returns:
            Non-empty deltas keyed by generation source ID, in first-seen order
        """
        deltas: dict[GenerationSourceId, AcceptanceDelta] = {}

        for flashcard in flashcards:
            if flashcard.generation_source_id is None:
                continue
            delta = _DELTA_BY_SOURCE_TYPE.get(flashcard.source_type)
            if delta is None:
                continue
            source_id = flashcard.generation_source_id
            deltas[source_id] = deltas.get(source_id, AcceptanceDelta()) + delta

        return deltas
