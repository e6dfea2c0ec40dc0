"""Use case for accepting a batch of flashcards."""

from uuid import UUID

import structlog

from src.application.learning.protocols.flashcard_repository import FlashcardRepositoryProtocol
from src.application.learning.protocols.generation_source_repository import (
    GenerationSourceRepositoryProtocol,
)
from src.application.learning.use_cases.dtos import CreateFlashcardCommand
from src.domain.common.value_objects import GenerationSourceId, UserId
from src.domain.learning.entities.flashcard import Flashcard
from src.domain.learning.services import AcceptanceStatsService
from src.exceptions import (
    GenerationSourceForbiddenError,
    GenerationSourceNotFoundError,
    PersistenceError,
)

logger = structlog.get_logger(__name__)


class CreateFlashcardsUseCase:
    """
    Use case for creating flashcards in bulk and updating generation statistics.

    Acceptance counters are increased one generation source at a time. Each
    increment is a single atomic UPDATE, so the final counts do not depend on
    the order the sources are processed in or on overlapping batches.
    """

    def __init__(
        self,
        flashcard_repository: FlashcardRepositoryProtocol,
        generation_source_repository: GenerationSourceRepositoryProtocol,
        acceptance_stats_service: AcceptanceStatsService,
    ) -> None:
        """Initialize use case with repository protocols and domain services."""
        self.flashcard_repository = flashcard_repository
        self.generation_source_repository = generation_source_repository
        self.acceptance_stats_service = acceptance_stats_service

    def create_flashcards(
        self, commands: list[CreateFlashcardCommand], user_id: UUID
    ) -> list[Flashcard]:
        """
        Create flashcards and count them against their generation sources.

        The batch is all-or-nothing: a single unknown or foreign generation
        source rejects every flashcard. Statistics are updated after the
        flashcards are stored and a failed update does not undo the insert.

        Args:
            commands: Flashcards to create
            user_id: ID of the user

        Returns:
            Created flashcard entities in the order of the commands

        Raises:
            GenerationSourceNotFoundError: If a referenced generation source does not exist
            GenerationSourceForbiddenError: If a referenced generation source belongs to
                another user
            PersistenceError: If the flashcards cannot be stored
        """
        user_id_vo = UserId(user_id)

        flashcards = [
            Flashcard.create(
                user_id=user_id_vo,
                front=command.front,
                back=command.back,
                source_type=command.source_type,
                generation_source_id=GenerationSourceId(command.generation_source_id)
                if command.generation_source_id
                else None,
            )
            for command in commands
        ]

        self._validate_generation_sources(flashcards, user_id_vo)

        created = self.flashcard_repository.add_many(flashcards)
        logger.info("created_flashcards", count=len(created), user_id=str(user_id_vo))

        self._update_generation_source_stats(flashcards, user_id_vo)

        return created

    def _validate_generation_sources(self, flashcards: list[Flashcard], user_id: UserId) -> None:
        # Distinct IDs, first-seen order
        requested_ids = list(
            dict.fromkeys(
                fc.generation_source_id for fc in flashcards if fc.generation_source_id is not None
            )
        )
        if not requested_ids:
            return

        sources = self.generation_source_repository.find_by_ids(requested_ids)

        found_ids = {source.id for source in sources}
        missing_ids = [source_id for source_id in requested_ids if source_id not in found_ids]
        if missing_ids:
            raise GenerationSourceNotFoundError(missing_ids[0].value)

        foreign = next((source for source in sources if source.user_id != user_id), None)
        if foreign:
            raise GenerationSourceForbiddenError(foreign.id.value)

    def _update_generation_source_stats(self, flashcards: list[Flashcard], user_id: UserId) -> None:
        deltas = self.acceptance_stats_service.compute_deltas(flashcards)

        for source_id, delta in deltas.items():
            if delta.is_empty:
                continue
            try:
                updated = self.generation_source_repository.increment_acceptance_counts(
                    source_id, user_id, delta
                )
            except PersistenceError as e:
                logger.error(
                    "generation_source_stats_update_failed",
                    generation_source_id=str(source_id),
                    error=e.detail,
                )
                continue

            if not updated:
                logger.warning(
                    "generation_source_stats_target_missing",
                    generation_source_id=str(source_id),
                )
                continue

            logger.debug(
                "generation_source_stats_updated",
                generation_source_id=str(source_id),
                accepted=delta.accepted,
                accepted_edited=delta.accepted_edited,
            )
