"""Use case for creating generation sources and generating flashcard candidates."""

from uuid import UUID

import structlog

from src.application.learning.protocols.flashcard_generation_service import (
    FlashcardGenerationServiceProtocol,
    GenerationResult,
)
from src.application.learning.protocols.generation_source_repository import (
    GenerationSourceRepositoryProtocol,
)
from src.application.learning.use_cases.dtos import GenerationSourceCreated
from src.domain.common.exceptions import DomainError
from src.domain.common.value_objects import UserId
from src.domain.learning.entities.generation_source import GenerationSource
from src.exceptions import GenerationServiceError, PersistenceError

logger = structlog.get_logger(__name__)


class CreateGenerationSourceUseCase:
    """
    Create a generation source and generate flashcard candidates for it.

    The source row is inserted before the engine is called, so every attempt
    leaves a record behind. Writing the outcome back is best effort: a failure
    there is logged and never changes what the caller gets.
    """

    def __init__(
        self,
        generation_source_repository: GenerationSourceRepositoryProtocol,
        generation_service: FlashcardGenerationServiceProtocol,
    ) -> None:
        """Initialize use case with repository and generation engine."""
        self.generation_source_repository = generation_source_repository
        self.generation_service = generation_service

    async def create_generation_source(
        self, input_text: str, user_id: UUID
    ) -> GenerationSourceCreated:
        """
        Create a generation source for the input text and return its candidates.

        Args:
            input_text: Validated input text
            user_id: ID of the user

        Returns:
            ID and creation time of the generation source, plus the candidates

        Raises:
            PersistenceError: If the generation source cannot be inserted
            GenerationServiceError: If the generation engine fails
        """
        text = input_text.strip()
        generation_source = GenerationSource.create(user_id=UserId(user_id), input_text=text)
        generation_source = self.generation_source_repository.add(generation_source)

        logger.info(
            "generation_source_created",
            generation_source_id=str(generation_source.id),
            input_text_hash=generation_source.input_text_hash.value,
        )

        try:
            result = await self.generation_service.generate(text)
        except GenerationServiceError as e:
            self._record_failure(generation_source, e.reason)
            raise
        except Exception as e:
            self._record_failure(generation_source, str(e) or type(e).__name__)
            raise

        self._record_success(generation_source, result)

        return GenerationSourceCreated(
            id=generation_source.id,
            created_at=generation_source.created_at,
            candidates=result.candidates,
        )

    def _record_success(self, generation_source: GenerationSource, result: GenerationResult) -> None:
        try:
            generation_source.record_success(result.model_name, len(result.candidates))
            self.generation_source_repository.save(generation_source)
        except (PersistenceError, DomainError) as e:
            logger.error(
                "generation_source_success_update_failed",
                generation_source_id=str(generation_source.id),
                error=str(e),
            )
            return

        logger.info(
            "generation_source_succeeded",
            generation_source_id=str(generation_source.id),
            model_name=result.model_name,
            total_generated=len(result.candidates),
        )

    def _record_failure(self, generation_source: GenerationSource, error_message: str) -> None:
        logger.warning(
            "generation_source_failed",
            generation_source_id=str(generation_source.id),
            error=error_message,
        )
        try:
            generation_source.record_failure(error_message)
            self.generation_source_repository.save(generation_source)
        except (PersistenceError, DomainError) as e:
            logger.error(
                "generation_source_error_update_failed",
                generation_source_id=str(generation_source.id),
                error=str(e),
            )
