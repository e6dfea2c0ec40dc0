"""Use case for reading generation source statistics."""

from uuid import UUID

from src.application.learning.protocols.generation_source_repository import (
    GenerationSourceRepositoryProtocol,
)
from src.domain.common.value_objects import GenerationSourceId, UserId
from src.domain.learning.entities.generation_source import GenerationSource
from src.exceptions import GenerationSourceNotFoundError


class GetGenerationSourceUseCase:
    def __init__(self, generation_source_repository: GenerationSourceRepositoryProtocol) -> None:
        self.generation_source_repository = generation_source_repository

    def get_generation_source(self, generation_source_id: UUID, user_id: UUID) -> GenerationSource:
        """
        Get a generation source owned by the user.

        Raises:
            GenerationSourceNotFoundError: If it does not exist or belongs to someone else
        """
        generation_source = self.generation_source_repository.find_by_id(
            GenerationSourceId(generation_source_id), UserId(user_id)
        )
        if not generation_source:
            raise GenerationSourceNotFoundError(generation_source_id)
        return generation_source
