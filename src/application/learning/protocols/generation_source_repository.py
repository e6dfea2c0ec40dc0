"""Protocol for GenerationSource repository in learning context."""

from typing import Protocol

from src.domain.common.value_objects import GenerationSourceId, UserId
from src.domain.learning.entities.generation_source import GenerationSource
from src.domain.learning.services import AcceptanceDelta


class GenerationSourceRepositoryProtocol(Protocol):
    """Protocol for GenerationSource repository operations in learning context."""

    def add(self, generation_source: GenerationSource) -> GenerationSource:
        """
        Insert a new generation source.

        Returns:
            Stored entity with database-generated timestamps

        Raises:
            PersistenceError: If the insert fails
        """
        ...

    def save(self, generation_source: GenerationSource) -> GenerationSource:
        """
        Persist the generation outcome of an existing generation source.

        Raises:
            PersistenceError: If the update fails or the row no longer exists
        """
        ...

    def find_by_id(
        self, generation_source_id: GenerationSourceId, user_id: UserId
    ) -> GenerationSource | None:
        """
        Find a generation source by ID with user ownership check.

        Returns:
            GenerationSource if found and owned by user, None otherwise
        """
        ...

    def find_by_ids(self, generation_source_ids: list[GenerationSourceId]) -> list[GenerationSource]:
        """
        Find generation sources by ID regardless of owner.

        Used to tell missing sources apart from sources owned by someone else.

        Raises:
            PersistenceError: If the lookup fails
        """
        ...

    def increment_acceptance_counts(
        self,
        generation_source_id: GenerationSourceId,
        user_id: UserId,
        delta: AcceptanceDelta,
    ) -> bool:
        """
        Atomically add a delta to the acceptance counters of one generation source.

        The arithmetic happens in the database, so concurrent batches touching
        the same source cannot lose updates.

        Returns:
            True if a row owned by the user was updated, False otherwise

        Raises:
            PersistenceError: If the update fails
        """
        ...
