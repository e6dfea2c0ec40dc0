"""Repository for GenerationSource domain entities."""

from sqlalchemy import select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.domain.common.value_objects import GenerationSourceId, UserId
from src.domain.learning.entities.generation_source import GenerationSource
from src.domain.learning.services import AcceptanceDelta
from src.exceptions import PersistenceError
from src.infrastructure.learning.mappers.generation_source_mapper import GenerationSourceMapper
from src.models import GenerationSource as GenerationSourceORM


class GenerationSourceRepository:
    """Repository for GenerationSource domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = GenerationSourceMapper()

    def add(self, generation_source: GenerationSource) -> GenerationSource:
        """
        Insert a new generation source.

        Raises:
            PersistenceError: If the insert fails
        """
        orm_model = self.mapper.to_orm(generation_source)
        try:
            self.db.add(orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Failed to insert generation source: {e}") from e
        return self.mapper.to_domain(orm_model)

    def save(self, generation_source: GenerationSource) -> GenerationSource:
        """
        Persist the generation outcome of an existing generation source.

        Raises:
            PersistenceError: If the row is gone or the update fails
        """
        try:
            orm_model = self.db.get(GenerationSourceORM, generation_source.id.value)
            if not orm_model:
                raise PersistenceError(f"Generation source {generation_source.id} not found")
            self.mapper.to_orm(generation_source, orm_model)
            self.db.commit()
            self.db.refresh(orm_model)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(
                f"Failed to update generation source {generation_source.id}: {e}"
            ) from e
        return self.mapper.to_domain(orm_model)

    def find_by_id(
        self, generation_source_id: GenerationSourceId, user_id: UserId
    ) -> GenerationSource | None:
        """
        Find a generation source by ID with user ownership check.

        Returns:
            GenerationSource if found and owned by user, None otherwise
        """
        stmt = select(GenerationSourceORM).where(
            GenerationSourceORM.id == generation_source_id.value,
            GenerationSourceORM.user_id == user_id.value,
        )
        orm_model = self.db.execute(stmt).scalar_one_or_none()
        return self.mapper.to_domain(orm_model) if orm_model else None

    def find_by_ids(self, generation_source_ids: list[GenerationSourceId]) -> list[GenerationSource]:
        """
        Find generation sources by ID regardless of owner.

        Raises:
            PersistenceError: If the lookup fails
        """
        if not generation_source_ids:
            return []

        stmt = select(GenerationSourceORM).where(
            GenerationSourceORM.id.in_([source_id.value for source_id in generation_source_ids])
        )
        try:
            orm_models = self.db.execute(stmt).scalars().all()
        except SQLAlchemyError as e:
            raise PersistenceError(f"Failed to look up generation sources: {e}") from e
        return [self.mapper.to_domain(orm_model) for orm_model in orm_models]

    def increment_acceptance_counts(
        self,
        generation_source_id: GenerationSourceId,
        user_id: UserId,
        delta: AcceptanceDelta,
    ) -> bool:
        """
        Atomically add a delta to the acceptance counters of one generation source.

        Returns:
            True if a row owned by the user was updated, False otherwise

        Raises:
            PersistenceError: If the update fails (only this update is rolled back)
        """
        stmt = (
            update(GenerationSourceORM)
            .where(
                GenerationSourceORM.id == generation_source_id.value,
                GenerationSourceORM.user_id == user_id.value,
            )
            .values(
                total_accepted=GenerationSourceORM.total_accepted + delta.accepted,
                total_accepted_edited=GenerationSourceORM.total_accepted_edited
                + delta.accepted_edited,
            )
            .execution_options(synchronize_session=False)
        )
        try:
            result = self.db.execute(stmt)
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(
                f"Failed to update statistics of generation source {generation_source_id}: {e}"
            ) from e
        return result.rowcount > 0  # type: ignore[attr-defined]
