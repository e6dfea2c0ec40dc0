"""Mapper for Flashcard ORM ↔ Domain conversion."""

from src.domain.common.value_objects import FlashcardId, GenerationSourceId, UserId
from src.domain.learning.entities.flashcard import Flashcard
from src.domain.learning.value_objects import FlashcardSourceType
from src.models import Flashcard as FlashcardORM


class FlashcardMapper:
    """Mapper for Flashcard ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: FlashcardORM) -> Flashcard:
        """Convert ORM model to domain entity."""
        return Flashcard.create_with_id(
            id=FlashcardId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            front=orm_model.front,
            back=orm_model.back,
            source_type=FlashcardSourceType(orm_model.source_type),
            generation_source_id=GenerationSourceId(orm_model.generation_source_id)
            if orm_model.generation_source_id
            else None,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(self, domain_entity: Flashcard) -> FlashcardORM:
        """Convert a new domain entity to an ORM model."""
        return FlashcardORM(
            id=domain_entity.id.value,
            user_id=domain_entity.user_id.value,
            front=domain_entity.front,
            back=domain_entity.back,
            source_type=domain_entity.source_type.value,
            generation_source_id=domain_entity.generation_source_id.value
            if domain_entity.generation_source_id
            else None,
        )
