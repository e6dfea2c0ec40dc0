"""Mapper for GenerationSource ORM ↔ Domain conversion."""

from src.domain.common.value_objects import ContentHash, GenerationSourceId, UserId
from src.domain.learning.entities.generation_source import GenerationSource
from src.models import GenerationSource as GenerationSourceORM


class GenerationSourceMapper:
    """Mapper for GenerationSource ORM ↔ Domain conversion."""

    def to_domain(self, orm_model: GenerationSourceORM) -> GenerationSource:
        """Convert ORM model to domain entity."""
        return GenerationSource.create_with_id(
            id=GenerationSourceId(orm_model.id),
            user_id=UserId(orm_model.user_id),
            input_text_hash=ContentHash(orm_model.input_text_hash),
            model_name=orm_model.model_name,
            total_generated=orm_model.total_generated,
            total_accepted=orm_model.total_accepted,
            total_accepted_edited=orm_model.total_accepted_edited,
            total_rejected=orm_model.total_rejected,
            error_message=orm_model.error_message,
            created_at=orm_model.created_at,
            updated_at=orm_model.updated_at,
        )

    def to_orm(
        self, domain_entity: GenerationSource, orm_model: GenerationSourceORM | None = None
    ) -> GenerationSourceORM:
        """Convert domain entity to ORM model."""
        if orm_model:
            # Only the generation outcome changes after insert; acceptance
            # counters are incremented in the database.
            orm_model.model_name = domain_entity.model_name
            orm_model.total_generated = domain_entity.total_generated
            orm_model.error_message = domain_entity.error_message
            return orm_model

        return GenerationSourceORM(
            id=domain_entity.id.value,
            user_id=domain_entity.user_id.value,
            input_text_hash=domain_entity.input_text_hash.value,
            model_name=domain_entity.model_name,
            total_generated=domain_entity.total_generated,
            total_accepted=domain_entity.total_accepted,
            total_accepted_edited=domain_entity.total_accepted_edited,
            total_rejected=domain_entity.total_rejected,
            error_message=domain_entity.error_message,
        )
