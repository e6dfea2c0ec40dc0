"""API routes for flashcard generation sources."""

from uuid import UUID

import structlog
from fastapi import APIRouter, Depends, status

from src.application.learning.use_cases.generation_sources.create_generation_source_use_case import (
    CreateGenerationSourceUseCase,
)
from src.application.learning.use_cases.generation_sources.get_generation_source_use_case import (
    GetGenerationSourceUseCase,
)
from src.core import container
from src.domain.common.exceptions import DomainError
from src.exceptions import RecallError, ServiceError
from src.infrastructure.common.dependencies import CurrentUserId
from src.infrastructure.common.di import inject_use_case
from src.infrastructure.learning.schemas import (
    FlashcardCandidateItem,
    GenerationSourceCreateRequest,
    GenerationSourceCreateResponse,
    GenerationSourceResponse,
)

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/generation-sources", tags=["generation-sources"])


@router.post(
    "",
    response_model=GenerationSourceCreateResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_generation_source(
    request: GenerationSourceCreateRequest,
    user_id: CurrentUserId,
    use_case: CreateGenerationSourceUseCase = Depends(
        inject_use_case(container.create_generation_source_use_case)
    ),
) -> GenerationSourceCreateResponse:
    """
    Generate flashcard candidates from input text.

    A generation source is recorded for every attempt, including failed ones.

    Returns:
        ID and creation time of the generation source with its candidates

    Raises:
        GenerationServiceError: 502 if the generation engine fails
    """
    try:
        created = await use_case.create_generation_source(request.input_text, user_id)
    except (RecallError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_create_generation_source", error=str(e), exc_info=True)
        raise ServiceError("INTERNAL_SERVER_ERROR") from e

    return GenerationSourceCreateResponse(
        id=created.id.value,
        created_at=created.created_at,
        candidates=[
            FlashcardCandidateItem(front=candidate.front, back=candidate.back)
            for candidate in created.candidates
        ],
    )


@router.get(
    "/{generation_source_id}",
    response_model=GenerationSourceResponse,
    status_code=status.HTTP_200_OK,
)
def get_generation_source(
    generation_source_id: UUID,
    user_id: CurrentUserId,
    use_case: GetGenerationSourceUseCase = Depends(
        inject_use_case(container.get_generation_source_use_case)
    ),
) -> GenerationSourceResponse:
    """Get generation statistics of one generation source."""
    generation_source = use_case.get_generation_source(generation_source_id, user_id)
    return GenerationSourceResponse(
        id=generation_source.id.value,
        model_name=generation_source.model_name,
        total_generated=generation_source.total_generated,
        total_accepted=generation_source.total_accepted,
        total_accepted_edited=generation_source.total_accepted_edited,
        total_rejected=generation_source.total_rejected,
        error_message=generation_source.error_message,
        created_at=generation_source.created_at,
        updated_at=generation_source.updated_at,
    )
