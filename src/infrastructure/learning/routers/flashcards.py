"""API routes for flashcard management."""

from typing import Annotated

import structlog
from fastapi import APIRouter, Body, Depends, status

from src.application.learning.use_cases.dtos import CreateFlashcardCommand
from src.application.learning.use_cases.flashcards.create_flashcards_use_case import (
    CreateFlashcardsUseCase,
)
from src.constants import FLASHCARD_BATCH_MAX_SIZE, FLASHCARD_BATCH_MIN_SIZE
from src.core import container
from src.domain.common.exceptions import DomainError
from src.exceptions import RecallError, ServiceError
from src.infrastructure.common.dependencies import CurrentUserId
from src.infrastructure.common.di import inject_use_case
from src.infrastructure.learning.schemas import FlashcardCreateRequest, FlashcardResponse

logger = structlog.get_logger(__name__)

router = APIRouter(prefix="/flashcards", tags=["flashcards"])


@router.post(
    "",
    response_model=list[FlashcardResponse],
    status_code=status.HTTP_201_CREATED,
)
def create_flashcards(
    requests: Annotated[
        list[FlashcardCreateRequest],
        Body(min_length=FLASHCARD_BATCH_MIN_SIZE, max_length=FLASHCARD_BATCH_MAX_SIZE),
    ],
    user_id: CurrentUserId,
    use_case: CreateFlashcardsUseCase = Depends(
        inject_use_case(container.create_flashcards_use_case)
    ),
) -> list[FlashcardResponse]:
    """
    Create a batch of flashcards.

    Flashcards referencing a generation source are counted in that source's
    acceptance statistics.

    Raises:
        GenerationSourceNotFoundError: 404 if a referenced generation source does not exist
        GenerationSourceForbiddenError: 403 if it belongs to another user
    """
    commands = [
        CreateFlashcardCommand(
            front=request.front,
            back=request.back,
            source_type=request.source_type,
            generation_source_id=request.generation_source_id,
        )
        for request in requests
    ]

    try:
        flashcards = use_case.create_flashcards(commands, user_id)
    except (RecallError, DomainError):
        raise
    except Exception as e:
        logger.error("failed_to_create_flashcards", error=str(e), exc_info=True)
        raise ServiceError("INTERNAL_SERVER_ERROR") from e

    return [
        FlashcardResponse(
            id=flashcard.id.value,
            front=flashcard.front,
            back=flashcard.back,
            source_type=flashcard.source_type,
            generation_source_id=flashcard.generation_source_id.value
            if flashcard.generation_source_id
            else None,
            created_at=flashcard.created_at,
            updated_at=flashcard.updated_at,
        )
        for flashcard in flashcards
    ]
