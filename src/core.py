from dependency_injector import containers, providers
from sqlalchemy.orm import Session

from src.application.learning.use_cases.flashcards.create_flashcards_use_case import (
    CreateFlashcardsUseCase,
)
from src.application.learning.use_cases.generation_sources.create_generation_source_use_case import (
    CreateGenerationSourceUseCase,
)
from src.application.learning.use_cases.generation_sources.get_generation_source_use_case import (
    GetGenerationSourceUseCase,
)
from src.config import get_settings
from src.domain.learning.services import AcceptanceStatsService
from src.infrastructure.ai.flashcard_generation_service import (
    create_flashcard_generation_service,
)
from src.infrastructure.learning.repositories import (
    FlashcardRepository,
    GenerationSourceRepository,
)


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""

    # Declare db as a dependency that will be provided at runtime
    db = providers.Dependency(instance_of=Session)

    settings = providers.Callable(get_settings)

    # Repositories
    flashcard_repository = providers.Factory(FlashcardRepository, db=db)
    generation_source_repository = providers.Factory(GenerationSourceRepository, db=db)

    # Generation engine, chosen by configuration and shared by all requests
    flashcard_generation_service = providers.Singleton(
        create_flashcard_generation_service, settings=settings
    )

    # Domain services (pure domain logic, no db)
    acceptance_stats_service = providers.Factory(AcceptanceStatsService)

    # Learning module use cases
    create_generation_source_use_case = providers.Factory(
        CreateGenerationSourceUseCase,
        generation_source_repository=generation_source_repository,
        generation_service=flashcard_generation_service,
    )
    get_generation_source_use_case = providers.Factory(
        GetGenerationSourceUseCase,
        generation_source_repository=generation_source_repository,
    )
    create_flashcards_use_case = providers.Factory(
        CreateFlashcardsUseCase,
        flashcard_repository=flashcard_repository,
        generation_source_repository=generation_source_repository,
        acceptance_stats_service=acceptance_stats_service,
    )


# Initialize container
container = Container()
