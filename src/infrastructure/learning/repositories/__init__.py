from .flashcard_repository import FlashcardRepository
from .generation_source_repository import GenerationSourceRepository

__all__ = ["FlashcardRepository", "GenerationSourceRepository"]
