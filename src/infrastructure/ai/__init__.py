"""Flashcard generation engines."""

from .flashcard_generation_service import (
    AIFlashcardGenerationService,
    MockFlashcardGenerationService,
    create_flashcard_generation_service,
)

__all__ = [
    "AIFlashcardGenerationService",
    "MockFlashcardGenerationService",
    "create_flashcard_generation_service",
]
