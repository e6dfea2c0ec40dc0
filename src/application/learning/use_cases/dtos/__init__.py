"""DTOs for learning use cases."""

from src.application.learning.use_cases.dtos.flashcard_dtos import CreateFlashcardCommand
from src.application.learning.use_cases.dtos.generation_source_dtos import GenerationSourceCreated

__all__ = ["CreateFlashcardCommand", "GenerationSourceCreated"]
