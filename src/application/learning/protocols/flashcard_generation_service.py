"""Port for the flashcard candidate generation engine."""

from dataclasses import dataclass, field
from typing import Protocol


@dataclass(frozen=True)
class FlashcardCandidate:
    """A proposed flashcard. Never persisted as such."""

    front: str
    back: str


@dataclass(frozen=True)
class GenerationResult:
    candidates: list[FlashcardCandidate] = field(default_factory=list)
    model_name: str = ""


class FlashcardGenerationServiceProtocol(Protocol):
    """
    Turns input text into flashcard candidates.

    Implementations decide how many candidates to produce and raise
    GenerationServiceError when the underlying engine is unreachable or fails.
    They must not persist anything.
    """

    async def generate(self, input_text: str) -> GenerationResult: ...
