"""Flashcard generation engines behind FlashcardGenerationServiceProtocol."""

import asyncio

import structlog

from src.application.learning.protocols.flashcard_generation_service import (
    FlashcardCandidate,
    FlashcardGenerationServiceProtocol,
    GenerationResult,
)
from src.config import Settings
from src.exceptions import GenerationServiceError
from src.infrastructure.ai.ai_agents import FlashcardAgent, get_flashcard_agent
from src.infrastructure.ai.ai_model import build_ai_model

logger = structlog.get_logger(__name__)

MOCK_MODEL_NAME = "mock-model-v1"
_CHARACTERS_PER_CARD = 500


class MockFlashcardGenerationService:
    """
    Placeholder engine returning sample flashcards.

    Produces one card per 500 characters of input, clamped to
    [min_cards, max_cards].
    """

    def __init__(self, min_cards: int = 5, max_cards: int = 15, delay_seconds: float = 0.0) -> None:
        self.min_cards = min_cards
        self.max_cards = max_cards
        self.delay_seconds = delay_seconds

    def candidate_count(self, input_text: str) -> int:
        return min(max(len(input_text) // _CHARACTERS_PER_CARD, self.min_cards), self.max_cards)

    async def generate(self, input_text: str) -> GenerationResult:
        if self.delay_seconds > 0:
            await asyncio.sleep(self.delay_seconds)

        candidates = [
            FlashcardCandidate(
                front=f"Sample question {i} from the provided text",
                back=f"Sample answer {i} explaining the concept in detail",
            )
            for i in range(1, self.candidate_count(input_text) + 1)
        ]
        return GenerationResult(candidates=candidates, model_name=MOCK_MODEL_NAME)


class AIFlashcardGenerationService:
    """
    Engine backed by a pydantic-ai agent.

    Blank cards are dropped and the rest capped at max_cards. Fewer than
    min_cards usable cards is a generation failure.
    """

    def __init__(
        self, agent: FlashcardAgent, model_name: str, min_cards: int = 1, max_cards: int = 15
    ) -> None:
        self.agent = agent
        self.model_name = model_name
        self.min_cards = min_cards
        self.max_cards = max_cards

    async def generate(self, input_text: str) -> GenerationResult:
        try:
            result = await self.agent.run(input_text)
        except Exception as e:
            logger.error("ai_flashcard_generation_failed", model_name=self.model_name, error=str(e))
            raise GenerationServiceError(f"Failed to generate flashcards: {e}") from e

        candidates = [
            FlashcardCandidate(front=card.front.strip(), back=card.back.strip())
            for card in result.output
            if card.front.strip() and card.back.strip()
        ][: self.max_cards]

        if len(candidates) < max(self.min_cards, 1):
            logger.error(
                "ai_flashcard_generation_too_few_cards",
                model_name=self.model_name,
                count=len(candidates),
                min_cards=self.min_cards,
            )
            raise GenerationServiceError(
                f"Failed to generate flashcards: model returned {len(candidates)} cards, "
                f"expected at least {self.min_cards}"
            )

        return GenerationResult(candidates=candidates, model_name=self.model_name)


def create_flashcard_generation_service(settings: Settings) -> FlashcardGenerationServiceProtocol:
    """Build the generation engine selected by the settings."""
    if not settings.ai_enabled:
        return MockFlashcardGenerationService(
            min_cards=settings.GENERATION_MIN_CANDIDATES,
            max_cards=settings.GENERATION_MAX_CANDIDATES,
            delay_seconds=settings.MOCK_GENERATION_DELAY_SECONDS,
        )

    agent = get_flashcard_agent(
        build_ai_model(settings),
        settings.GENERATION_MIN_CANDIDATES,
        settings.GENERATION_MAX_CANDIDATES,
    )
    logger.info("ai_generation_enabled", provider=settings.AI_PROVIDER, model=settings.AI_MODEL_NAME)
    return AIFlashcardGenerationService(
        agent=agent,
        model_name=settings.AI_MODEL_NAME or "",
        min_cards=settings.GENERATION_MIN_CANDIDATES,
        max_cards=settings.GENERATION_MAX_CANDIDATES,
    )
