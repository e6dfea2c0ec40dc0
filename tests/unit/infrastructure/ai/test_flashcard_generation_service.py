"""Tests for the flashcard generation engines."""

from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest

from src.config import Settings
from src.exceptions import GenerationServiceError
from src.infrastructure.ai.ai_agents import GeneratedFlashcard
from src.infrastructure.ai.flashcard_generation_service import (
    MOCK_MODEL_NAME,
    AIFlashcardGenerationService,
    MockFlashcardGenerationService,
    create_flashcard_generation_service,
)


class TestMockFlashcardGenerationService:
    @pytest.mark.parametrize(
        ("length", "expected"),
        [(1000, 5), (2499, 5), (2500, 5), (3000, 6), (7499, 14), (7500, 15), (10000, 15)],
    )
    def test_candidate_count(self, length: int, expected: int) -> None:
        assert MockFlashcardGenerationService().candidate_count("x" * length) == expected

    @pytest.mark.asyncio
    async def test_generate(self) -> None:
        result = await MockFlashcardGenerationService().generate("x" * 3500)

        assert result.model_name == MOCK_MODEL_NAME
        assert len(result.candidates) == 7
        assert result.candidates[6].front == "Sample question 7 from the provided text"
        assert result.candidates[6].back == "Sample answer 7 explaining the concept in detail"


def _make_agent(run: AsyncMock) -> MagicMock:
    agent = MagicMock()
    agent.run = run
    return agent


class TestAIFlashcardGenerationService:
    @pytest.mark.asyncio
    async def test_generate_returns_cleaned_cards(self) -> None:
        output = [
            GeneratedFlashcard(front=" What is X? ", back=" X is Y. "),
            GeneratedFlashcard(front="", back="dropped"),
            GeneratedFlashcard(front="What is Z?", back="Z is W."),
        ]
        run = AsyncMock(return_value=SimpleNamespace(output=output))

        result = await AIFlashcardGenerationService(_make_agent(run), "llama3").generate("input")

        run.assert_awaited_once_with("input")
        assert result.model_name == "llama3"
        assert [(c.front, c.back) for c in result.candidates] == [
            ("What is X?", "X is Y."),
            ("What is Z?", "Z is W."),
        ]

    @pytest.mark.asyncio
    async def test_generate_caps_card_count(self) -> None:
        output = [GeneratedFlashcard(front=f"Q{i}", back=f"A{i}") for i in range(20)]
        run = AsyncMock(return_value=SimpleNamespace(output=output))
        service = AIFlashcardGenerationService(_make_agent(run), "llama3", max_cards=15)

        result = await service.generate("input")

        assert len(result.candidates) == 15

    @pytest.mark.asyncio
    async def test_provider_error_becomes_generation_error(self) -> None:
        run = AsyncMock(side_effect=ConnectionError("refused"))
        service = AIFlashcardGenerationService(_make_agent(run), "llama3")

        with pytest.raises(GenerationServiceError) as exc_info:
            await service.generate("input")

        assert "refused" in exc_info.value.reason
        assert exc_info.value.status_code == 502

    @pytest.mark.asyncio
    async def test_too_few_cards_is_an_error(self) -> None:
        output = [GeneratedFlashcard(front=f"Q{i}", back=f"A{i}") for i in range(4)]
        run = AsyncMock(return_value=SimpleNamespace(output=output))
        service = AIFlashcardGenerationService(_make_agent(run), "llama3", min_cards=5)

        with pytest.raises(GenerationServiceError) as exc_info:
            await service.generate("input")

        assert "expected at least 5" in exc_info.value.reason

    @pytest.mark.asyncio
    async def test_empty_output_is_an_error(self) -> None:
        run = AsyncMock(return_value=SimpleNamespace(output=[]))
        service = AIFlashcardGenerationService(_make_agent(run), "llama3")

        with pytest.raises(GenerationServiceError):
            await service.generate("input")


class TestCreateFlashcardGenerationService:
    def test_mock_engine_without_provider(self) -> None:
        settings = Settings(
            _env_file=None,
            GENERATION_MIN_CANDIDATES=2,
            GENERATION_MAX_CANDIDATES=4,
            MOCK_GENERATION_DELAY_SECONDS=0.5,
        )

        service = create_flashcard_generation_service(settings)

        assert isinstance(service, MockFlashcardGenerationService)
        assert service.min_cards == 2
        assert service.max_cards == 4
        assert service.delay_seconds == 0.5

    def test_ai_engine_with_provider(self) -> None:
        settings = Settings(
            _env_file=None,
            AI_PROVIDER="ollama",
            AI_MODEL_NAME="llama3",
            OPENAI_BASE_URL="http://localhost:11434/v1",
            GENERATION_MAX_CANDIDATES=12,
        )

        service = create_flashcard_generation_service(settings)

        assert isinstance(service, AIFlashcardGenerationService)
        assert service.model_name == "llama3"
        assert service.min_cards == 5
        assert service.max_cards == 12
