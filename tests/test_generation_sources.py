"""Tests for generation sources API endpoints."""

from uuid import uuid4

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from src import models
from src.application.learning.protocols.flashcard_generation_service import GenerationResult
from src.domain.common.value_objects import ContentHash
from src.exceptions import GenerationServiceError
from src.infrastructure.ai.flashcard_generation_service import MockFlashcardGenerationService

GENERATION_SOURCES_URL = "/api/v1/generation-sources"


class FailingGenerationService:
    """Generation engine that always fails."""

    def __init__(self, error: Exception) -> None:
        self.error = error

    async def generate(self, input_text: str) -> GenerationResult:
        raise self.error


class TestCreateGenerationSource:
    """Test suite for POST /generation-sources endpoint."""

    def test_create_generation_source_success(
        self, client: TestClient, db_session: Session
    ) -> None:
        """Test generating candidates from valid input text."""
        response = client.post(GENERATION_SOURCES_URL, json={"inputText": "a" * 3000})

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert set(data) == {"id", "createdAt", "candidates"}
        assert len(data["candidates"]) == 6
        assert data["candidates"][0] == {
            "front": "Sample question 1 from the provided text",
            "back": "Sample answer 1 explaining the concept in detail",
        }

        # Verify the generation outcome was stored
        db_source = db_session.query(models.GenerationSource).one()
        assert str(db_source.id) == data["id"]
        assert db_source.model_name == "mock-model-v1"
        assert db_source.total_generated == 6
        assert db_source.total_accepted == 0
        assert db_source.total_accepted_edited == 0
        assert db_source.total_rejected == 0
        assert db_source.error_message is None

    def test_input_text_minimum_length_accepted(self, client: TestClient) -> None:
        """Test that exactly 1000 characters is accepted."""
        response = client.post(GENERATION_SOURCES_URL, json={"inputText": "x" * 1000})

        assert response.status_code == status.HTTP_201_CREATED
        # 1000 // 500 = 2, raised to the minimum of 5
        assert len(response.json()["candidates"]) == 5

    def test_input_text_maximum_length_accepted(self, client: TestClient) -> None:
        response = client.post(GENERATION_SOURCES_URL, json={"inputText": "x" * 10000})

        assert response.status_code == status.HTTP_201_CREATED
        # 10000 // 500 = 20, capped at 15
        assert len(response.json()["candidates"]) == 15

    @pytest.mark.parametrize("length", [999, 10001])
    def test_input_text_length_out_of_bounds(
        self, client: TestClient, db_session: Session, length: int
    ) -> None:
        """Test that input text outside 1000-10000 characters is rejected."""
        response = client.post(GENERATION_SOURCES_URL, json={"inputText": "x" * length})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            "error": {
                "message": "INPUT_TEXT_INVALID",
                "fields": {"inputText": "INPUT_TEXT_INVALID"},
            }
        }
        assert db_session.query(models.GenerationSource).count() == 0

    def test_input_text_is_trimmed_before_validation(self, client: TestClient) -> None:
        """Test that surrounding whitespace does not count towards the length."""
        response = client.post(
            GENERATION_SOURCES_URL, json={"inputText": "   " + "x" * 999 + "   "}
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_input_text_hash_ignores_surrounding_whitespace(
        self, client: TestClient, db_session: Session
    ) -> None:
        text = "y" * 1200
        response = client.post(GENERATION_SOURCES_URL, json={"inputText": f"\n  {text}  \n"})

        assert response.status_code == status.HTTP_201_CREATED
        db_source = db_session.query(models.GenerationSource).one()
        assert db_source.input_text_hash == ContentHash.compute(text).value

    def test_input_text_missing(self, client: TestClient) -> None:
        response = client.post(GENERATION_SOURCES_URL, json={})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"]["fields"] == {"inputText": "INPUT_TEXT_INVALID"}

    def test_input_text_wrong_type(self, client: TestClient) -> None:
        response = client.post(GENERATION_SOURCES_URL, json={"inputText": 12345})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["error"]["fields"] == {"inputText": "INPUT_TEXT_INVALID"}

    def test_body_that_is_not_an_object(self, client: TestClient) -> None:
        response = client.post(GENERATION_SOURCES_URL, json=["x" * 2000])

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            "error": {
                "message": "REQUEST_BODY_INVALID",
                "fields": {"body": "REQUEST_BODY_INVALID"},
            }
        }

    def test_invalid_json_body(self, client: TestClient) -> None:
        """Test that a malformed body is reported as a whole-body error."""
        response = client.post(
            GENERATION_SOURCES_URL,
            content=b"{not json",
            headers={"Content-Type": "application/json"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            "error": {
                "message": "Invalid JSON body",
                "fields": {"body": "REQUEST_BODY_INVALID"},
            }
        }

    def test_each_request_creates_a_new_generation_source(
        self, client: TestClient, db_session: Session
    ) -> None:
        """Test that identical input text is not deduplicated."""
        text = "z" * 2000
        first = client.post(GENERATION_SOURCES_URL, json={"inputText": text})
        second = client.post(GENERATION_SOURCES_URL, json={"inputText": text})

        assert first.status_code == status.HTTP_201_CREATED
        assert second.status_code == status.HTTP_201_CREATED
        assert first.json()["id"] != second.json()["id"]
        assert db_session.query(models.GenerationSource).count() == 2


class TestCreateGenerationSourceEngineFailure:
    """Test suite for generation engine failures on POST /generation-sources."""

    @pytest.fixture
    def generation_service(self) -> FailingGenerationService:
        return FailingGenerationService(GenerationServiceError("model is unreachable"))

    def test_engine_failure_returns_502(self, client: TestClient, db_session: Session) -> None:
        """Test that an engine failure is reported and recorded on the source."""
        response = client.post(GENERATION_SOURCES_URL, json={"inputText": "a" * 1500})

        assert response.status_code == status.HTTP_502_BAD_GATEWAY
        assert response.json() == {"error": {"message": "AI_SERVICE_UNAVAILABLE"}}

        db_source = db_session.query(models.GenerationSource).one()
        assert db_source.error_message == "model is unreachable"
        assert db_source.model_name is None
        assert db_source.total_generated == 0


class TestCreateGenerationSourceUnexpectedFailure:
    @pytest.fixture
    def generation_service(self) -> FailingGenerationService:
        return FailingGenerationService(RuntimeError("boom"))

    def test_unexpected_engine_error_returns_500(
        self, client: TestClient, db_session: Session
    ) -> None:
        response = client.post(GENERATION_SOURCES_URL, json={"inputText": "a" * 1500})

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"error": {"message": "INTERNAL_SERVER_ERROR"}}

        db_source = db_session.query(models.GenerationSource).one()
        assert db_source.error_message == "boom"


class TestGetGenerationSource:
    """Test suite for GET /generation-sources/:id endpoint."""

    def test_get_generation_source_success(
        self, client: TestClient, test_generation_source: models.GenerationSource
    ) -> None:
        response = client.get(f"{GENERATION_SOURCES_URL}/{test_generation_source.id}")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert data["id"] == str(test_generation_source.id)
        assert data["modelName"] == "mock-model-v1"
        assert data["totalGenerated"] == 5
        assert data["totalAccepted"] == 0
        assert data["totalAcceptedEdited"] == 0
        assert data["totalRejected"] == 0
        assert data["errorMessage"] is None

    def test_get_generation_source_created_through_api(self, client: TestClient) -> None:
        created = client.post(GENERATION_SOURCES_URL, json={"inputText": "a" * 4000}).json()

        response = client.get(f"{GENERATION_SOURCES_URL}/{created['id']}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["totalGenerated"] == 8

    def test_get_generation_source_not_found(self, client: TestClient) -> None:
        response = client.get(f"{GENERATION_SOURCES_URL}/{uuid4()}")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {
            "error": {
                "message": "NOT_FOUND",
                "fields": {"generationSourceId": "GENERATION_SOURCE_NOT_FOUND"},
            }
        }

    def test_get_generation_source_of_other_user_is_hidden(
        self, client: TestClient, foreign_generation_source: models.GenerationSource
    ) -> None:
        response = client.get(f"{GENERATION_SOURCES_URL}/{foreign_generation_source.id}")

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_get_generation_source_invalid_id(self, client: TestClient) -> None:
        response = client.get(f"{GENERATION_SOURCES_URL}/not-a-uuid")

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {
            "error": {
                "message": "FIELD_VALIDATION_FAILED",
                "fields": {"generation_source_id": "GENERATION_SOURCE_ID_INVALID"},
            }
        }


class TestMockEngineDelay:
    @pytest.fixture
    def generation_service(self) -> MockFlashcardGenerationService:
        return MockFlashcardGenerationService(min_cards=1, max_cards=3, delay_seconds=0.01)

    def test_configured_bounds_are_used(self, client: TestClient) -> None:
        response = client.post(GENERATION_SOURCES_URL, json={"inputText": "a" * 5000})

        assert response.status_code == status.HTTP_201_CREATED
        assert len(response.json()["candidates"]) == 3
