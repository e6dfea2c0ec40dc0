"""Pytest configuration and fixtures."""

import os

# Settings are read once at import time of the application
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"

from collections.abc import Generator
from typing import Any
from uuid import UUID, uuid4

import pytest
from dependency_injector import providers
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from src import models
from src.constants import DEFAULT_USER_ID
from src.core import container
from src.database import Base, get_db
from src.infrastructure.ai.flashcard_generation_service import MockFlashcardGenerationService
from src.main import app

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# Create test engine
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)

OTHER_USER_ID = UUID("11111111-1111-1111-1111-111111111111")


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def generation_service() -> MockFlashcardGenerationService:
    """Generation engine used by the application during the test."""
    return MockFlashcardGenerationService()


@pytest.fixture
def client(
    db_session: Session, generation_service: MockFlashcardGenerationService
) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with (
        container.flashcard_generation_service.override(providers.Object(generation_service)),
        TestClient(app) as test_client,
    ):
        yield test_client

    app.dependency_overrides.clear()


def create_test_generation_source(
    db_session: Session,
    user_id: UUID = DEFAULT_USER_ID,
    model_name: str | None = "mock-model-v1",
    total_generated: int = 5,
    total_accepted: int = 0,
    total_accepted_edited: int = 0,
) -> models.GenerationSource:
    """Insert a generation source row directly."""
    generation_source = models.GenerationSource(
        id=uuid4(),
        user_id=user_id,
        input_text_hash="a" * 64,
        model_name=model_name,
        total_generated=total_generated,
        total_accepted=total_accepted,
        total_accepted_edited=total_accepted_edited,
    )
    db_session.add(generation_source)
    db_session.commit()
    db_session.refresh(generation_source)
    return generation_source


@pytest.fixture
def test_generation_source(db_session: Session) -> models.GenerationSource:
    """Generation source owned by the default user."""
    return create_test_generation_source(db_session)


@pytest.fixture
def foreign_generation_source(db_session: Session) -> models.GenerationSource:
    """Generation source owned by another user."""
    return create_test_generation_source(db_session, user_id=OTHER_USER_ID)
