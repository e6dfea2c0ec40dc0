"""Repository for Flashcard domain entities."""

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from src.domain.learning.entities.flashcard import Flashcard
from src.exceptions import PersistenceError
from src.infrastructure.learning.mappers.flashcard_mapper import FlashcardMapper


class FlashcardRepository:
    """Repository for Flashcard domain entities."""

    def __init__(self, db: Session) -> None:
        self.db = db
        self.mapper = FlashcardMapper()

    def add_many(self, flashcards: list[Flashcard]) -> list[Flashcard]:
        """
        Insert flashcards in a single transaction.

        Args:
            flashcards: New flashcard entities

        Returns:
            Stored flashcards with database-generated timestamps, in input order

        Raises:
            PersistenceError: If the insert fails (the transaction is rolled back)
        """
        orm_models = [self.mapper.to_orm(flashcard) for flashcard in flashcards]
        try:
            self.db.add_all(orm_models)
            self.db.commit()
            for orm_model in orm_models:
                self.db.refresh(orm_model)
        except SQLAlchemyError as e:
            self.db.rollback()
            raise PersistenceError(f"Failed to insert flashcards: {e}") from e

        return [self.mapper.to_domain(orm_model) for orm_model in orm_models]
