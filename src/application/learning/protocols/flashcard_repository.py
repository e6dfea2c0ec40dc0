"""Protocol for Flashcard repository in learning context."""

from typing import Protocol

from src.domain.learning.entities.flashcard import Flashcard


class FlashcardRepositoryProtocol(Protocol):
    """Protocol for Flashcard repository operations in learning context."""

    def add_many(self, flashcards: list[Flashcard]) -> list[Flashcard]:
        """
        Insert flashcards in a single transaction.

        Either every flashcard is stored or none is.

        Args:
            flashcards: New flashcard entities

        Returns:
            Stored flashcards with database-generated timestamps, in input order

        Raises:
            PersistenceError: If the insert fails (nothing is stored)
        """
        ...
