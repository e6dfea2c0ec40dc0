"""Origin of a flashcard."""

from enum import StrEnum


class FlashcardSourceType(StrEnum):
    """How a flashcard came to exist."""

    AI_FULL = "ai-full"
    """Generated candidate accepted as-is."""

    AI_EDITED = "ai-edited"
    """Generated candidate accepted after the user edited it."""

    MANUAL = "manual"
    """Written by the user."""
