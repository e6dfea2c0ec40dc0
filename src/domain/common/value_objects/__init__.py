"""Common value objects shared across all domain modules."""

from .content_hash import ContentHash
from .ids import FlashcardId, GenerationSourceId, UserId

__all__ = [
    "ContentHash",
    # IDs
    "FlashcardId",
    "GenerationSourceId",
    "UserId",
]
