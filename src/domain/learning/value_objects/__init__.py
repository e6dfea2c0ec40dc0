"""Learning value objects."""

from .source_type import FlashcardSourceType

__all__ = ["FlashcardSourceType"]
