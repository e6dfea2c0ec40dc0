"""
Application constants.

This module contains constants used throughout the application.
"""

from uuid import UUID

# TODO: Remove DEFAULT_USER_ID when authentication is implemented.
# Every request currently runs as this placeholder user. Search for usages of
# this constant when implementing authentication to replace with the
# authenticated user ID.
DEFAULT_USER_ID = UUID("00000000-0000-0000-0000-000000000000")

# Generation source input text bounds (after trimming)
INPUT_TEXT_MIN_LENGTH = 1000
INPUT_TEXT_MAX_LENGTH = 10000

# Flashcard field bounds (after trimming)
FLASHCARD_FRONT_MAX_LENGTH = 200
FLASHCARD_BACK_MAX_LENGTH = 500

# Flashcards accepted per request
FLASHCARD_BATCH_MIN_SIZE = 1
FLASHCARD_BATCH_MAX_SIZE = 50
