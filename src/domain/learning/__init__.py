"""
Learning bounded context - Domain layer.

This context handles flashcard-based learning features:
- Generation sources: one record per flashcard generation attempt, carrying
  the acceptance statistics of its candidates
- Flashcards: cards accepted by the user, generated or written by hand

Aggregates:
- GenerationSource
- Flashcard
"""
