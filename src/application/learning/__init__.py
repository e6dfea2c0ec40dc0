"""
Learning bounded context - Application layer.

Contains use cases for:
- Generation sources: create (generate candidates), get statistics
- Flashcards: accept a batch of flashcards
"""
