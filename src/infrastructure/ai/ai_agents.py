from pydantic import BaseModel
from pydantic_ai import Agent
from pydantic_ai.models import Model


class GeneratedFlashcard(BaseModel):
    front: str
    back: str


FlashcardAgent = Agent[None, list[GeneratedFlashcard]]


def get_flashcard_agent(model: Model, min_cards: int, max_cards: int) -> FlashcardAgent:
    return Agent(
        model,
        output_type=list[GeneratedFlashcard],
        instructions=f"""
        You write study flashcards for spaced repetition from a text the user
        is learning. Rules for every card:
        - It asks about exactly one fact, definition or relationship.
        - The front is a question with a single correct answer, at most 200
          characters, understandable without the source text at hand (never
          mention "the text", "the author" or "the passage").
        - The back answers it precisely in at most 500 characters.
        - No yes/no questions and no questions that list several answers.

        Cover the most important ideas first. Produce between {min_cards} and
        {max_cards} cards, about one per 500 characters of input.
        """,
    )
