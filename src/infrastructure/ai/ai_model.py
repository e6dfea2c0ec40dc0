"""Pydantic AI model for the configured provider."""

from pydantic_ai.models import Model
from pydantic_ai.models.anthropic import AnthropicModel
from pydantic_ai.models.google import GoogleModel
from pydantic_ai.models.openai import OpenAIChatModel
from pydantic_ai.providers.anthropic import AnthropicProvider
from pydantic_ai.providers.google import GoogleProvider
from pydantic_ai.providers.ollama import OllamaProvider
from pydantic_ai.providers.openai import OpenAIProvider

from src.config import Settings


def build_ai_model(settings: Settings) -> Model:
    """
    Build the model named by AI_MODEL_NAME on the AI_PROVIDER backend.

    Credentials are checked by the Settings validators; no request is made
    until the model is first used.

    Raises:
        ValueError: If no provider is configured
    """
    model_name = settings.AI_MODEL_NAME or ""

    match settings.AI_PROVIDER:
        case "ollama":
            return OpenAIChatModel(
                model_name, provider=OllamaProvider(base_url=settings.OPENAI_BASE_URL)
            )
        case "openai":
            return OpenAIChatModel(
                model_name, provider=OpenAIProvider(api_key=settings.OPENAI_API_KEY)
            )
        case "anthropic":
            return AnthropicModel(
                model_name, provider=AnthropicProvider(api_key=settings.ANTHROPIC_API_KEY)
            )
        case "google":
            return GoogleModel(model_name, provider=GoogleProvider(api_key=settings.GEMINI_API_KEY))
        case _:
            raise ValueError(f"No such AI model provider available: {settings.AI_PROVIDER}")
