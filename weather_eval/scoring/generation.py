"""Text generation client used by the LLM judge scorers."""

from __future__ import annotations

from functools import lru_cache
from typing import Optional, Protocol

from openai import AsyncOpenAI

from config.settings import get_settings


class TextGenerator(Protocol):
    """Anything that turns a prompt into a single text blob."""

    async def generate(
        self,
        model: str,
        prompt: str,
        temperature: Optional[float] = None,
    ) -> str: ...


class OpenAIGenerator:
    """Generates text through the OpenAI chat completions API."""

    def __init__(self, api_key: Optional[str] = None):
        """Initialize the generator.

        Args:
            api_key: OpenAI API key (uses OPENAI_API_KEY env var if not provided)
        """
        self.client = AsyncOpenAI(api_key=api_key)

    async def generate(
        self,
        model: str,
        prompt: str,
        temperature: Optional[float] = None,
    ) -> str:
        """Send the prompt as a single user message and return the reply text.

        Args:
            model: Model identifier, e.g. "gpt-4o-mini"
            prompt: Full prompt text
            temperature: Sampling temperature; None keeps the provider default

        Returns:
            Generated text, or "" when the model returned no content
        """
        kwargs = {}
        if temperature is not None:
            kwargs["temperature"] = temperature

        response = await self.client.chat.completions.create(
            model=model,
            messages=[{"role": "user", "content": prompt}],
            **kwargs,
        )
        return response.choices[0].message.content or ""


@lru_cache
def get_default_generator() -> OpenAIGenerator:
    """Get a cached generator configured from settings.

    Raises the OpenAI SDK's error if no API key is configured anywhere.
    """
    settings = get_settings()
    api_key = (
        settings.openai_api_key.get_secret_value()
        if settings.openai_api_key
        else None
    )
    return OpenAIGenerator(api_key=api_key)
