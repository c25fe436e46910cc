"""Answers module infrastructure dependencies."""

from functools import lru_cache

from openai import AsyncOpenAI

from guess_the_frame.core.config import settings


@lru_cache(maxsize=1)
def get_judge_client() -> AsyncOpenAI | None:
    """Shared judge client; None when no API key is configured."""
    if not settings.OPENAI_API_KEY:
        return None
    return AsyncOpenAI(
        api_key=settings.OPENAI_API_KEY,
        base_url=settings.OPENAI_API_BASE,
    )
