"""LLM answer judge.

Asks a chat model whether a player's guess, usually produced by speech-to-text,
names the correct movie. The verdict fails closed: anything other than a clear
"yes", including an unreachable model, scores the guess as wrong.
"""

from collections.abc import Sequence
from typing import cast

from loguru import logger
from openai import AsyncOpenAI
from openai.types.chat import ChatCompletionMessageParam
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

from guess_the_frame.core.config import settings
from guess_the_frame.core.infrastructure.logging import BusinessEvents

AFFIRMATIVE_REPLY = "yes"


class AnswerJudgeService:
    """Score a free-text guess against the correct title."""

    SYSTEM_PROMPT = (
        "You are an assistant that determines if the player's guess matches the "
        "movie title, considering minor differences due to voice-to-text "
        "conversion. Answer with 'Yes' if the guess is exact or close, or 'No' "
        "if it's not."
    )

    def __init__(self, openai_client: AsyncOpenAI | None = None):
        self._client = openai_client

    @property
    def client(self) -> AsyncOpenAI:
        """OpenAI-compatible client, created on first use."""
        if self._client is None:
            self._client = AsyncOpenAI(
                api_key=settings.OPENAI_API_KEY,
                base_url=settings.OPENAI_API_BASE,
            )
        return self._client

    async def judge(self, correct_title: str, guess: str) -> bool:
        """Return True only when the model answers exactly "yes"."""
        if not settings.LLM_ENABLED:
            return self._degraded("LLM disabled")
        if self._client is None and not settings.OPENAI_API_KEY:
            return self._degraded("OPENAI_API_KEY not configured")

        messages = self._build_messages(correct_title, guess)
        try:
            reply = await self._call_llm(messages)
        except Exception as e:
            logger.exception(f"Answer judge LLM call failed: {e}")
            BusinessEvents.answer_judged(verdict=False, degraded=True)
            return False

        verdict = self._parse_reply(reply)
        BusinessEvents.answer_judged(verdict=verdict)
        return verdict

    @staticmethod
    def _degraded(reason: str) -> bool:
        BusinessEvents.feature_degraded(feature="answer_judge", reason=reason)
        BusinessEvents.answer_judged(verdict=False, degraded=True)
        return False

    def _build_user_prompt(self, correct_title: str, guess: str) -> str:
        return (
            f"The correct title is: '{correct_title}'. "
            f"The player's guess is: '{guess}'. "
            "If the guess is exact or close, respond with 'Yes'. "
            "Otherwise, respond with 'No'. Answer with 'Yes' or 'No' only."
        )

    def _build_messages(
        self, correct_title: str, guess: str
    ) -> list[ChatCompletionMessageParam]:
        return cast(
            list[ChatCompletionMessageParam],
            [
                {"role": "system", "content": self.SYSTEM_PROMPT},
                {
                    "role": "user",
                    "content": self._build_user_prompt(correct_title, guess),
                },
            ],
        )

    @staticmethod
    def _parse_reply(reply: str) -> bool:
        return reply.strip().lower() == AFFIRMATIVE_REPLY

    @retry(
        retry=retry_if_exception_type((Exception,)),
        stop=stop_after_attempt(2),
        wait=wait_exponential(multiplier=1, min=1, max=5),
        reraise=True,
    )
    async def _call_llm(self, messages: Sequence[ChatCompletionMessageParam]) -> str:
        response = await self.client.chat.completions.create(
            model=settings.OPENAI_JUDGE_MODEL,
            messages=list(messages),
            temperature=0,
            max_tokens=5,
        )
        return response.choices[0].message.content or ""
