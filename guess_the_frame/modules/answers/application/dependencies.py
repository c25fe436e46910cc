"""Answers module application dependencies."""

from typing import NoReturn

from fastapi import Depends
from openai import AsyncOpenAI

from guess_the_frame.modules.answers.application.answer_judge import AnswerJudgeService


def _missing_dependency(name: str) -> NoReturn:
    raise RuntimeError(f"Missing dependency override for {name}")


async def get_judge_client() -> AsyncOpenAI | None:
    _missing_dependency("AsyncOpenAI")


async def get_answer_judge_service(
    client: AsyncOpenAI | None = Depends(get_judge_client),
) -> AnswerJudgeService:
    return AnswerJudgeService(openai_client=client)
