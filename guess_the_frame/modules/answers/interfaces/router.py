"""Answer API routes."""

from fastapi import APIRouter, Depends, Query

from guess_the_frame.core.config import settings
from guess_the_frame.core.domain.exceptions import ValidationError
from guess_the_frame.core.interfaces.http.response import ERROR_RESPONSES
from guess_the_frame.modules.answers.application.answer_judge import AnswerJudgeService
from guess_the_frame.modules.answers.application.dependencies import (
    get_answer_judge_service,
)
from guess_the_frame.modules.answers.interfaces.schemas import CheckAnswerResponse

router = APIRouter(tags=["answers"])


@router.get(
    "/checkAnswer",
    response_model=CheckAnswerResponse,
    response_model_by_alias=True,
    summary="Check a player's guess",
    description=(
        "Ask the LLM judge whether the guess matches the title, tolerating "
        "speech-to-text noise; judge failures score as wrong"
    ),
    responses=ERROR_RESPONSES,
)
async def check_answer(
    correct_ans: str | None = Query(
        None, alias="correctAns", description="Correct movie title"
    ),
    user_ans: str | None = Query(None, alias="userAns", description="Player's guess"),
    service: AnswerJudgeService = Depends(get_answer_judge_service),
) -> CheckAnswerResponse:
    if not correct_ans:
        raise ValidationError("correctAns is required")

    guess = user_ans or settings.ANSWER_FALLBACK_GUESS
    verdict = await service.judge(correct_ans, guess)
    return CheckAnswerResponse(user_get_mark=verdict)
