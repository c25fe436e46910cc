"""Round API routes."""

from datetime import date

from fastapi import APIRouter, Depends, Query

from guess_the_frame.core.config import settings
from guess_the_frame.core.domain.exceptions import ValidationError
from guess_the_frame.core.interfaces.http.response import ERROR_RESPONSES, ErrorResponse
from guess_the_frame.modules.rounds.application.dependencies import (
    get_random_frame_service,
    get_round_assembler,
)
from guess_the_frame.modules.rounds.application.round_assembler import RoundAssembler
from guess_the_frame.modules.rounds.application.services import RandomFrameService
from guess_the_frame.modules.rounds.interfaces.schemas import RoundResponse

router = APIRouter(tags=["rounds"])


def _parse_bound(value: str | None, default: str, *, end_of_year: bool) -> date:
    """Parse a YYYY-MM-DD date, or a bare YYYY year, falling back to default."""
    text = (value or "").strip() or default
    try:
        if text.isdigit() and len(text) == 4:
            year = int(text)
            return date(year, 12, 31) if end_of_year else date(year, 1, 1)
        return date.fromisoformat(text)
    except ValueError as exc:
        raise ValidationError(f"Invalid date '{text}', expected YYYY-MM-DD") from exc


def _parse_frame_count(value: str | None) -> int:
    """Parse noOfFrame; zero or negative counts yield an empty result."""
    try:
        return int((value or "").strip())
    except ValueError as exc:
        raise ValidationError("noOfFrame must be an integer") from exc


@router.get(
    "/randomMovieFrame",
    response_model=RoundResponse,
    summary="Get one random movie frame",
    description=(
        "Pick random movies from the cached catalog until one has a backdrop; "
        "any language other than 'en' uses the Hindi partition"
    ),
    responses={
        404: {"model": ErrorResponse, "description": "No usable frame found"},
    },
)
async def random_movie_frame(
    lang: str | None = Query(None, description="Language partition (en or hi)"),
    service: RandomFrameService = Depends(get_random_frame_service),
) -> RoundResponse:
    language = "en" if lang == "en" else "hi"
    round_ = await service.random_frame(language)
    return RoundResponse.from_round(round_)


@router.get(
    "/anyNumberOfMovieFrame",
    response_model=list[RoundResponse],
    summary="Get a set of movie frames",
    description=(
        "Assemble up to noOfFrame rounds from distinct movies released in the "
        "date range; fewer are returned when candidates run out"
    ),
    responses=ERROR_RESPONSES,
)
async def any_number_of_movie_frame(
    lang: str | None = Query(None, description="Original language code"),
    start_year: str | None = Query(
        None, alias="startYear", description="Release date lower bound"
    ),
    end_year: str | None = Query(
        None, alias="endYear", description="Release date upper bound"
    ),
    no_of_frame: str | None = Query(
        None, alias="noOfFrame", description="Number of rounds wanted"
    ),
    assembler: RoundAssembler = Depends(get_round_assembler),
) -> list[RoundResponse]:
    desired_count = _parse_frame_count(no_of_frame)
    if not lang:
        raise ValidationError("lang is required")

    rounds = await assembler.assemble(
        language=lang,
        start_date=_parse_bound(
            start_year, settings.ROUNDS_DEFAULT_START_DATE, end_of_year=False
        ),
        end_date=_parse_bound(
            end_year, settings.ROUNDS_DEFAULT_END_DATE, end_of_year=True
        ),
        desired_count=desired_count,
    )
    return [RoundResponse.from_round(round_) for round_ in rounds]
