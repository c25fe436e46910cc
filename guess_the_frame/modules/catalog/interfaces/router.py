"""Catalog API routes."""

from datetime import date

from fastapi import APIRouter, Depends, Query

from guess_the_frame.core.config import settings
from guess_the_frame.core.interfaces.http.response import ERROR_RESPONSES, ErrorResponse
from guess_the_frame.modules.catalog.application.dependencies import (
    get_catalog_refresh_service,
)
from guess_the_frame.modules.catalog.application.services import CatalogRefreshService
from guess_the_frame.modules.catalog.domain.exceptions import UnsupportedLanguageError
from guess_the_frame.modules.catalog.interfaces.schemas import CatalogEntryResponse

router = APIRouter(tags=["catalog"])


@router.get(
    "/updateMovieIDList",
    response_model=list[CatalogEntryResponse],
    summary="Refresh the movie id list",
    description=(
        "Re-fetch every discover page for the language and replace its "
        "partition of the catalog index"
    ),
    responses={
        **ERROR_RESPONSES,
        502: {"model": ErrorResponse, "description": "Catalog provider failed"},
    },
)
async def update_movie_id_list(
    lang: str | None = Query(None, description="Language partition (en or hi)"),
    service: CatalogRefreshService = Depends(get_catalog_refresh_service),
) -> list[CatalogEntryResponse]:
    """Refresh one language partition and return it."""
    if lang not in settings.CATALOG_LANGUAGES:
        raise UnsupportedLanguageError(lang, settings.CATALOG_LANGUAGES)

    entries = await service.refresh(
        language=lang,
        start_date=date.fromisoformat(settings.CATALOG_DEFAULT_START_DATE),
        end_date=date.today(),
    )
    return [CatalogEntryResponse.model_validate(entry) for entry in entries]
