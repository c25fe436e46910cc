"""Discover page planning for round assembly."""

from datetime import date

from loguru import logger

from guess_the_frame.core.config import settings
from guess_the_frame.core.infrastructure.logging import BusinessEvents
from guess_the_frame.modules.catalog.domain.entities import PageRequestSpec
from guess_the_frame.modules.catalog.domain.provider import (
    CatalogProviderError,
    MovieCatalogProvider,
)
from guess_the_frame.modules.rounds.domain.exceptions import PlanningFailedError

# Pages 1 and 2 are always fetched, whatever the date range.
SEED_PAGES = 2


def year_gap(start_date: date, end_date: date) -> int:
    """Whole calendar years between two dates, counting toward zero.

    The difference drops by one when the end's month/day falls before the
    start's month/day, so 2020-06-15 -> 2023-06-14 is 2 years, not 3.
    """
    gap = end_date.year - start_date.year
    if (end_date.month, end_date.day) < (start_date.month, start_date.day):
        gap -= 1
    return gap


def plan_page_count(gap: int, total_pages: int) -> int:
    """Seed pages always, then up to min(gap, total_pages)."""
    return max(SEED_PAGES, min(gap, total_pages))


class PagePlanner:
    """Decide how many discover pages to pull for a round request.

    Wider date ranges get more pages on the assumption that more years need
    more popularity-sorted pages to stay diverse. The count does not depend on
    the number of rounds requested, so a narrow range with a large request may
    come back short. The provider's declared page total is capped at max_pages,
    since discover rejects pages beyond that limit.
    """

    def __init__(self, provider: MovieCatalogProvider, max_pages: int | None = None):
        self.provider = provider
        self.max_pages = max_pages if max_pages is not None else settings.TMDB_MAX_PAGE

    async def plan(
        self,
        language: str,
        start_date: date,
        end_date: date,
        desired_count: int,
    ) -> int:
        spec = PageRequestSpec(
            language=language, start_date=start_date, end_date=end_date
        )
        try:
            metadata = await self.provider.discover(spec)
        except CatalogProviderError as exc:
            BusinessEvents.catalog_fetch_failed(
                operation="plan", error=str(exc), language=language
            )
            raise PlanningFailedError(
                f"Could not determine page count for '{language}': {exc}"
            ) from exc

        gap = year_gap(start_date, end_date)
        total_pages = min(metadata.total_pages, self.max_pages)
        page_count = plan_page_count(gap, total_pages)
        logger.debug(
            f"Planned {page_count} pages for {desired_count} rounds "
            f"(year gap {gap}, total pages {total_pages})"
        )
        return page_count
