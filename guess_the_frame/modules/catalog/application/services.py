"""Catalog refresh service."""

from datetime import date

from loguru import logger

from guess_the_frame.core.infrastructure.logging import BusinessEvents
from guess_the_frame.modules.catalog.domain.entities import (
    CatalogEntry,
    PageRequestSpec,
)
from guess_the_frame.modules.catalog.domain.exceptions import CatalogUnavailableError
from guess_the_frame.modules.catalog.domain.index import CatalogIndex
from guess_the_frame.modules.catalog.domain.provider import (
    CatalogProviderError,
    MovieCatalogProvider,
)


class CatalogRefreshService:
    """Rebuild one language partition of the catalog index from the provider.

    Pages are fetched one after another starting at page 1, until the declared
    page count is reached or a page comes back empty (the provider's total can
    be optimistic). The new partition is built aside and swapped in only when
    every page succeeded, so a failed refresh leaves the previous list in place.
    """

    def __init__(
        self,
        provider: MovieCatalogProvider,
        index: CatalogIndex,
        max_pages: int | None = None,
    ):
        self.provider = provider
        self.index = index
        self.max_pages = max_pages

    async def refresh(
        self, language: str, start_date: date, end_date: date
    ) -> tuple[CatalogEntry, ...]:
        async with self.index.lock(language):
            spec = PageRequestSpec(
                language=language, start_date=start_date, end_date=end_date
            )
            try:
                entries, pages_fetched = await self._fetch_all(spec)
            except CatalogProviderError as exc:
                BusinessEvents.catalog_fetch_failed(
                    operation="refresh", error=str(exc), language=language
                )
                raise CatalogUnavailableError(language, str(exc)) from exc

            self.index.replace(language, entries)

        BusinessEvents.catalog_refreshed(
            language=language, entry_count=len(entries), pages=pages_fetched
        )
        return self.index.snapshot(language)

    async def _fetch_all(
        self, spec: PageRequestSpec
    ) -> tuple[list[CatalogEntry], int]:
        # Page 1 doubles as the metadata call that declares the page count.
        first_page = await self.provider.discover(spec)
        total_pages = first_page.total_pages
        if self.max_pages is not None:
            total_pages = min(total_pages, self.max_pages)

        entries: list[CatalogEntry] = []
        seen_ids: set[int] = set()
        pages_fetched = 0
        for page in range(1, total_pages + 1):
            result = first_page if page == 1 else await self.provider.discover(
                spec.with_page(page)
            )
            pages_fetched += 1
            if not result.results:
                logger.info(f"No more movies found on page {page}.")
                break

            for entry in result.results:
                if entry.id in seen_ids:
                    continue
                seen_ids.add(entry.id)
                entries.append(entry)
            logger.debug(f"Fetched page {page}: {len(result.results)} movies.")

        return entries, pages_fetched
