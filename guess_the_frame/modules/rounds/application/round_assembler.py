"""Round assembly: plan pages, fetch them, shuffle, resolve backdrops."""

import asyncio
import random
from datetime import date

from loguru import logger

from guess_the_frame.core.config import settings
from guess_the_frame.core.infrastructure.logging import BusinessEvents
from guess_the_frame.modules.catalog.domain.entities import (
    CatalogEntry,
    DiscoverPage,
    PageRequestSpec,
)
from guess_the_frame.modules.catalog.domain.provider import (
    CatalogProviderError,
    MovieCatalogProvider,
)
from guess_the_frame.modules.rounds.application.image_resolver import ImageResolver
from guess_the_frame.modules.rounds.application.page_planner import PagePlanner
from guess_the_frame.modules.rounds.application.sampler import shuffle_candidates
from guess_the_frame.modules.rounds.domain.entities import Round
from guess_the_frame.modules.rounds.domain.exceptions import AssemblyFailedError


class RoundAssembler:
    """Build up to desired_count rounds from distinct movies.

    Planned pages are fetched concurrently, at most fetch_concurrency at a
    time, and joined all-or-nothing. Backdrop lookups then run one candidate
    at a time so the walk stops as soon as enough rounds are collected.
    Running out of candidates yields a shorter list; only provider failures
    raise.
    """

    def __init__(
        self,
        provider: MovieCatalogProvider,
        planner: PagePlanner | None = None,
        resolver: ImageResolver | None = None,
        rng: random.Random | None = None,
        fetch_concurrency: int | None = None,
    ):
        self.provider = provider
        self.rng = rng or random.Random()
        self.fetch_concurrency = fetch_concurrency or settings.TMDB_FETCH_CONCURRENCY
        self.planner = planner or PagePlanner(provider)
        self.resolver = resolver or ImageResolver(provider, rng=self.rng)

    async def assemble(
        self,
        language: str,
        start_date: date,
        end_date: date,
        desired_count: int,
    ) -> list[Round]:
        if desired_count <= 0:
            return []

        page_count = await self.planner.plan(
            language, start_date, end_date, desired_count
        )
        spec = PageRequestSpec(
            language=language, start_date=start_date, end_date=end_date
        )
        candidates = await self._fetch_candidates(spec, page_count)
        shuffle_candidates(candidates, self.rng)

        rounds: list[Round] = []
        placed_ids: set[int] = set()
        for entry in candidates:
            if len(rounds) >= desired_count:
                break
            if entry.id in placed_ids:
                continue

            try:
                round_ = await self.resolver.resolve(entry)
            except CatalogProviderError as exc:
                BusinessEvents.catalog_fetch_failed(
                    operation="images", error=str(exc), language=language
                )
                raise AssemblyFailedError(
                    f"Backdrop lookup failed for movie {entry.id}: {exc}"
                ) from exc

            if round_ is None:
                continue
            rounds.append(round_)
            placed_ids.add(entry.id)
            logger.debug(f"Movie {len(placed_ids)} of language {language} added")

        BusinessEvents.rounds_assembled(
            language=language,
            requested=desired_count,
            delivered=len(rounds),
            pages=page_count,
            candidates=len(candidates),
        )
        return rounds

    async def _fetch_candidates(
        self, spec: PageRequestSpec, page_count: int
    ) -> list[CatalogEntry]:
        semaphore = asyncio.Semaphore(self.fetch_concurrency)

        async def fetch_page(page: int) -> DiscoverPage:
            async with semaphore:
                return await self.provider.discover(spec.with_page(page))

        try:
            pages: list[DiscoverPage] = await asyncio.gather(
                *(fetch_page(page) for page in range(1, page_count + 1))
            )
        except CatalogProviderError as exc:
            BusinessEvents.catalog_fetch_failed(
                operation="discover", error=str(exc), language=spec.language
            )
            raise AssemblyFailedError(
                f"Failed to fetch discover pages for '{spec.language}': {exc}"
            ) from exc
        return [entry for page in pages for entry in page.results]
