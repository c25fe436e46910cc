"""Backdrop resolution for round candidates."""

import random
from collections.abc import Sequence

from loguru import logger

from guess_the_frame.core.config import settings
from guess_the_frame.modules.catalog.domain.entities import CatalogEntry
from guess_the_frame.modules.catalog.domain.provider import (
    CatalogProviderError,
    MovieCatalogProvider,
)
from guess_the_frame.modules.rounds.domain.entities import Round


class ImageResolver:
    """Turn a catalog entry into a round by picking one of its backdrops.

    resolve() returns None when the movie has no backdrop; that is a normal
    outcome. Provider failures surface as CatalogProviderError so that each
    caller can choose between skipping and aborting.
    """

    def __init__(
        self,
        provider: MovieCatalogProvider,
        image_base: str | None = None,
        rng: random.Random | None = None,
    ):
        self.provider = provider
        if image_base is None:
            image_base = settings.TMDB_IMAGE_BASE
        self.image_base = image_base.rstrip("/")
        self.rng = rng or random.Random()

    async def resolve(self, entry: CatalogEntry) -> Round | None:
        backdrops = await self.provider.backdrops(entry.id)
        if not backdrops:
            return None
        chosen = self.rng.choice(backdrops)
        return Round(title=entry.title, image_path=f"{self.image_base}{chosen.file_path}")

    async def resolve_random(
        self,
        entries: Sequence[CatalogEntry],
        max_attempts: int | None = None,
    ) -> tuple[Round | None, int]:
        """Draw random entries (with replacement) until one has a backdrop.

        Returns the round, or None once max_attempts draws have failed, plus the
        number of attempts made. A provider failure ends the search early.
        """
        if max_attempts is None:
            max_attempts = settings.RANDOM_FRAME_MAX_ATTEMPTS
        if not entries:
            return None, 0

        attempts = 0
        for attempts in range(1, max_attempts + 1):
            entry = self.rng.choice(entries)
            try:
                round_ = await self.resolve(entry)
            except CatalogProviderError as exc:
                logger.warning(f"Backdrop lookup failed for movie {entry.id}: {exc}")
                return None, attempts
            if round_ is not None:
                return round_, attempts
        return None, attempts
