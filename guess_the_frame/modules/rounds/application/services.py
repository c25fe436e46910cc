"""Single-frame round service."""

from guess_the_frame.core.infrastructure.logging import BusinessEvents
from guess_the_frame.modules.catalog.domain.index import CatalogIndex
from guess_the_frame.modules.rounds.application.image_resolver import ImageResolver
from guess_the_frame.modules.rounds.domain.entities import Round
from guess_the_frame.modules.rounds.domain.exceptions import FrameNotFoundError


class RandomFrameService:
    """Serve one round drawn uniformly from a cached catalog partition."""

    def __init__(
        self,
        index: CatalogIndex,
        resolver: ImageResolver,
        max_attempts: int,
    ):
        self.index = index
        self.resolver = resolver
        self.max_attempts = max_attempts

    async def random_frame(self, language: str) -> Round:
        entries = self.index.snapshot(language)
        round_, attempts = await self.resolver.resolve_random(
            entries, max_attempts=self.max_attempts
        )
        BusinessEvents.frame_resolved(
            language=language, attempts=attempts, found=round_ is not None
        )
        if round_ is None:
            raise FrameNotFoundError(language)
        return round_
