"""Rounds module application dependencies.

The catalog provider and index come from the catalog module's dependency
boundary and are overridden with infrastructure in `main.py`.
"""

from fastapi import Depends

from guess_the_frame.core.config import settings
from guess_the_frame.modules.catalog.application.dependencies import (
    get_catalog_index,
    get_catalog_provider,
)
from guess_the_frame.modules.catalog.domain.index import CatalogIndex
from guess_the_frame.modules.catalog.domain.provider import MovieCatalogProvider
from guess_the_frame.modules.rounds.application.image_resolver import ImageResolver
from guess_the_frame.modules.rounds.application.round_assembler import RoundAssembler
from guess_the_frame.modules.rounds.application.services import RandomFrameService


async def get_image_resolver(
    provider: MovieCatalogProvider = Depends(get_catalog_provider),
) -> ImageResolver:
    return ImageResolver(provider, image_base=settings.TMDB_IMAGE_BASE)


async def get_round_assembler(
    provider: MovieCatalogProvider = Depends(get_catalog_provider),
    resolver: ImageResolver = Depends(get_image_resolver),
) -> RoundAssembler:
    return RoundAssembler(provider, resolver=resolver)


async def get_random_frame_service(
    index: CatalogIndex = Depends(get_catalog_index),
    resolver: ImageResolver = Depends(get_image_resolver),
) -> RandomFrameService:
    return RandomFrameService(
        index, resolver, max_attempts=settings.RANDOM_FRAME_MAX_ATTEMPTS
    )
