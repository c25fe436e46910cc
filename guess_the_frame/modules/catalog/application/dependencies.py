"""Catalog module application dependencies."""

from typing import NoReturn

from fastapi import Depends

from guess_the_frame.core.config import settings
from guess_the_frame.modules.catalog.application.services import CatalogRefreshService
from guess_the_frame.modules.catalog.domain.index import CatalogIndex
from guess_the_frame.modules.catalog.domain.provider import MovieCatalogProvider


def _missing_dependency(name: str) -> NoReturn:
    raise RuntimeError(f"Missing dependency override for {name}")


async def get_catalog_provider() -> MovieCatalogProvider:
    _missing_dependency("MovieCatalogProvider")


async def get_catalog_index() -> CatalogIndex:
    _missing_dependency("CatalogIndex")


async def get_catalog_refresh_service(
    provider: MovieCatalogProvider = Depends(get_catalog_provider),
    index: CatalogIndex = Depends(get_catalog_index),
) -> CatalogRefreshService:
    return CatalogRefreshService(provider, index, max_pages=settings.TMDB_MAX_PAGE)
