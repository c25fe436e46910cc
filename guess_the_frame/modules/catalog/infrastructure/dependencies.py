"""Catalog module infrastructure dependencies."""

from functools import lru_cache

from guess_the_frame.core.config import settings
from guess_the_frame.modules.catalog.infrastructure.in_memory_index import (
    InMemoryCatalogIndex,
)
from guess_the_frame.modules.catalog.infrastructure.tmdb_provider import (
    TMDBCatalogProvider,
)


@lru_cache(maxsize=1)
def get_catalog_index() -> InMemoryCatalogIndex:
    return InMemoryCatalogIndex.from_snapshots(
        settings.CATALOG_SNAPSHOT_DIR, settings.CATALOG_LANGUAGES
    )


@lru_cache(maxsize=1)
def get_catalog_provider() -> TMDBCatalogProvider:
    return TMDBCatalogProvider()
