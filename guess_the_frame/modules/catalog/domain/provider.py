"""Catalog provider port.

The provider has two outcome kinds: a successful (possibly empty) payload, or a
CatalogProviderError for transport and protocol failures. An empty backdrop
list is a normal answer, not an error.
"""

from typing import Protocol

from guess_the_frame.modules.catalog.domain.entities import (
    Backdrop,
    DiscoverPage,
    PageRequestSpec,
)


class CatalogProviderError(Exception):
    """Raised when the catalog provider cannot be reached or answers badly."""


class MovieCatalogProvider(Protocol):
    """Port for the third-party movie catalog."""

    async def discover(self, spec: PageRequestSpec) -> DiscoverPage: ...

    async def backdrops(self, movie_id: int) -> list[Backdrop]: ...
