"""
pytest configuration and shared fixtures.

Test layout:
- unit/: unit tests, no network access; providers and the LLM are faked

Usage:
    # run everything
    pytest

    # with coverage
    pytest --cov=guess_the_frame --cov-report=html
"""

from collections.abc import AsyncGenerator, Iterable
from unittest.mock import AsyncMock, MagicMock

import pytest
from httpx import ASGITransport, AsyncClient

from guess_the_frame.modules.catalog.domain.entities import (
    Backdrop,
    CatalogEntry,
    DiscoverPage,
    PageRequestSpec,
)
from guess_the_frame.modules.catalog.domain.provider import CatalogProviderError
from guess_the_frame.modules.catalog.infrastructure.in_memory_index import (
    InMemoryCatalogIndex,
)

# ============================================
# anyio backend
# ============================================


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


# ============================================
# Catalog fakes
# ============================================


class FakeCatalogProvider:
    """In-memory MovieCatalogProvider.

    pages maps page number -> entries; total_pages is what every discover
    answer declares. backdrops maps movie id -> file paths (missing ids have
    none). Ids or pages listed in the failing sets raise CatalogProviderError.
    """

    def __init__(
        self,
        pages: dict[int, list[CatalogEntry]] | None = None,
        total_pages: int | None = None,
        backdrops: dict[int, list[str]] | None = None,
        failing_pages: Iterable[int] = (),
        failing_images: Iterable[int] = (),
    ):
        self.pages = pages or {}
        self.total_pages = total_pages if total_pages is not None else len(self.pages)
        self.backdrop_paths = backdrops or {}
        self.failing_pages = set(failing_pages)
        self.failing_images = set(failing_images)
        self.discover_calls: list[PageRequestSpec] = []
        self.image_calls: list[int] = []

    async def discover(self, spec: PageRequestSpec) -> DiscoverPage:
        self.discover_calls.append(spec)
        if spec.page in self.failing_pages:
            raise CatalogProviderError(f"HTTP 500 on page {spec.page}")
        return DiscoverPage(
            total_pages=self.total_pages,
            results=tuple(self.pages.get(spec.page, [])),
        )

    async def backdrops(self, movie_id: int) -> list[Backdrop]:
        self.image_calls.append(movie_id)
        if movie_id in self.failing_images:
            raise CatalogProviderError(f"HTTP 500 for movie {movie_id}")
        return [Backdrop(file_path=p) for p in self.backdrop_paths.get(movie_id, [])]


def make_entries(*ids: int) -> list[CatalogEntry]:
    return [CatalogEntry(id=movie_id, title=f"Movie {movie_id}") for movie_id in ids]


@pytest.fixture
def provider_factory() -> type[FakeCatalogProvider]:
    return FakeCatalogProvider


@pytest.fixture
def entries_factory():
    return make_entries


@pytest.fixture
def sample_entries() -> list[CatalogEntry]:
    return [
        CatalogEntry(id=27205, title="Inception"),
        CatalogEntry(id=155, title="The Dark Knight"),
        CatalogEntry(id=157336, title="Interstellar"),
    ]


@pytest.fixture
def fake_provider(sample_entries) -> FakeCatalogProvider:
    return FakeCatalogProvider(
        pages={1: sample_entries},
        backdrops={
            27205: ["/inception.jpg"],
            155: ["/dark_knight.jpg"],
            157336: ["/interstellar.jpg"],
        },
    )


@pytest.fixture
def catalog_index(sample_entries) -> InMemoryCatalogIndex:
    return InMemoryCatalogIndex({"en": sample_entries, "hi": []})


# ============================================
# LLM fakes
# ============================================


def make_chat_response(content: str | None) -> MagicMock:
    return MagicMock(choices=[MagicMock(message=MagicMock(content=content))])


@pytest.fixture
def mock_openai_client() -> MagicMock:
    client = MagicMock()
    client.chat.completions.create = AsyncMock(return_value=make_chat_response("Yes"))
    client.models.list = AsyncMock(return_value=MagicMock(data=[]))
    return client


@pytest.fixture
def chat_response():
    return make_chat_response


# ============================================
# HTTP client fixtures
# ============================================


@pytest.fixture
async def async_client(
    fake_provider, catalog_index, mock_openai_client
) -> AsyncGenerator[AsyncClient, None]:
    """ASGI client with the provider, index and judge client faked."""
    from guess_the_frame.modules.answers.application import (
        dependencies as answers_app_deps,
    )
    from guess_the_frame.modules.catalog.application import (
        dependencies as catalog_app_deps,
    )
    from main import app

    saved_overrides = dict(app.dependency_overrides)
    app.dependency_overrides[catalog_app_deps.get_catalog_provider] = (
        lambda: fake_provider
    )
    app.dependency_overrides[catalog_app_deps.get_catalog_index] = (
        lambda: catalog_index
    )
    app.dependency_overrides[answers_app_deps.get_judge_client] = (
        lambda: mock_openai_client
    )

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as client:
        yield client

    app.dependency_overrides.clear()
    app.dependency_overrides.update(saved_overrides)


@pytest.fixture
def without_judge_client(async_client) -> None:
    """Bind the judge client dependency to None, as when no API key is set."""
    from guess_the_frame.modules.answers.application import (
        dependencies as answers_app_deps,
    )
    from main import app

    app.dependency_overrides[answers_app_deps.get_judge_client] = lambda: None
