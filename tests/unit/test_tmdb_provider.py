"""TMDB catalog provider tests against an httpx mock transport."""

from datetime import date

import httpx
import pytest

from guess_the_frame.modules.catalog.domain.entities import (
    Backdrop,
    CatalogEntry,
    PageRequestSpec,
)
from guess_the_frame.modules.catalog.domain.provider import CatalogProviderError
from guess_the_frame.modules.catalog.infrastructure.tmdb_provider import (
    TMDBCatalogProvider,
)

pytestmark = pytest.mark.anyio

SPEC = PageRequestSpec(
    language="hi",
    start_date=date(2000, 1, 1),
    end_date=date(2024, 12, 31),
    page=3,
)


def _provider(handler) -> TMDBCatalogProvider:
    return TMDBCatalogProvider(
        api_key="test-key",
        base_url="https://tmdb.test/3/",
        timeout_sec=1.0,
        response_language="en-US",
        transport=httpx.MockTransport(handler),
    )


class TestDiscover:
    async def test_sends_expected_query(self):
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(200, json={"total_pages": 1, "results": []})

        await _provider(handler).discover(SPEC)

        request = captured[0]
        assert request.url.path == "/3/discover/movie"
        params = request.url.params
        assert params["api_key"] == "test-key"
        assert params["page"] == "3"
        assert params["with_original_language"] == "hi"
        assert params["primary_release_date.gte"] == "2000-01-01"
        assert params["primary_release_date.lte"] == "2024-12-31"
        assert params["sort_by"] == "popularity.desc"
        assert params["language"] == "en-US"

    async def test_parses_results(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                json={
                    "page": 3,
                    "total_pages": 42,
                    "results": [
                        {"id": 1160018, "title": "Kill", "popularity": 12.5},
                        {"id": 872906, "title": "Jawan"},
                    ],
                },
            )

        page = await _provider(handler).discover(SPEC)

        assert page.total_pages == 42
        assert page.results == (
            CatalogEntry(id=1160018, title="Kill"),
            CatalogEntry(id=872906, title="Jawan"),
        )

    async def test_skips_malformed_rows(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                json={
                    "total_pages": 1,
                    "results": [
                        "not-a-dict",
                        {"id": "7", "title": "String id"},
                        {"id": 8},
                        {"id": 9, "title": "Kept"},
                    ],
                },
            )

        page = await _provider(handler).discover(SPEC)

        assert page.results == (CatalogEntry(id=9, title="Kept"),)

    async def test_missing_results_is_an_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"total_pages": 1})

        with pytest.raises(CatalogProviderError):
            await _provider(handler).discover(SPEC)

    async def test_non_object_payload_is_an_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json=[1, 2, 3])

        with pytest.raises(CatalogProviderError):
            await _provider(handler).discover(SPEC)

    async def test_http_error_status(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(500, json={"status_message": "boom"})

        with pytest.raises(CatalogProviderError, match="HTTP 500"):
            await _provider(handler).discover(SPEC)

    async def test_invalid_json(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, content=b"<html>oops</html>")

        with pytest.raises(CatalogProviderError):
            await _provider(handler).discover(SPEC)

    async def test_connection_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        with pytest.raises(CatalogProviderError, match="Error"):
            await _provider(handler).discover(SPEC)

    async def test_timeout(self):
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("too slow", request=request)

        with pytest.raises(CatalogProviderError, match="Timeout"):
            await _provider(handler).discover(SPEC)


class TestBackdrops:
    async def test_parses_backdrops(self):
        captured: list[httpx.Request] = []

        def handler(request: httpx.Request) -> httpx.Response:
            captured.append(request)
            return httpx.Response(
                200,
                json={
                    "id": 27205,
                    "backdrops": [
                        {"file_path": "/a.jpg", "width": 3840},
                        {"file_path": ""},
                        {"width": 1280},
                        {"file_path": "/b.jpg"},
                    ],
                    "posters": [{"file_path": "/poster.jpg"}],
                },
            )

        backdrops = await _provider(handler).backdrops(27205)

        assert captured[0].url.path == "/3/movie/27205/images"
        assert backdrops == [Backdrop(file_path="/a.jpg"), Backdrop(file_path="/b.jpg")]

    async def test_no_backdrops_key_means_empty(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(200, json={"id": 1, "posters": []})

        assert await _provider(handler).backdrops(1) == []

    async def test_not_found_is_an_error(self):
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, json={"status_code": 34})

        with pytest.raises(CatalogProviderError, match="HTTP 404"):
            await _provider(handler).backdrops(999999999)
