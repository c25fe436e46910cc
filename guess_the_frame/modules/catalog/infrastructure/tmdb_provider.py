"""TMDB implementation of the movie catalog provider."""

from __future__ import annotations

from typing import Any

import httpx
from loguru import logger

from guess_the_frame.core.config import settings
from guess_the_frame.modules.catalog.domain.entities import (
    Backdrop,
    CatalogEntry,
    DiscoverPage,
    PageRequestSpec,
)
from guess_the_frame.modules.catalog.domain.provider import (
    CatalogProviderError,
    MovieCatalogProvider,
)


class TMDBCatalogProvider(MovieCatalogProvider):
    """Query TMDB's discover and images endpoints over httpx."""

    def __init__(
        self,
        *,
        api_key: str | None = None,
        base_url: str | None = None,
        timeout_sec: float | None = None,
        response_language: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else settings.TMDB_API_KEY
        self.base_url = (base_url or settings.TMDB_API_BASE).rstrip("/")
        self.timeout_sec = timeout_sec or settings.TMDB_TIMEOUT_SEC
        self.response_language = response_language or settings.TMDB_RESPONSE_LANGUAGE
        self._transport = transport

    async def discover(self, spec: PageRequestSpec) -> DiscoverPage:
        payload = await self._get_json(
            "/discover/movie",
            {
                "page": spec.page,
                "with_original_language": spec.language,
                "primary_release_date.gte": spec.start_date.isoformat(),
                "primary_release_date.lte": spec.end_date.isoformat(),
                "sort_by": "popularity.desc",
                "language": self.response_language,
            },
        )
        return self._parse_discover_payload(payload)

    async def backdrops(self, movie_id: int) -> list[Backdrop]:
        payload = await self._get_json(f"/movie/{movie_id}/images", {})
        return self._parse_images_payload(payload)

    async def _get_json(self, path: str, params: dict[str, Any]) -> Any:
        url = f"{self.base_url}{path}"
        query = {"api_key": self.api_key, **params} if self.api_key else params
        try:
            async with httpx.AsyncClient(
                timeout=self.timeout_sec,
                transport=self._transport,
            ) as client:
                response = await client.get(
                    url,
                    params=query,
                    headers={"Accept": "application/json"},
                )
                response.raise_for_status()
                return response.json()
        except httpx.TimeoutException as exc:
            logger.warning(f"TMDB request timeout for {path}: {exc}")
            raise CatalogProviderError(f"Timeout: {exc}") from exc
        except httpx.HTTPStatusError as exc:
            logger.warning(
                f"TMDB request HTTP error for {path}: {exc.response.status_code}"
            )
            raise CatalogProviderError(f"HTTP {exc.response.status_code}") from exc
        except (httpx.HTTPError, ValueError) as exc:
            logger.warning(f"TMDB request error for {path}: {exc}")
            raise CatalogProviderError(f"Error: {exc}") from exc

    @staticmethod
    def _parse_discover_payload(payload: Any) -> DiscoverPage:
        if not isinstance(payload, dict):
            raise CatalogProviderError("Discover payload must be a JSON object")

        try:
            total_pages = int(payload.get("total_pages", 0))
        except (TypeError, ValueError) as exc:
            raise CatalogProviderError("Discover payload has invalid total_pages") from exc

        results_raw = payload.get("results")
        if not isinstance(results_raw, list):
            raise CatalogProviderError("Discover payload missing results list")

        entries: list[CatalogEntry] = []
        for raw in results_raw:
            if not isinstance(raw, dict):
                continue
            movie_id = raw.get("id")
            title = raw.get("title")
            if not isinstance(movie_id, int) or not isinstance(title, str):
                continue
            entries.append(CatalogEntry(id=movie_id, title=title))
        return DiscoverPage(total_pages=total_pages, results=tuple(entries))

    @staticmethod
    def _parse_images_payload(payload: Any) -> list[Backdrop]:
        if not isinstance(payload, dict):
            raise CatalogProviderError("Images payload must be a JSON object")

        backdrops_raw = payload.get("backdrops") or []
        if not isinstance(backdrops_raw, list):
            raise CatalogProviderError("Images payload backdrops must be a list")

        backdrops: list[Backdrop] = []
        for raw in backdrops_raw:
            if not isinstance(raw, dict):
                continue
            file_path = raw.get("file_path")
            if isinstance(file_path, str) and file_path:
                backdrops.append(Backdrop(file_path=file_path))
        return backdrops
