"""In-process catalog index seeded from bundled snapshots."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Iterable
from pathlib import Path
from typing import Any

from loguru import logger

from guess_the_frame.modules.catalog.domain.entities import CatalogEntry
from guess_the_frame.modules.catalog.domain.index import CatalogIndex


class InMemoryCatalogIndex(CatalogIndex):
    """Language-partitioned catalog held in process memory.

    Each partition is an immutable tuple. replace() rebinds the dict slot in a
    single assignment, so readers holding an older snapshot keep a consistent
    list while a refresh is in flight.
    """

    def __init__(self, partitions: dict[str, Iterable[CatalogEntry]] | None = None):
        self._partitions: dict[str, tuple[CatalogEntry, ...]] = {}
        self._locks: dict[str, asyncio.Lock] = {}
        for language, entries in (partitions or {}).items():
            self.replace(language, entries)

    @classmethod
    def from_snapshots(
        cls, snapshot_dir: Path, languages: Iterable[str]
    ) -> InMemoryCatalogIndex:
        return cls(
            {
                language: load_snapshot(snapshot_dir / f"{language}.json")
                for language in languages
            }
        )

    def snapshot(self, language: str) -> tuple[CatalogEntry, ...]:
        return self._partitions.get(language, ())

    def languages(self) -> list[str]:
        return list(self._partitions)

    def size(self, language: str) -> int:
        return len(self.snapshot(language))

    def replace(self, language: str, entries: Iterable[CatalogEntry]) -> None:
        self._partitions[language] = tuple(entries)

    def lock(self, language: str) -> asyncio.Lock:
        return self._locks.setdefault(language, asyncio.Lock())


def load_snapshot(path: Path) -> list[CatalogEntry]:
    """Load a seed partition; a missing or unreadable file yields no entries."""
    try:
        payload = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as exc:
        logger.warning(f"Failed to load catalog snapshot {path}: {exc}")
        return []
    return _parse_snapshot_payload(payload)


def _parse_snapshot_payload(payload: Any) -> list[CatalogEntry]:
    if not isinstance(payload, list):
        raise ValueError("Catalog snapshot must be a JSON list")

    entries: list[CatalogEntry] = []
    seen_ids: set[int] = set()
    for raw in payload:
        if not isinstance(raw, dict):
            continue
        movie_id = raw.get("id")
        title = raw.get("title")
        if not isinstance(movie_id, int) or not isinstance(title, str):
            continue
        if movie_id in seen_ids:
            continue
        seen_ids.add(movie_id)
        entries.append(CatalogEntry(id=movie_id, title=title))
    return entries
