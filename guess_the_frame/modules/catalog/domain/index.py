"""Catalog index port.

A process-wide, language-partitioned list of catalog entries. Readers get an
immutable snapshot and never wait; writers swap a whole partition at once.
"""

import asyncio
from collections.abc import Iterable
from typing import Protocol

from guess_the_frame.modules.catalog.domain.entities import CatalogEntry


class CatalogIndex(Protocol):
    def snapshot(self, language: str) -> tuple[CatalogEntry, ...]: ...

    def languages(self) -> list[str]: ...

    def size(self, language: str) -> int: ...

    def replace(self, language: str, entries: Iterable[CatalogEntry]) -> None: ...

    def lock(self, language: str) -> asyncio.Lock: ...
