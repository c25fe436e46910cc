"""Catalog domain entities."""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class CatalogEntry:
    """One movie known to the catalog: provider id plus display title."""

    id: int
    title: str


@dataclass(frozen=True)
class PageRequestSpec:
    """Filters for one page of the provider's discover listing."""

    language: str
    start_date: date
    end_date: date
    page: int = 1

    def __post_init__(self) -> None:
        if self.page < 1:
            raise ValueError(f"page must be >= 1, got {self.page}")

    def with_page(self, page: int) -> "PageRequestSpec":
        return PageRequestSpec(
            language=self.language,
            start_date=self.start_date,
            end_date=self.end_date,
            page=page,
        )


@dataclass(frozen=True)
class DiscoverPage:
    """One page of discover results, sorted by popularity descending."""

    total_pages: int
    results: tuple[CatalogEntry, ...] = field(default_factory=tuple)


@dataclass(frozen=True)
class Backdrop:
    """A backdrop image; file_path is relative to the static asset base."""

    file_path: str
