"""Shared health check types.

Every infrastructure component reports its health with these types.
"""

from enum import Enum

from pydantic import BaseModel, Field


class HealthStatus(str, Enum):
    """Health check status."""

    OK = "ok"
    ERROR = "error"
    SKIPPED = "skipped"
    DEGRADED = "degraded"


class CatalogHealthResult(BaseModel):
    """Catalog index health: partition sizes per language."""

    status: HealthStatus = Field(..., description="Health status")
    partitions: dict[str, int] = Field(
        default_factory=dict, description="Entry count per language"
    )

    def to_dict(self) -> dict[str, str | dict[str, int]]:
        return self.model_dump(mode="json")
