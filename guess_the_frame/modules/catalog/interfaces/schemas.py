"""Catalog API schemas."""

from pydantic import BaseModel, ConfigDict, Field


class CatalogEntryResponse(BaseModel):
    """One catalog entry."""

    model_config = ConfigDict(from_attributes=True)

    id: int = Field(..., description="Provider movie id")
    title: str = Field(..., description="Movie title")
