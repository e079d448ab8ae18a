"""Pydantic models for the service registry and the generated catalog.

Registry file shape (JSON or YAML), keyed by unique service name::

    Canva:
      url: https://www.canva.com/canva-for-nonprofits/
      about: Online design platform.
      offer: Canva Pro free for eligible nonprofits.
      score: 90
      categories: [Design & Creative]

Catalog file shape (JSON)::

    {"services": [...], "categories": [...], "lastUpdated": "<ISO-8601>"}
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .categories import merge_categories
from .field_types import About, Categories, Logo, Name, Offer, Score, Url
from .ordering import DEFAULT_SCORE


class ServiceRecord(BaseModel):
    """Canonical registry entry."""

    model_config = ConfigDict(extra="ignore")

    name: Name
    url: Url
    about: About = None
    offer: Offer = None
    score: Score = DEFAULT_SCORE
    categories: Categories
    logo: Logo = None

    @field_validator("score", mode="before")
    @classmethod
    def _default_missing_score(cls, value: Any) -> Any:
        return DEFAULT_SCORE if value is None else value

    @field_validator("categories")
    @classmethod
    def _unique_categories(cls, value: list[str]) -> list[str]:
        return merge_categories([], value)

    @property
    def primary_category(self) -> str:
        return self.categories[0]

    @property
    def description(self) -> str | None:
        """Back-compat description: offer, falling back to about."""
        return self.offer or self.about


class CatalogService(BaseModel):
    """One entry of the JSON catalog consumed by the browsing page."""

    model_config = ConfigDict(extra="ignore")

    name: Name
    url: Url
    description: str | None = None
    about: About = None
    offer: Offer = None
    score: int | None = DEFAULT_SCORE
    categories: list[str] = Field(default_factory=list)
    logo: Logo = None


class Catalog(BaseModel):
    """The flattened catalog artifact."""

    model_config = ConfigDict(populate_by_name=True)

    services: list[CatalogService] = Field(default_factory=list)
    categories: list[str] = Field(default_factory=list)
    last_updated: str = Field(default="", alias="lastUpdated")

    def names(self) -> list[str]:
        return [service.name for service in self.services]

    def get(self, name: str) -> CatalogService | None:
        for service in self.services:
            if service.name == name:
                return service
        return None

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


def utc_timestamp(now: datetime | None = None) -> str:
    """ISO-8601 UTC timestamp with millisecond precision and ``Z`` suffix."""
    now = now or datetime.now(timezone.utc)
    return now.astimezone(timezone.utc).isoformat(timespec="milliseconds").replace(
        "+00:00", "Z"
    )


__all__ = ["Catalog", "CatalogService", "ServiceRecord", "utc_timestamp"]
