"""Catalog filter / sort engine used by the browsing page.

Search and category browsing are mutually exclusive: a non-empty query
searches every service and ignores the selected category. Results are
always ranked by score (descending) then name.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

from .categories import ALL_CATEGORIES
from .models import Catalog, CatalogService
from .ordering import ranked


def matches_query(service: CatalogService, query: str) -> bool:
    """Case-insensitive substring match on name, description or any category."""
    needle = query.lower()
    return (
        needle in service.name.lower()
        or needle in (service.description or "").lower()
        or any(needle in category.lower() for category in service.categories)
    )


def filter_services(
    services: Iterable[CatalogService],
    search_query: str = "",
    selected_category: str = ALL_CATEGORIES,
) -> list[CatalogService]:
    """Return the visible services for a query / category selection, ranked."""
    if search_query.strip():
        # Mode is decided on the trimmed query; matching uses it as typed.
        kept = [s for s in services if matches_query(s, search_query)]
    elif selected_category != ALL_CATEGORIES:
        kept = [s for s in services if selected_category in s.categories]
    else:
        kept = list(services)
    return ranked(kept)


@dataclass
class BrowseState:
    """Search box and category selector state of the browsing page."""

    catalog: Catalog
    search_query: str = ""
    selected_category: str = ALL_CATEGORIES

    @property
    def searching(self) -> bool:
        return bool(self.search_query.strip())

    def set_search(self, value: str) -> None:
        self.search_query = value
        if value.strip() and self.selected_category != ALL_CATEGORIES:
            self.selected_category = ALL_CATEGORIES

    def select_category(self, category: str) -> None:
        self.selected_category = category

    def reset(self) -> None:
        """Clear the search and show every category."""
        self.search_query = ""
        self.selected_category = ALL_CATEGORIES

    def visible(self) -> list[CatalogService]:
        return filter_services(
            self.catalog.services, self.search_query, self.selected_category
        )

    @property
    def is_empty(self) -> bool:
        return not self.visible()

    def summary(self) -> str:
        text = f"Showing {len(self.visible())} of {len(self.catalog.services)} services"
        if self.searching:
            text += f' matching "{self.search_query}"'
        elif self.selected_category != ALL_CATEGORIES:
            text += f" in {self.selected_category}"
        return text


__all__ = ["BrowseState", "filter_services", "matches_query"]
