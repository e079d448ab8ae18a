"""Category vocabulary helpers.

Categories are free-form strings; :data:`CATEGORY_ORDER` is the curated
sequence that decides which sections appear in the Markdown listing and
which categories the generated catalog advertises in its selector list.
"""

from __future__ import annotations

from collections.abc import Iterable, Sequence

CATEGORY_ORDER: tuple[str, ...] = (
    "Infrastructure & Security",
    "Design & Creative",
    "Communication & Collaboration",
    "Marketing & CRM",
    "Productivity & Analytics",
    "Education & Training",
    "Business & Operations",
)

# Level-2 headings containing any of these words are document structure,
# never data categories.
RESERVED_SECTIONS: tuple[str, ...] = (
    "Contents",
    "Contributing",
    "Eligibility",
    "Footnotes",
)

ALL_CATEGORIES = "all"


def category_to_slug(category: str) -> str:
    """Return the heading anchor used by GitHub for ``category``.

    ``&`` is removed outright and every remaining space becomes a dash, so
    ``"Infrastructure & Security"`` maps to ``"infrastructure--security"``.
    """
    return category.lower().replace("&", "").replace(" ", "-")


def is_reserved_section(heading: str) -> bool:
    return any(word in heading for word in RESERVED_SECTIONS)


def ordered_categories(
    seen: Iterable[str], order: Sequence[str] = CATEGORY_ORDER
) -> list[str]:
    """Return the members of ``order`` present in ``seen``, in ``order``.

    Categories absent from ``order`` are dropped.
    """
    present = set(seen)
    return [category for category in order if category in present]


def merge_categories(existing: list[str], new: Iterable[str]) -> list[str]:
    """Append unseen categories to ``existing`` preserving first-seen order."""
    for category in new:
        if category not in existing:
            existing.append(category)
    return existing


__all__ = [
    "ALL_CATEGORIES",
    "CATEGORY_ORDER",
    "RESERVED_SECTIONS",
    "category_to_slug",
    "is_reserved_section",
    "merge_categories",
    "ordered_categories",
]
