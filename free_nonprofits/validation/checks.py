"""Advisory checks across registry records.

These never block generation; missing fields and uncurated categories are
expected data variability. The checks only surface them for maintainers.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence

from ..categories import CATEGORY_ORDER
from ..models import ServiceRecord

__all__ = ["SCORE_RANGE", "run_registry_checks"]

SCORE_RANGE = (0, 100)


def run_registry_checks(
    records: Mapping[str, ServiceRecord],
    category_order: Sequence[str] = CATEGORY_ORDER,
) -> list[str]:
    """Return a list of advisory issues.

    Current rules:
        * ``about`` and ``offer`` are present
        * the primary category is curated (otherwise the entry is missing
          from the Markdown listing)
        * secondary categories are curated (otherwise they never appear in
          the category selector)
        * ``score`` lies within ``SCORE_RANGE``
    """
    issues: list[str] = []
    low, high = SCORE_RANGE
    for name, record in records.items():
        if not record.about:
            issues.append(f"{name}: missing 'about'")
        if not record.offer:
            issues.append(f"{name}: missing 'offer'")
        if record.primary_category not in category_order:
            issues.append(
                f"{name}: primary category '{record.primary_category}' is not "
                "listed and will be omitted from the Markdown listing"
            )
        for category in record.categories[1:]:
            if category not in category_order:
                issues.append(f"{name}: category '{category}' is not listed")
        if not low <= record.score <= high:
            issues.append(f"{name}: score {record.score} outside {low}..{high}")
    return issues
