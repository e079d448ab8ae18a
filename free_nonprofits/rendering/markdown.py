"""Markdown rendering of the service listing (awesome-list format).

Each record is listed once, under its primary category. Sections follow the
curated category order; categories outside it are not rendered.
"""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence

from ..categories import CATEGORY_ORDER, category_to_slug
from ..models import ServiceRecord
from ..ordering import sorted_by_name

logger = logging.getLogger(__name__)

__all__ = ["group_by_primary_category", "render_entry", "render_listing"]

TITLE = (
    "# Awesome Free Nonprofits "
    "[![Awesome](https://awesome.re/badge.svg)](https://awesome.re)"
)

INTRO = (
    "Nonprofits often work with limited budgets, but many companies offer free "
    "or heavily discounted services to help them achieve their mission. This "
    "list compiles the best free offerings available for qualified nonprofit "
    "organizations."
)

ELIGIBILITY = """## Eligibility

Most programs require proof of nonprofit status. Common requirements include:
- 501(c)(3) status in the United States
- Registered charity status in other countries
- Official nonprofit registration documents

Each service has its own eligibility requirements. Please check the specific provider's nonprofit program page for details."""

CONTRIBUTING = """## Contributing

We welcome contributions! Please see our [contribution guidelines](contributing.md) for details on how to add new services or update existing ones."""

FOOTNOTES = """## Footnotes

[![CC0](https://mirrors.creativecommons.org/presskit/buttons/88x31/svg/cc-zero.svg)](https://creativecommons.org/publicdomain/zero/1.0)

To the extent possible under law, the contributors have waived all copyright and related or neighboring rights to this work.

An interactive web application is available to explore these services with search and filtering functionality. The application is generated from the same services data as this list."""


def group_by_primary_category(
    records: Mapping[str, ServiceRecord],
) -> dict[str, list[ServiceRecord]]:
    """Group records under ``categories[0]``, names sorted within each group."""
    groups: dict[str, list[ServiceRecord]] = {}
    for record in records.values():
        groups.setdefault(record.primary_category, []).append(record)
    return {category: sorted_by_name(items) for category, items in groups.items()}


def render_entry(record: ServiceRecord, include_score: bool = False) -> str:
    description = record.about or record.offer or ""
    line = f"- [{record.name}]({record.url}) - {description}"
    if include_score:
        line += f" <!-- score: {record.score} -->"
    return line.rstrip()


def render_listing(
    records: Mapping[str, ServiceRecord],
    category_order: Sequence[str] = CATEGORY_ORDER,
    include_scores: bool = False,
) -> str:
    """Return the complete Markdown listing document.

    Parameters
    ----------
    records : Mapping[str, ServiceRecord]
        Registry keyed by service name.
    category_order : Sequence[str]
        Sections to emit, in order. Primary categories outside this
        sequence are omitted from the document.
    include_scores : bool
        Append a hidden ``<!-- score: N -->`` marker to every entry.
    """
    groups = group_by_primary_category(records)
    omitted = sorted(set(groups) - set(category_order))
    if omitted:
        logger.warning(
            "Omitting %d categories absent from the category order: %s",
            len(omitted),
            ", ".join(omitted),
        )
    sections = [category for category in category_order if category in groups]

    lines = [TITLE, "", INTRO, "", "## Contents", ""]
    lines.extend(f"- [{c}](#{category_to_slug(c)})" for c in sections)
    lines.append("- [Eligibility](#eligibility)")

    for category in sections:
        lines.extend(["", f"## {category}", ""])
        lines.extend(render_entry(r, include_scores) for r in groups[category])

    for block in (ELIGIBILITY, CONTRIBUTING, FOOTNOTES):
        lines.extend(["", block])
    return "\n".join(lines) + "\n"
