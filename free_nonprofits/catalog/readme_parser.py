"""Markdown listing -> catalog transform.

Used when the Markdown listing is the authored source of truth. Lines are
scanned top to bottom; a level-2 heading that is not a reserved section sets
the current category, and every ``- [Name](url) - text`` line under it is a
service entry. Fields the Markdown cannot express directly are inferred:

* ``score`` from a hidden ``<!-- score: N -->`` marker (default 50);
* ``about`` / ``offer`` by splitting the text on sentence boundaries.

A service listed under several categories is merged into one entry.
Lines that do not match the entry shape are skipped.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

from ..categories import is_reserved_section, merge_categories
from ..logos import LogoProbe, no_logos
from ..models import Catalog, CatalogService, utc_timestamp
from ..ordering import DEFAULT_SCORE

logger = logging.getLogger(__name__)

HEADING_PREFIX = "## "
ENTRY_PATTERN = re.compile(r"^-\s+\[([^\]]+)\]\(([^)]+)\)\s+-\s+(.+)$")
SCORE_PATTERN = re.compile(r"<!--\s*score:\s*([0-9]+)\s*-->")
SENTENCE_BREAK = re.compile(r"\.\s+")


class ListingError(ValueError):
    """Raised when the Markdown listing cannot be read."""


@dataclass
class ParsedEntry:
    name: str
    url: str
    text: str
    score: int
    about: str
    offer: str


def extract_score(text: str) -> tuple[int, str]:
    """Return ``(score, text)`` with the first score marker removed."""
    match = SCORE_PATTERN.search(text)
    if not match:
        return DEFAULT_SCORE, text
    stripped = text[: match.start()] + text[match.end() :]
    return int(match.group(1)), stripped.strip()


def _terminated(sentence: str) -> str:
    return sentence if sentence.endswith(".") else sentence + "."


def split_description(text: str) -> tuple[str, str]:
    """Split ``text`` into ``(about, offer)``.

    The first sentence describes the service and the remaining sentences
    describe the offer. A single sentence is used for both.
    """
    description = text[:-1] if text.endswith(".") else text
    sentences = [s for s in SENTENCE_BREAK.split(description) if s.strip()]
    if len(sentences) > 1:
        about = sentences[0].strip()
        offer = ". ".join(sentences[1:]).strip()
        return _terminated(about), _terminated(offer)
    return _terminated(description), _terminated(description)


def parse_entry_line(line: str) -> ParsedEntry | None:
    match = ENTRY_PATTERN.match(line)
    if match is None:
        return None
    score, text = extract_score(match.group(3).strip())
    about, offer = split_description(text)
    return ParsedEntry(
        name=match.group(1).strip(),
        url=match.group(2).strip(),
        text=text,
        score=score,
        about=about,
        offer=offer,
    )


def parse_heading(line: str) -> str | None:
    """Return the category named by a data heading, else ``None``."""
    if not line.startswith(HEADING_PREFIX) or is_reserved_section(line):
        return None
    return line[len(HEADING_PREFIX) :].strip()


class ReadmeParser:
    """Incrementally build a catalog from listing lines."""

    def __init__(self, logo_probe: LogoProbe = no_logos):
        self.logo_probe = logo_probe
        self.services: dict[str, CatalogService] = {}
        self.categories: list[str] = []
        self.current_category: str | None = None

    def feed(self, lines: Iterable[str]) -> ReadmeParser:
        for raw in lines:
            line = raw.strip()
            if line.startswith(HEADING_PREFIX):
                # Reserved sections leave the current category in place.
                category = parse_heading(line)
                if category is not None:
                    self.current_category = category
                    merge_categories(self.categories, [category])
                continue
            entry = parse_entry_line(line)
            if entry is None:
                continue
            if self.current_category is None:
                logger.warning("Ignoring entry '%s' outside any category", entry.name)
                continue
            self._add(entry, self.current_category)
        return self

    def _add(self, entry: ParsedEntry, category: str) -> None:
        existing = self.services.get(entry.name)
        if existing is None:
            service = CatalogService(
                name=entry.name,
                url=entry.url,
                description=entry.offer or entry.about or entry.text,
                about=entry.about or None,
                offer=entry.offer or None,
                score=entry.score,
                categories=[category],
                logo=self.logo_probe(entry.name),
            )
            self.services[entry.name] = service
            logger.debug("Parsed '%s' in %s (score=%d)", entry.name, category, entry.score)
            return
        merge_categories(existing.categories, [category])
        if entry.about and not existing.about:
            existing.about = entry.about
        if entry.offer and not existing.offer:
            existing.offer = entry.offer
        # The most recently listed score wins.
        existing.score = entry.score
        if not existing.logo:
            existing.logo = self.logo_probe(entry.name)
        logger.debug("Merged '%s' into %s", entry.name, category)

    def catalog(self, timestamp: str | None = None) -> Catalog:
        return Catalog(
            services=list(self.services.values()),
            categories=list(self.categories),
            last_updated=timestamp or utc_timestamp(),
        )


def parse_listing(
    text: str, logo_probe: LogoProbe = no_logos, timestamp: str | None = None
) -> Catalog:
    """Parse Markdown listing ``text`` into a catalog.

    Services keep their order of first appearance; ``categories`` lists
    every data heading in encounter order.
    """
    return ReadmeParser(logo_probe).feed(text.split("\n")).catalog(timestamp)


def read_listing(path: str | Path) -> str:
    path = Path(path)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as e:
        raise ListingError(f"Cannot read listing {path}: {e}") from e


__all__ = [
    "ListingError",
    "ParsedEntry",
    "ReadmeParser",
    "extract_score",
    "parse_entry_line",
    "parse_heading",
    "parse_listing",
    "read_listing",
    "split_description",
]
