"""Pipeline functions wiring configuration to the pure transforms.

Both pipelines read their source, transform fully in memory and only then
write, so a read or parse failure leaves existing artifacts untouched. The
generator stages both of its artifacts and replaces them together.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .catalog.build import build_catalog
from .catalog.readme_parser import parse_listing, read_listing
from .categories import CATEGORY_ORDER
from .logos import DirectoryLogoProbe, LogoProbe
from .models import Catalog, ServiceRecord
from .paths import ProjectPaths
from .registry_store import RegistryStore
from .rendering.markdown import render_listing
from .storage.writer import commit_artifacts, dump_catalog, write_catalog

logger = logging.getLogger(__name__)


@dataclass
class GenerateResult:
    records: dict[str, ServiceRecord]
    listing: str
    catalog: Catalog
    readme_path: Path
    catalog_path: Path


@dataclass
class ParseResult:
    catalog: Catalog
    catalog_path: Path


def default_logo_probe(paths: ProjectPaths) -> LogoProbe:
    return DirectoryLogoProbe(paths.logos_path, paths.logo_url_prefix)


def generate_artifacts(
    paths: ProjectPaths,
    category_order: Sequence[str] = CATEGORY_ORDER,
    logo_probe: LogoProbe | None = None,
    include_scores: bool = False,
) -> GenerateResult:
    """Registry -> Markdown listing + JSON catalog."""
    records = RegistryStore(paths.registry_path).load()
    probe = logo_probe or default_logo_probe(paths)
    listing = render_listing(records, category_order, include_scores=include_scores)
    catalog = build_catalog(records, category_order, logo_probe=probe)
    readme_path, catalog_path = commit_artifacts(
        {paths.readme_path: listing, paths.catalog_path: dump_catalog(catalog)}
    )
    return GenerateResult(records, listing, catalog, readme_path, catalog_path)


def parse_readme(
    paths: ProjectPaths, logo_probe: LogoProbe | None = None
) -> ParseResult:
    """Markdown listing -> JSON catalog."""
    text = read_listing(paths.readme_path)
    catalog = parse_listing(text, logo_probe=logo_probe or default_logo_probe(paths))
    logger.info(
        "Parsed %d services in %d categories from %s",
        len(catalog.services),
        len(catalog.categories),
        paths.readme_path,
    )
    paths.ensure_output_dirs()
    return ParseResult(catalog, write_catalog(catalog, paths.catalog_path))


def catalog_to_records(catalog: Catalog) -> dict[str, ServiceRecord]:
    """Convert catalog entries back into registry records."""
    return {
        s.name: ServiceRecord(
            name=s.name,
            url=s.url,
            about=s.about,
            offer=s.offer,
            score=s.score,
            categories=s.categories,
        )
        for s in catalog.services
    }


__all__ = [
    "GenerateResult",
    "ParseResult",
    "catalog_to_records",
    "default_logo_probe",
    "generate_artifacts",
    "parse_readme",
]
