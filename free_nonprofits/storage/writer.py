"""Writers (and the matching reader) for the generated artifacts."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping
from pathlib import Path

from pydantic import ValidationError

from ..models import Catalog

__all__ = [
    "CatalogFileError",
    "commit_artifacts",
    "dump_catalog",
    "read_catalog",
    "write_catalog",
    "write_listing",
]

logger = logging.getLogger(__name__)

STAGING_SUFFIX = ".tmp"


class CatalogFileError(ValueError):
    """Raised when a catalog artifact cannot be read back."""


def dump_catalog(catalog: Catalog) -> str:
    """Serialize ``catalog`` as JSON (2-space indent, optional fields omitted)."""
    return json.dumps(catalog.to_payload(), indent=2, ensure_ascii=False)


def write_listing(content: str, path: Path | str) -> Path:
    """Write the Markdown listing document (overwriting)."""
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(content, encoding="utf-8")
    logger.info("Wrote listing to %s", out)
    return out


def write_catalog(catalog: Catalog, path: Path | str) -> Path:
    out = Path(path)
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(dump_catalog(catalog), encoding="utf-8")
    logger.info(
        "Wrote catalog with %d services and %d categories to %s",
        len(catalog.services),
        len(catalog.categories),
        out,
    )
    return out


def commit_artifacts(artifacts: Mapping[Path | str, str]) -> list[Path]:
    """Write several text artifacts so that either all or none are replaced.

    Every artifact is first written to a ``.tmp`` sibling; the targets are
    only replaced once all staged writes succeeded. On failure the staged
    files are removed and the existing targets are left as they were.
    """
    staged: list[tuple[Path, Path]] = []
    try:
        for path, content in artifacts.items():
            out = Path(path)
            tmp = out.with_name(out.name + STAGING_SUFFIX)
            staged.append((tmp, out))
            out.parent.mkdir(parents=True, exist_ok=True)
            tmp.write_text(content, encoding="utf-8")
    except OSError:
        for tmp, _ in staged:
            tmp.unlink(missing_ok=True)
        raise
    for tmp, out in staged:
        tmp.replace(out)
        logger.info("Wrote %s", out)
    return [out for _, out in staged]


def read_catalog(path: Path | str) -> Catalog:
    src = Path(path)
    try:
        with open(src, encoding="utf-8") as f:
            data = json.load(f)
        return Catalog.model_validate(data)
    except OSError as e:
        raise CatalogFileError(f"Cannot read catalog {src}: {e}") from e
    except (json.JSONDecodeError, ValidationError) as e:
        raise CatalogFileError(f"Invalid catalog {src}: {e}") from e
