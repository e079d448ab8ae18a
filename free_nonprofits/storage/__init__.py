"""Artifact storage helpers."""

from .writer import (  # noqa: F401
    commit_artifacts,
    dump_catalog,
    read_catalog,
    write_catalog,
    write_listing,
)
