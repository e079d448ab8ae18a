"""Catalog subpackage.

Provides the two transforms producing the JSON catalog: from the registry
(`build_catalog`) and from the Markdown listing (`parse_listing`).
"""

from .build import build_catalog  # noqa: F401
from .readme_parser import parse_listing  # noqa: F401

__all__ = ["build_catalog", "parse_listing"]
