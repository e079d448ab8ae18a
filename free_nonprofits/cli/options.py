"""Click options shared by the pipeline commands."""

from __future__ import annotations

from pathlib import Path

import click

from ..paths import CATALOG_RELPATH, LOGOS_RELPATH, README_RELPATH, REGISTRY_RELPATH

root_option = click.option(
    "--root",
    envvar="FREE_NONPROFITS_ROOT",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Project root (env: FREE_NONPROFITS_ROOT, default: current directory)",
)
registry_option = click.option(
    "--registry",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Registry file, JSON or YAML (default: <root>/{REGISTRY_RELPATH.as_posix()})",
)
readme_option = click.option(
    "--readme",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"Markdown listing (default: <root>/{README_RELPATH.as_posix()})",
)
catalog_option = click.option(
    "--catalog",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help=f"JSON catalog (default: <root>/{CATALOG_RELPATH.as_posix()})",
)
logos_option = click.option(
    "--logos",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help=f"Logo directory (default: <root>/{LOGOS_RELPATH.as_posix()})",
)

__all__ = [
    "catalog_option",
    "logos_option",
    "readme_option",
    "registry_option",
    "root_option",
]
