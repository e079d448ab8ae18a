"""CLI command group for the free nonprofit services directory.

This module exposes the root Click command group `free_nonprofits` which
aggregates subcommands implemented in sibling modules.

Example usage:

        free-nonprofits generate
        free-nonprofits parse-readme
        free-nonprofits search canva
"""

from __future__ import annotations

import click

from .. import __version__
from ..log import configure_logging
from .check import check_cli
from .generate import generate_cmd
from .parse_readme import parse_readme_cmd
from .search import search_cmd


@click.group()
@click.version_option(__version__, prog_name="free-nonprofits")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]),
    help="Set the logging level (env: FREE_NONPROFITS_LOG_LEVEL)",
)
def free_nonprofits(log_level: str | None):  # pragma: no cover - thin group wrapper
    """Free nonprofit services directory tools."""
    configure_logging(log_level)


# Register subcommands
free_nonprofits.add_command(generate_cmd)
free_nonprofits.add_command(parse_readme_cmd)
free_nonprofits.add_command(search_cmd)
free_nonprofits.add_command(check_cli)

__all__ = ["free_nonprofits", "generate_cmd", "parse_readme_cmd"]
