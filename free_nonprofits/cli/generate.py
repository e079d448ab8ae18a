"""Generate command: registry -> Markdown listing + JSON catalog."""

from __future__ import annotations

from pathlib import Path

import click

from ..log import configure_logging
from ..paths import ProjectPaths
from ..registry_store import RegistryError
from ..services import generate_artifacts
from .options import (
    catalog_option,
    logos_option,
    readme_option,
    registry_option,
    root_option,
)


@click.command("generate")
@root_option
@registry_option
@readme_option
@catalog_option
@logos_option
@click.option(
    "--with-scores",
    is_flag=True,
    help="Embed hidden <!-- score: N --> markers in the Markdown listing",
)
def generate_cmd(
    root: Path | None,
    registry: Path | None,
    readme: Path | None,
    catalog: Path | None,
    logos: Path | None,
    with_scores: bool,
):
    """Generate README.md and the app catalog from the service registry."""
    configure_logging()
    paths = ProjectPaths(
        root, registry=registry, readme=readme, catalog=catalog, logos=logos
    )
    click.echo(f"Loading services from {paths.registry_path}")
    try:
        result = generate_artifacts(paths, include_scores=with_scores)
    except (RegistryError, OSError) as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Loaded {len(result.records)} services")
    click.echo(f"Generated {result.readme_path}")
    click.echo(
        f"Generated {result.catalog_path} with {len(result.catalog.services)} services"
    )


__all__ = ["generate_cmd"]
