"""Parse-readme command: Markdown listing -> JSON catalog."""

from __future__ import annotations

from pathlib import Path

import click

from ..catalog.readme_parser import ListingError
from ..log import configure_logging
from ..paths import ProjectPaths
from ..registry_store import RegistryStore
from ..services import catalog_to_records, parse_readme
from .options import catalog_option, logos_option, readme_option, root_option


@click.command("parse-readme")
@root_option
@readme_option
@catalog_option
@logos_option
@click.option(
    "--export-registry",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Also write the parsed services as a registry file (JSON or YAML)",
)
def parse_readme_cmd(
    root: Path | None,
    readme: Path | None,
    catalog: Path | None,
    logos: Path | None,
    export_registry: Path | None,
):
    """Rebuild the app catalog from the Markdown listing."""
    configure_logging()
    paths = ProjectPaths(root, readme=readme, catalog=catalog, logos=logos)
    click.echo(f"Parsing {paths.readme_path}")
    try:
        result = parse_readme(paths)
        if export_registry is not None:
            target = export_registry
            if not target.is_absolute():
                target = paths.root_path / target
            RegistryStore(target).write(catalog_to_records(result.catalog).values())
            click.echo(f"Exported registry to {target}")
    except (ListingError, OSError) as e:
        raise click.ClickException(str(e)) from e
    click.echo(
        f"Generated {result.catalog_path} with {len(result.catalog.services)} services "
        f"and {len(result.catalog.categories)} categories"
    )


__all__ = ["parse_readme_cmd"]
