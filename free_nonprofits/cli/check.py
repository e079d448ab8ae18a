"""CLI entrypoint for the best-effort registry checks."""

from __future__ import annotations

from pathlib import Path

import click

from ..paths import ProjectPaths
from ..registry_store import RegistryError, RegistryStore
from ..validation import run_registry_checks
from .options import registry_option, root_option


@click.command(name="check")
@root_option
@registry_option
def check_cli(root: Path | None, registry: Path | None):
    """Report advisory issues in the service registry."""
    paths = ProjectPaths(root, registry=registry)
    try:
        records = RegistryStore(paths.registry_path).load()
    except RegistryError as e:
        raise click.ClickException(str(e)) from e
    issues = run_registry_checks(records)
    if issues:
        click.echo(f"Registry check found {len(issues)} issues:")
        for issue in issues:
            click.echo(f" - {issue}")
        raise SystemExit(1)
    click.echo(f"Registry check PASSED ({len(records)} services).")


__all__ = ["check_cli"]
