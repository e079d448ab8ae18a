"""Search command over a generated JSON catalog.

Applies the same filter / sort rules as the browsing page.
"""

from __future__ import annotations

import json
from pathlib import Path

import click

from ..categories import ALL_CATEGORIES
from ..paths import ProjectPaths
from ..search import BrowseState
from ..storage.writer import CatalogFileError, read_catalog
from .options import catalog_option, root_option


@click.command("search")
@click.argument("query", required=False, default="", type=str)
@root_option
@catalog_option
@click.option(
    "--category",
    default=ALL_CATEGORIES,
    show_default=True,
    help="Category to browse (ignored when QUERY is given)",
)
@click.option("--limit", default=0, show_default=True, help="Maximum results (0 = all)")
@click.option("--json", "as_json", is_flag=True, help="Emit matching services as JSON")
def search_cmd(
    query: str,
    root: Path | None,
    catalog: Path | None,
    category: str,
    limit: int,
    as_json: bool,
):
    """Search the catalog for QUERY, or browse one category."""
    paths = ProjectPaths(root, catalog=catalog)
    try:
        state = BrowseState(read_catalog(paths.catalog_path))
    except CatalogFileError as e:
        raise click.ClickException(str(e)) from e
    state.select_category(category)
    state.set_search(query)
    results = state.visible()
    if limit > 0:
        results = results[:limit]
    if as_json:
        payload = [s.model_dump(exclude_none=True) for s in results]
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        click.echo(state.summary())
        for s in results:
            click.echo(f"{str(s.score):>4}  {s.name}  [{', '.join(s.categories)}]")
    if not results:
        raise SystemExit(1)


__all__ = ["search_cmd"]
