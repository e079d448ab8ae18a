"""Path resolution for the registry, listing and catalog artifacts.

The :class:`ProjectPaths` value object normalizes optional user overrides
into resolved absolute paths, all anchored on a single project root.

Inputs
======
* ``root``: project directory (``None`` -> current working directory)
* ``registry``: canonical registry file (JSON or YAML)
* ``readme``: Markdown listing document
* ``catalog``: JSON catalog consumed by the browsing page
* ``logos``: directory holding ``<sanitized-name>.png`` logo files

Rules
=====
* ``None`` selects the well-known default location under ``root``.
* Relative overrides are interpreted relative to ``root``; absolute
  overrides are used as-is.
* No filesystem changes are performed on construction; call
  :meth:`ensure_output_dirs` before writing artifacts.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path

REGISTRY_RELPATH = Path("scripts") / "services.json"
README_RELPATH = Path("README.md")
CATALOG_RELPATH = Path("app") / "src" / "data" / "services.json"
LOGOS_RELPATH = Path("app") / "public" / "logos"
LOGO_URL_PREFIX = "/logos/"


@dataclass
class ProjectPaths:
    """Resolve every file location used by the generator and parser.

    Parameters
    ----------
    root : Path | str | None
        Project directory; ``None`` -> current working directory.
    registry, readme, catalog, logos : Path | str | None
        Optional overrides for the individual locations.
    logo_url_prefix : str
        Public URL prefix prepended to logo filenames in the catalog.

    Attributes
    ----------
    root_path, registry_path, readme_path, catalog_path, logos_path : Path
        Resolved absolute paths.
    """

    root: Path | str | None = None
    registry: Path | str | None = None
    readme: Path | str | None = None
    catalog: Path | str | None = None
    logos: Path | str | None = None
    logo_url_prefix: str = LOGO_URL_PREFIX

    root_path: Path = field(init=False)
    registry_path: Path = field(init=False)
    readme_path: Path = field(init=False)
    catalog_path: Path = field(init=False)
    logos_path: Path = field(init=False)

    # ---------------------------------------------------------------------
    def __post_init__(self) -> None:
        self.root_path = self._resolve_root(self.root)
        self.registry_path = self._resolve(self.registry, REGISTRY_RELPATH)
        self.readme_path = self._resolve(self.readme, README_RELPATH)
        self.catalog_path = self._resolve(self.catalog, CATALOG_RELPATH)
        self.logos_path = self._resolve(self.logos, LOGOS_RELPATH)

    # Public helper -------------------------------------------------------
    def ensure_output_dirs(self) -> ProjectPaths:
        """Create the parent directories of the written artifacts if missing."""
        self.catalog_path.parent.mkdir(parents=True, exist_ok=True)
        self.readme_path.parent.mkdir(parents=True, exist_ok=True)
        return self

    # Internal helpers ----------------------------------------------------
    @staticmethod
    def _resolve_root(value: Path | str | None) -> Path:
        if value is None or (isinstance(value, str) and value.strip() == ""):
            return Path.cwd().resolve()
        return Path(value).expanduser().resolve()

    def _resolve(self, value: Path | str | None, default: Path) -> Path:
        if value is None or (isinstance(value, str) and value.strip() == ""):
            return (self.root_path / default).resolve()
        p = Path(value).expanduser()
        if p.is_absolute():
            return p.resolve()
        return (self.root_path / p).resolve()


__all__ = [
    "ProjectPaths",
    "REGISTRY_RELPATH",
    "README_RELPATH",
    "CATALOG_RELPATH",
    "LOGOS_RELPATH",
    "LOGO_URL_PREFIX",
]
