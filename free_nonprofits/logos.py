"""Logo resolution.

A service has a logo when ``<sanitized-name>.png`` exists in the logos
directory. The probe is injected into the transforms so they never touch the
filesystem themselves.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol

from .paths import LOGO_URL_PREFIX

_NON_ALNUM = re.compile(r"[^a-z0-9]+")


def sanitize_logo_filename(name: str) -> str:
    """``"Acme Cloud!"`` -> ``"acme-cloud"``."""
    return _NON_ALNUM.sub("-", name.lower()).strip("-")


def logo_filename(name: str) -> str:
    return f"{sanitize_logo_filename(name)}.png"


class LogoProbe(Protocol):
    def __call__(self, service_name: str) -> str | None:
        """Return the public logo URL for ``service_name`` or ``None``."""
        ...


@dataclass(frozen=True)
class DirectoryLogoProbe:
    """Look up logo files in a directory on disk."""

    directory: Path
    url_prefix: str = LOGO_URL_PREFIX

    def __call__(self, service_name: str) -> str | None:
        filename = logo_filename(service_name)
        if (Path(self.directory) / filename).is_file():
            return f"{self.url_prefix}{filename}"
        return None


def no_logos(service_name: str) -> str | None:
    return None


__all__ = [
    "DirectoryLogoProbe",
    "LogoProbe",
    "logo_filename",
    "no_logos",
    "sanitize_logo_filename",
]
