"""Registry persistence (authoritative storage).

The registry is a single mapping of service name to record, stored as JSON
(``.json``) or YAML (``.yml`` / ``.yaml``).
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import ServiceRecord

logger = logging.getLogger(__name__)

YAML_SUFFIXES = (".yml", ".yaml")


class RegistryError(ValueError):
    """Raised when the registry cannot be read or a record is invalid."""


def _represent_literal_str(dumper, data):
    """Represent multiline strings using literal block scalar style (|)."""
    if "\n" in data:
        return dumper.represent_scalar("tag:yaml.org,2002:str", data, style="|")
    return dumper.represent_scalar("tag:yaml.org,2002:str", data)


def parse_registry(data: Any, source: str = "<registry>") -> dict[str, ServiceRecord]:
    """Validate a raw name -> record mapping into :class:`ServiceRecord` models."""
    if not isinstance(data, Mapping):
        raise RegistryError(f"{source}: registry must be a mapping of name to record")
    records: dict[str, ServiceRecord] = {}
    for name, raw in data.items():
        if not isinstance(raw, Mapping):
            raise RegistryError(f"{source}: record '{name}' must be a mapping")
        try:
            records[str(name)] = ServiceRecord(**{**raw, "name": str(name)})
        except ValidationError as e:
            raise RegistryError(f"{source}: invalid record '{name}': {e}") from e
    return records


class RegistryStore:
    def __init__(self, path: str | Path):
        self.path = Path(path).expanduser().resolve()

    @property
    def is_yaml(self) -> bool:
        return self.path.suffix.lower() in YAML_SUFFIXES

    # Load --------------------------------------------------------------------
    def load(self) -> dict[str, ServiceRecord]:
        try:
            with open(self.path, encoding="utf-8") as fh:
                data = yaml.safe_load(fh) if self.is_yaml else json.load(fh)
        except OSError as e:
            raise RegistryError(f"Cannot read registry {self.path}: {e}") from e
        except (json.JSONDecodeError, yaml.YAMLError) as e:
            raise RegistryError(f"Cannot parse registry {self.path}: {e}") from e
        records = parse_registry(data or {}, source=str(self.path))
        logger.info("Loaded %d services from %s", len(records), self.path)
        return records

    # Write -------------------------------------------------------------------
    def write(self, records: Iterable[ServiceRecord]) -> Path:
        data: dict[str, dict[str, Any]] = {}
        for record in records:
            data[record.name] = record.model_dump(
                exclude={"name", "logo"}, exclude_none=True
            )
        self.path.parent.mkdir(parents=True, exist_ok=True)
        with open(self.path, "w", encoding="utf-8") as fh:
            if self.is_yaml:
                yaml.add_representer(str, _represent_literal_str, Dumper=yaml.SafeDumper)
                yaml.safe_dump(data, fh, sort_keys=False, allow_unicode=True, width=80)
            else:
                json.dump(data, fh, indent=2, ensure_ascii=False)
                fh.write("\n")
        logger.info("Wrote %d services to %s", len(data), self.path)
        return self.path


__all__ = ["RegistryError", "RegistryStore", "parse_registry"]
