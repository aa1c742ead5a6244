"""
mapping.py

Responsibility: Load and validate the import mapping table.

The table is static configuration: an ordered list of (source, destination)
pairs, where `source` is relative to the extracted archive root and
`destination` is relative to the working tree. The default table ships with
the package as `mapping.yaml`.
"""

from __future__ import annotations

from dataclasses import dataclass
from importlib import resources
from pathlib import Path, PurePosixPath
from typing import Any

import yaml


class MappingError(ValueError):
    pass


@dataclass(frozen=True)
class ImportEntry:
    """One file or directory tree to vendor."""

    source: str
    destination: str


def _check_relative(value: Any, *, field: str, index: int) -> str:
    if not isinstance(value, str) or not value.strip():
        raise MappingError(f"Entry {index}: `{field}` must be a non-empty string.")
    path = PurePosixPath(value.strip())
    if path.is_absolute() or not path.parts or ".." in path.parts:
        raise MappingError(f"Entry {index}: `{field}` must be a relative path inside its root: {value!r}")
    return str(path)


def parse_mapping(data: Any) -> tuple[ImportEntry, ...]:
    """
    Build an ordered table from already-parsed YAML data.

    Expected shape:

        entries:
          - source: assets/javascripts/bootstrap.min.js
            destination: js/bootstrap.min.js
    """
    if not isinstance(data, dict):
        raise MappingError("Mapping file must be a mapping/object at the top level.")

    raw_entries = data.get("entries")
    if not isinstance(raw_entries, list) or not raw_entries:
        raise MappingError("Mapping file must define a non-empty `entries` list.")

    entries: list[ImportEntry] = []
    for index, raw in enumerate(raw_entries):
        if not isinstance(raw, dict):
            raise MappingError(f"Entry {index}: must be an object with `source` and `destination`.")
        entries.append(
            ImportEntry(
                source=_check_relative(raw.get("source"), field="source", index=index),
                destination=_check_relative(raw.get("destination"), field="destination", index=index),
            )
        )
    return tuple(entries)


def load_mapping(path: str | Path) -> tuple[ImportEntry, ...]:
    """Parse a mapping YAML file into an ordered tuple of `ImportEntry`."""
    mapping_path = Path(path)
    if not mapping_path.is_file():
        raise MappingError(f"Mapping file does not exist: {mapping_path}")
    try:
        data = yaml.safe_load(mapping_path.read_text(encoding="utf-8"))
    except yaml.YAMLError as e:
        raise MappingError(f"Mapping file is not valid YAML: {mapping_path}") from e
    return parse_mapping(data)


def default_mapping() -> tuple[ImportEntry, ...]:
    """Return the table shipped with the package."""
    text = resources.files("asset_importer").joinpath("mapping.yaml").read_text(encoding="utf-8")
    return parse_mapping(yaml.safe_load(text))
