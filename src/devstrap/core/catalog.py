"""Catalog data structures and loading.

A catalog is the static, ordered description of what a workstation should
have: packages, editor extensions, the editors that receive them, and git
aliases. The bundled default lives in devstrap/data/catalog.yaml.
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import TypeVar

import yaml

T = TypeVar("T")


@dataclass(frozen=True)
class DesiredPackage:
    """A package the workstation should have.

    presence_check names the executable whose presence means the package is
    already installed.
    """

    display_name: str
    install_identifier: str
    presence_check: str
    manager_identifiers: dict[str, str] = field(default_factory=dict)

    def identifier_for(self, manager: str) -> str:
        """Return the identifier to pass to the given package manager."""
        return self.manager_identifiers.get(manager, self.install_identifier)


@dataclass(frozen=True)
class Catalog:
    """Immutable catalog loaded once per run."""

    packages: list[DesiredPackage]
    extensions: list[str]
    editors: list[str]
    git_aliases: dict[str, str]


def default_catalog_path() -> Path:
    """Path of the catalog bundled with the package."""
    return Path(__file__).parent.parent / "data" / "catalog.yaml"


def load_catalog(path: Path | None = None) -> Catalog:
    """Load a catalog YAML file.

    Args:
        path: Catalog file (defaults to the bundled catalog)

    Returns:
        Catalog with every section present (missing sections are empty)

    Raises:
        FileNotFoundError: If the catalog file doesn't exist
        ValueError: If the file is not valid YAML or an entry is malformed
    """
    catalog_path = path if path is not None else default_catalog_path()

    if not catalog_path.exists():
        raise FileNotFoundError(f"Catalog not found at {catalog_path}")

    with open(catalog_path, encoding="utf-8") as f:
        try:
            data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Catalog {catalog_path} is not valid YAML: {e}") from e

    if not isinstance(data, dict):
        raise ValueError(f"Catalog {catalog_path} must be a mapping, got {type(data).__name__}")

    entries = _section(data, "packages", list, catalog_path)
    packages = []
    for index, entry in enumerate(entries):
        if not isinstance(entry, dict):
            raise ValueError(
                f"Package #{index + 1} in {catalog_path} must be a mapping with name and id"
            )
        missing = [key for key in ("name", "id") if not entry.get(key)]
        if missing:
            raise ValueError(
                f"Package #{index + 1} in {catalog_path} is missing: {', '.join(missing)}"
            )
        ids = entry.get("ids") or {}
        if not isinstance(ids, dict):
            raise ValueError(
                f"Package #{index + 1} in {catalog_path}: 'ids' must map manager to identifier"
            )
        packages.append(
            DesiredPackage(
                display_name=str(entry["name"]),
                install_identifier=str(entry["id"]),
                presence_check=str(entry.get("check") or entry["id"]),
                manager_identifiers={str(k): str(v) for k, v in ids.items()},
            )
        )

    aliases = _section(data, "git_aliases", dict, catalog_path)
    return Catalog(
        packages=packages,
        extensions=[str(x) for x in _section(data, "extensions", list, catalog_path)],
        editors=[str(x) for x in _section(data, "editors", list, catalog_path)],
        git_aliases={str(k): str(v) for k, v in aliases.items()},
    )


def _section(data: dict, key: str, kind: type[T], catalog_path: Path) -> T:
    value = data.get(key) or kind()
    if not isinstance(value, kind):
        raise ValueError(f"'{key}' in catalog {catalog_path} must be a {kind.__name__}")
    return value
