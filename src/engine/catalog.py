"""Option catalog loading and model."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Iterable, Iterator, Optional

from src.config import settings

DEFAULT_TRIPS: tuple[str, ...] = (
    "Algarve",
    "Amsterdam",
    "Barcelona",
    "Birch",
    "Bordeaux",
    "Brighton",
    "Chamonix",
    "Cheltenham",
    "Edinburgh",
    "Galway",
    "Lisbon",
    "Lille",
    "Manchester",
    "New Forest",
    "Nice",
    "Vienna",
)


@dataclass(frozen=True)
class OptionCatalog:
    """Ordered, duplicate-free set of trip names that votes may rank."""

    names: tuple[str, ...]

    def __post_init__(self) -> None:
        seen: set[str] = set()
        for name in self.names:
            if not isinstance(name, str) or not name.strip():
                raise ValueError(f"Catalog option must be a non-empty string, got {name!r}")
            if name in seen:
                raise ValueError(f"Duplicate catalog option '{name}'")
            seen.add(name)

    @classmethod
    def of(cls, names: Iterable[str]) -> "OptionCatalog":
        return cls(names=tuple(names))

    def __contains__(self, item: object) -> bool:
        return item in self.names

    def __iter__(self) -> Iterator[str]:
        return iter(self.names)

    def __len__(self) -> int:
        return len(self.names)


DEFAULT_CATALOG = OptionCatalog(names=DEFAULT_TRIPS)


def _parse_options(data: Any) -> list[str]:
    if isinstance(data, dict):
        data = data.get("options") or data.get("trips") or []
    if not isinstance(data, list):
        return []
    for name in data:
        if not isinstance(name, str):
            raise ValueError(f"Catalog option must be a non-empty string, got {name!r}")
    return data


def load_catalog(
    catalog_path: Optional[Path] = None,
    overrides: Optional[list[str]] = None,
) -> OptionCatalog:
    """Resolve the option catalog.

    Precedence: explicit overrides, then the YAML file at ``catalog_path``
    (or ``settings.catalog_path``), then ``settings.trip_options``, then the
    built-in trip list.
    """
    if overrides:
        return OptionCatalog.of(overrides)

    path = catalog_path or settings.catalog_path
    if path and path.exists():
        import yaml

        with path.open("r", encoding="utf-8") as handle:
            loaded = yaml.safe_load(handle) or {}
        options = _parse_options(loaded)
        if options:
            return OptionCatalog.of(options)

    if settings.trip_options:
        return OptionCatalog.of(settings.trip_options)

    return DEFAULT_CATALOG
