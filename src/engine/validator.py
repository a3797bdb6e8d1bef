"""Ranking validation against the option catalog."""
from __future__ import annotations

from typing import Any

from src.engine.catalog import OptionCatalog


def ranking_errors(candidate: Any, catalog: OptionCatalog) -> list[str]:
    """Collect every reason a candidate ranking would be rejected.

    Checks:
    - The candidate is a list or tuple
    - Every entry is a string
    - Every entry is a catalog option
    - No entry repeats

    An empty ranking is valid.

    Args:
        candidate: Arbitrary value received from a caller
        catalog: Options a ranking may contain

    Returns:
        List of error messages, empty when the ranking is acceptable
    """
    if not isinstance(candidate, (list, tuple)):
        return [f"Ranking must be a list, got {type(candidate).__name__}"]

    errors: list[str] = []
    seen: set[str] = set()
    for position, item in enumerate(candidate):
        if not isinstance(item, str):
            errors.append(f"Entry {position} is not a string: {item!r}")
            continue
        if item not in catalog:
            errors.append(f"Unknown option '{item}' at position {position}")
        if item in seen:
            errors.append(f"Option '{item}' is ranked more than once")
        seen.add(item)

    return errors


def validate_ranking(candidate: Any, catalog: OptionCatalog) -> bool:
    return not ranking_errors(candidate, catalog)
