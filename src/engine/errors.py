"""Error types shared by the voting engine and record stores."""
from __future__ import annotations


class RankingValidationError(ValueError):
    """A submitted ranking is not a well-formed subsequence of the catalog."""

    def __init__(self, errors: list[str]):
        self.errors = list(errors)
        super().__init__("; ".join(self.errors) or "Invalid ranking")


class StoreCorruptionError(Exception):
    """Persisted records could not be parsed."""


class StoreIOError(Exception):
    """The record store could not be read or written."""
