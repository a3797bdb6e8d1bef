"""Borda-style aggregation of stored rankings into a leaderboard."""
from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from src.engine.catalog import OptionCatalog
from src.engine.records import VoteRecord


@dataclass(frozen=True)
class OptionStanding:
    name: str
    score: int
    appearances: int


@dataclass(frozen=True)
class AggregateResult:
    total_votes: int
    standings: tuple[OptionStanding, ...]

    def scores(self) -> dict[str, int]:
        return {standing.name: standing.score for standing in self.standings}

    def appearances(self) -> dict[str, int]:
        return {standing.name: standing.appearances for standing in self.standings}


def _ranking_of(record: Any) -> Sequence[Any]:
    if isinstance(record, VoteRecord):
        return record.ranking
    ranking = record.get("ranking") if isinstance(record, dict) else None
    if isinstance(ranking, (list, tuple)):
        return ranking
    return ()


def _name_key(name: str) -> tuple[str, str]:
    # Case-insensitive first, like a locale collation; raw string keeps it total.
    return (name.casefold(), name)


def aggregate_records(records: Iterable[Any], catalog: OptionCatalog) -> AggregateResult:
    """Fold rankings into per-option scores and appearance counts.

    A ranking of length L awards ``L - i`` points to the option at position
    ``i``. Every catalog option is present in the result; records with a
    missing or malformed ranking count as empty rankings.
    """
    records = list(records)
    scores: dict[str, int] = defaultdict(int)
    appearances: dict[str, int] = defaultdict(int)

    for record in records:
        ranked = _ranking_of(record)
        total = len(ranked)
        counted: set[str] = set()
        for idx, name in enumerate(ranked):
            if name not in catalog or name in counted:
                continue
            counted.add(name)
            scores[name] += total - idx
            appearances[name] += 1

    standings = sorted(
        (
            OptionStanding(name=name, score=scores[name], appearances=appearances[name])
            for name in catalog
        ),
        key=lambda item: (-item.score, _name_key(item.name)),
    )
    return AggregateResult(total_votes=len(records), standings=tuple(standings))
