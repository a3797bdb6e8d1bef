"""Vote record model."""
from __future__ import annotations

import secrets
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Optional


def generate_record_id(now: Optional[datetime] = None) -> str:
    moment = now or datetime.now(timezone.utc)
    return f"{int(moment.timestamp() * 1000)}-{secrets.token_hex(6)}"


def format_timestamp(moment: datetime) -> str:
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    moment = moment.astimezone(timezone.utc)
    return moment.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class VoteRecord:
    id: str
    created_at: str
    ranking: tuple[str, ...] = field(default_factory=tuple)

    def to_dict(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "createdAt": self.created_at,
            "ranking": list(self.ranking),
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "VoteRecord":
        ranking = data.get("ranking")
        if not isinstance(ranking, (list, tuple)):
            ranking = []
        return cls(
            id=str(data.get("id", "")),
            created_at=str(data.get("createdAt", "")),
            ranking=tuple(ranking),
        )


def new_vote_record(ranking: list[str], now: Optional[datetime] = None) -> VoteRecord:
    """Build a record for a freshly accepted ranking."""
    moment = now or datetime.now(timezone.utc)
    return VoteRecord(
        id=generate_record_id(moment),
        created_at=format_timestamp(moment),
        ranking=tuple(ranking),
    )
