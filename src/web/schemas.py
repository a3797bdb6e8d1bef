"""Pydantic schemas for the web API."""
from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class TripsResponse(BaseModel):
    """Trip options that may be ranked."""

    trips: list[str]


class RankingSubmission(BaseModel):
    """Ranking submission; shape checks happen in the validator."""

    ranking: Any = None


class TripStandingResult(BaseModel):
    """One leaderboard row."""

    trip: str
    score: int
    appearances: int


class AggregateResponse(BaseModel):
    """Aggregate ranking over every stored vote."""

    total_orders: int = Field(serialization_alias="totalOrders")
    aggregate: list[TripStandingResult]
