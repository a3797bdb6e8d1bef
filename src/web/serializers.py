"""Shared serialization helpers for API routes."""
from __future__ import annotations

from src.engine.aggregator import AggregateResult
from src.web.schemas import AggregateResponse, TripStandingResult


def aggregate_response_from_result(result: AggregateResult) -> AggregateResponse:
    return AggregateResponse(
        total_orders=result.total_votes,
        aggregate=[
            TripStandingResult(
                trip=standing.name,
                score=standing.score,
                appearances=standing.appearances,
            )
            for standing in result.standings
        ],
    )
