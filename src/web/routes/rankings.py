"""Ranking submission and aggregate routes."""
from __future__ import annotations

import logging
from fastapi import APIRouter, HTTPException

from src.engine.errors import RankingValidationError
from src.engine.observability import generate_trace_id
from src.web.dependencies import get_service
from src.web.schemas import AggregateResponse, RankingSubmission
from src.web.serializers import aggregate_response_from_result

router = APIRouter()
logger = logging.getLogger(__name__)

INVALID_RANKING_DETAIL = "Invalid ranking payload."


@router.get("/api/aggregate", response_model=AggregateResponse)
def get_aggregate() -> AggregateResponse:
    """Return the leaderboard computed from every stored vote."""
    try:
        result = get_service().get_aggregate()
    except Exception as exc:
        logger.exception("Failed to load aggregate data")
        raise HTTPException(status_code=500, detail="Failed to load aggregate data.") from exc
    return aggregate_response_from_result(result)


@router.post("/api/rankings", response_model=AggregateResponse, status_code=201)
def submit_ranking(request: RankingSubmission) -> AggregateResponse:
    """Store a ranking and return the updated leaderboard."""
    trace_id = generate_trace_id()
    try:
        result = get_service().submit(request.ranking, trace_id=trace_id)
    except RankingValidationError as exc:
        raise HTTPException(status_code=400, detail=INVALID_RANKING_DETAIL) from exc
    except Exception as exc:
        logger.exception("Failed to save ranking trace_id=%s", trace_id)
        raise HTTPException(status_code=500, detail="Failed to save ranking.") from exc
    return aggregate_response_from_result(result)
