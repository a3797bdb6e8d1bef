"""Trip option catalog routes."""
from __future__ import annotations

from fastapi import APIRouter

from src.web.dependencies import get_service
from src.web.schemas import TripsResponse

router = APIRouter()


@router.get("/api/trips", response_model=TripsResponse)
def list_trips() -> TripsResponse:
    """Return the trip options in catalog order."""
    return TripsResponse(trips=list(get_service().list_options()))
