"""Health check routes."""
from __future__ import annotations

from typing import Any

from fastapi import APIRouter

from src.config import settings

router = APIRouter()


@router.get("/api/health")
def health_check() -> dict[str, Any]:
    """Report liveness and the configured storage backend."""
    return {"status": "ok", "storage_backend": settings.storage_backend}
