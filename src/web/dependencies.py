"""Process-wide service wiring for the API."""
from __future__ import annotations

from functools import lru_cache

from src.config import settings
from src.engine.catalog import load_catalog
from src.engine.service import VotingService
from src.storage.factory import build_record_store


@lru_cache(maxsize=1)
def get_service() -> VotingService:
    """Build the voting service once from the current settings."""
    return VotingService(catalog=load_catalog(), store=build_record_store(settings))
