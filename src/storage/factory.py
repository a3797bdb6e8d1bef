"""Record store selection."""
from __future__ import annotations

from typing import Any, Optional, Protocol

from src.config import Settings, settings as default_settings
from src.engine.records import VoteRecord


class RecordStore(Protocol):
    def load_all(self) -> list[dict[str, Any]]:
        ...

    def append_and_save(self, record: VoteRecord) -> list[dict[str, Any]]:
        ...


def build_record_store(settings: Optional[Settings] = None) -> RecordStore:
    """Create the store named by ``settings.storage_backend``."""
    settings = settings or default_settings
    backend = settings.storage_backend.strip().lower()

    if backend == "json":
        from src.storage.json_store import JsonRecordStore

        return JsonRecordStore(settings.records_path())
    if backend == "sql":
        from src.storage.sql_store import SqlRecordStore

        return SqlRecordStore(settings.database_url)

    raise ValueError(f"Unknown storage backend '{settings.storage_backend}'")
