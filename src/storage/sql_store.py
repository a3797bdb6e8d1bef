"""SQLAlchemy-backed record store."""
from __future__ import annotations

import logging
from pathlib import Path
from threading import Lock
from typing import Any

from sqlalchemy import select
from sqlalchemy.engine import make_url
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from src.database.engine import build_engine, init_db, session_scope
from src.database.models import VoteRecordRow
from src.engine.errors import StoreIOError
from src.engine.records import VoteRecord

logger = logging.getLogger(__name__)


def _ensure_sqlite_dir(database_url: str) -> None:
    url = make_url(database_url)
    if url.get_backend_name() == "sqlite" and url.database and url.database != ":memory:":
        Path(url.database).parent.mkdir(parents=True, exist_ok=True)


class SqlRecordStore:
    """Stores vote records as rows of the ``vote_records`` table."""

    def __init__(self, database_url: str):
        _ensure_sqlite_dir(database_url)
        self.engine = build_engine(database_url)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)
        self._lock = Lock()
        self._initialized = False

    def _ensure_tables(self) -> None:
        if not self._initialized:
            init_db(self.engine)
            self._initialized = True

    def load_all(self) -> list[dict[str, Any]]:
        """Return all stored records in insertion order."""
        try:
            self._ensure_tables()
            with session_scope(self.SessionLocal) as db:
                rows = db.scalars(select(VoteRecordRow).order_by(VoteRecordRow.seq)).all()
                return [row.to_dict() for row in rows]
        except SQLAlchemyError as exc:
            logger.error("Failed to load vote records: %s", exc)
            raise StoreIOError(f"Could not read vote records: {exc}") from exc

    def append_and_save(self, record: VoteRecord) -> list[dict[str, Any]]:
        """Insert ``record`` and return the updated snapshot."""
        with self._lock:
            try:
                self._ensure_tables()
                with session_scope(self.SessionLocal) as db:
                    db.add(
                        VoteRecordRow(
                            record_id=record.id,
                            created_at=record.created_at,
                            ranking=list(record.ranking),
                        )
                    )
            except SQLAlchemyError as exc:
                logger.error("Failed to save vote record %s: %s", record.id, exc)
                raise StoreIOError(f"Could not write vote record: {exc}") from exc
            return self.load_all()

    def dispose(self) -> None:
        self.engine.dispose()
