"""Flat JSON file record store."""
from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from threading import Lock
from typing import Any

from src.engine.errors import StoreCorruptionError, StoreIOError
from src.engine.records import VoteRecord

logger = logging.getLogger(__name__)


class JsonRecordStore:
    """Keeps every vote record in a single JSON array file.

    Appends are read-modify-write cycles serialized by an in-process lock.
    Writes go through a temp file and ``Path.replace`` so a reader never
    sees a truncated array.
    """

    def __init__(self, path: Path):
        self.path = Path(path)
        self._lock = Lock()

    def _ensure_file(self) -> None:
        if not self.path.parent.exists():
            self.path.parent.mkdir(parents=True, exist_ok=True)
        if not self.path.exists():
            self._write_atomic([])

    def _write_atomic(self, records: list[dict[str, Any]]) -> None:
        serialized = json.dumps(records, indent=2)
        self.path.parent.mkdir(parents=True, exist_ok=True)

        with tempfile.NamedTemporaryFile(
            "w", dir=self.path.parent, delete=False, encoding="utf-8", suffix=".tmp"
        ) as tmp:
            tmp.write(serialized)
            tmp.flush()
            os.fsync(tmp.fileno())
            temp_path = Path(tmp.name)

        try:
            temp_path.replace(self.path)
        except OSError:
            temp_path.unlink(missing_ok=True)
            raise

    def _parse(self, raw: bytes) -> list[dict[str, Any]]:
        try:
            text = raw.decode("utf-8")
            parsed = json.loads(text) if text.strip() else []
        except (UnicodeDecodeError, json.JSONDecodeError, RecursionError) as exc:
            raise StoreCorruptionError(f"Unparseable records file {self.path}: {exc}") from exc
        if not isinstance(parsed, list):
            raise StoreCorruptionError(
                f"Records file {self.path} holds {type(parsed).__name__}, expected array"
            )
        return parsed

    def _load_unlocked(self) -> list[dict[str, Any]]:
        try:
            self._ensure_file()
            raw = self.path.read_bytes()
        except OSError as exc:
            raise StoreIOError(f"Could not read {self.path}: {exc}") from exc

        try:
            return self._parse(raw)
        except StoreCorruptionError as exc:
            logger.error("Failed to parse records file, resetting. %s", exc)
            try:
                self._write_atomic([])
            except OSError as write_exc:
                raise StoreIOError(f"Could not reset {self.path}: {write_exc}") from write_exc
            return []

    def load_all(self) -> list[dict[str, Any]]:
        """Return all stored records in storage order."""
        with self._lock:
            return self._load_unlocked()

    def append_and_save(self, record: VoteRecord) -> list[dict[str, Any]]:
        """Persist ``record`` after all existing records.

        Returns the full snapshot that was written.
        """
        with self._lock:
            records = self._load_unlocked()
            records.append(record.to_dict())
            try:
                self._write_atomic(records)
            except OSError as exc:
                raise StoreIOError(f"Could not write {self.path}: {exc}") from exc
            return records
