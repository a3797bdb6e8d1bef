"""Tests for the JSON file record store."""
import json
import logging
from pathlib import Path
from threading import Thread

import pytest

from src.engine.errors import StoreIOError
from src.engine.records import VoteRecord, new_vote_record
from src.storage import json_store
from src.storage.json_store import JsonRecordStore


@pytest.fixture
def store_path(tmp_path: Path) -> Path:
    return tmp_path / "data" / "orders.json"


def test_load_all_initializes_missing_file(store_path: Path):
    store = JsonRecordStore(store_path)
    assert store.load_all() == []
    assert store_path.read_text(encoding="utf-8") == "[]"


def test_append_and_reload_round_trip(store_path: Path):
    store = JsonRecordStore(store_path)
    record = new_vote_record(["Lisbon", "Nice", "Vienna"])
    store.append_and_save(record)

    reloaded = JsonRecordStore(store_path).load_all()
    assert len(reloaded) == 1
    assert VoteRecord.from_dict(reloaded[0]) == record
    assert reloaded[0]["createdAt"] == record.created_at


def test_append_preserves_order(store_path: Path):
    store = JsonRecordStore(store_path)
    first = new_vote_record(["Nice"])
    second = new_vote_record(["Lisbon"])
    store.append_and_save(first)
    snapshot = store.append_and_save(second)

    assert [item["id"] for item in snapshot] == [first.id, second.id]
    assert [item["id"] for item in store.load_all()] == [first.id, second.id]


def test_corrupt_file_is_reset(store_path: Path, caplog):
    store_path.parent.mkdir(parents=True)
    store_path.write_text("{not json", encoding="utf-8")
    store = JsonRecordStore(store_path)

    with caplog.at_level(logging.ERROR, logger=json_store.__name__):
        assert store.load_all() == []

    assert json.loads(store_path.read_text(encoding="utf-8")) == []
    assert "resetting" in caplog.text


def test_non_array_file_is_reset(store_path: Path):
    store_path.parent.mkdir(parents=True)
    store_path.write_text('{"ranking": ["Nice"]}', encoding="utf-8")
    store = JsonRecordStore(store_path)

    assert store.load_all() == []
    assert json.loads(store_path.read_text(encoding="utf-8")) == []


def test_empty_file_reads_as_no_records(store_path: Path):
    store_path.parent.mkdir(parents=True)
    store_path.write_text("", encoding="utf-8")
    assert JsonRecordStore(store_path).load_all() == []


def test_append_after_corruption_starts_fresh(store_path: Path):
    store_path.parent.mkdir(parents=True)
    store_path.write_text("garbage", encoding="utf-8")
    store = JsonRecordStore(store_path)
    snapshot = store.append_and_save(new_vote_record(["Galway"]))
    assert len(snapshot) == 1


def test_failed_write_leaves_previous_state(store_path: Path, monkeypatch):
    store = JsonRecordStore(store_path)
    store.append_and_save(new_vote_record(["Nice"]))

    def _fail_replace(self, target):
        raise PermissionError("read-only filesystem")

    monkeypatch.setattr(Path, "replace", _fail_replace)
    with pytest.raises(StoreIOError):
        store.append_and_save(new_vote_record(["Lisbon"]))
    monkeypatch.undo()

    records = store.load_all()
    assert len(records) == 1
    assert records[0]["ranking"] == ["Nice"]
    assert list(store_path.parent.glob("*.tmp")) == []


def test_unreadable_file_raises_store_io_error(store_path: Path, monkeypatch):
    store = JsonRecordStore(store_path)
    store.load_all()

    def _fail_read(self, *args, **kwargs):
        raise PermissionError("denied")

    monkeypatch.setattr(Path, "read_bytes", _fail_read)
    with pytest.raises(StoreIOError):
        store.load_all()


def test_concurrent_appends_are_not_lost(store_path: Path):
    store = JsonRecordStore(store_path)

    def _append():
        for _ in range(10):
            store.append_and_save(new_vote_record(["Vienna"]))

    threads = [Thread(target=_append) for _ in range(4)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    assert len(store.load_all()) == 40


def test_invalid_utf8_file_is_reset(store_path: Path):
    store_path.parent.mkdir(parents=True)
    store_path.write_bytes(b"[\xff\xfe garbage")
    store = JsonRecordStore(store_path)

    assert store.load_all() == []
    assert json.loads(store_path.read_text(encoding="utf-8")) == []
    assert len(store.append_and_save(new_vote_record(["Nice"]))) == 1


def test_deeply_nested_file_is_reset(store_path: Path):
    store_path.parent.mkdir(parents=True)
    store_path.write_text("[" * 100000 + "]" * 100000, encoding="utf-8")
    store = JsonRecordStore(store_path)

    assert store.load_all() == []
    assert json.loads(store_path.read_text(encoding="utf-8")) == []
