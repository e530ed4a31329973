"""Tests for snapshot export and import.

**Feature: bluelock-terminal**
"""

import itertools
import json
import tempfile
from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest

from bluelock.db.export import (
    SnapshotError,
    backup_filename,
    export_snapshot,
    import_snapshot,
    read_snapshot,
    write_snapshot,
)
from bluelock.db.kv import STORAGE_KEYS, JsonStorage, MemoryBackend
from bluelock.db.store import RecordStore
from bluelock.models import Settings


def _make_store(backend=None) -> RecordStore:
    counter = itertools.count(1)
    return RecordStore(
        JsonStorage(backend if backend is not None else MemoryBackend()),
        clock=lambda: datetime(2026, 2, 14, 18, 0, tzinfo=timezone.utc),
        id_factory=lambda: f"id-{next(counter)}",
    ).initialize()


@pytest.fixture
def populated_store():
    store = _make_store()
    store.append_ego(33, "rough day")
    store.append_ego(88)
    store.append_trade("spy", 400, 404.5, 10, "WIN", "breakout")
    store.append_trade("qqq", 300, 290, 1, "LOSS")
    store.append_drill("Tape reading", 8, "SKILL")
    store.update_settings(Settings(starting_capital=1000, target_capital=5000, current_capital=1800))
    return store


class TestExportSnapshot:
    """
    **Feature: bluelock-terminal, Property 14: Verbatim Snapshot**

    The snapshot holds all four collections unchanged plus exportedAt.
    """

    def test_fields(self, populated_store):
        now = datetime(2026, 2, 15, 8, 0, tzinfo=timezone.utc)
        document = export_snapshot(populated_store, now=now)

        assert set(document) == {
            "egoEntries", "tradeEntries", "drillEntries", "settings", "exportedAt",
        }
        assert document["exportedAt"] == now.isoformat()
        assert [e["score"] for e in document["egoEntries"]] == [33, 88]
        assert document["tradeEntries"][0]["entryPrice"] == 400
        assert document["tradeEntries"][0]["pnl"] == 45
        assert document["drillEntries"][0]["weapon"] == "Tape reading"
        assert document["settings"]["currentCapital"] == 1800

    def test_matches_persisted_collections(self):
        backend = MemoryBackend()
        store = _make_store(backend)
        store.append_ego(50)
        store.append_drill("Pushups", 6, "FITNESS")
        document = export_snapshot(store)

        assert document["egoEntries"] == json.loads(backend.data[STORAGE_KEYS["ego"]])
        assert document["drillEntries"] == json.loads(backend.data[STORAGE_KEYS["drills"]])

    def test_deterministic_apart_from_timestamp(self, populated_store):
        first = export_snapshot(populated_store)
        second = export_snapshot(populated_store)
        first.pop("exportedAt")
        second.pop("exportedAt")
        assert first == second

    def test_empty_store(self):
        document = export_snapshot(_make_store())
        assert document["egoEntries"] == []
        assert document["settings"] == Settings().model_dump(mode="json", by_alias=True)

    def test_json_serializable(self, populated_store):
        json.dumps(export_snapshot(populated_store))


class TestImportSnapshot:
    """
    **Feature: bluelock-terminal, Property 15: Export/Import Round Trip**

    Importing an export into a fresh store and exporting again gives the
    same collections, byte for byte.
    """

    def test_round_trip(self, populated_store):
        document = export_snapshot(populated_store)

        fresh = _make_store()
        import_snapshot(fresh, json.loads(json.dumps(document)))
        again = export_snapshot(fresh)

        for key in ("egoEntries", "tradeEntries", "drillEntries", "settings"):
            assert json.dumps(again[key]) == json.dumps(document[key])

    def test_import_persists_all_keys(self, populated_store):
        backend = MemoryBackend()
        fresh = _make_store(backend)
        import_snapshot(fresh, export_snapshot(populated_store))
        assert set(backend.data) == set(STORAGE_KEYS.values())

    def test_invalid_document_leaves_store(self, populated_store):
        before = export_snapshot(populated_store)
        with pytest.raises(SnapshotError):
            import_snapshot(populated_store, {"egoEntries": [{"score": "high"}]})
        after = export_snapshot(populated_store)
        before.pop("exportedAt")
        after.pop("exportedAt")
        assert before == after

    def test_non_dict_document(self):
        with pytest.raises(SnapshotError):
            import_snapshot(_make_store(), ["not", "a", "snapshot"])


class TestSnapshotFiles:
    """Backup file naming and disk round trip."""

    def test_backup_filename(self):
        when = datetime(2026, 10, 19, 8, 0, tzinfo=timezone.utc)
        assert backup_filename(when) == "bluelock-backup-2026-10-19.json"

    def test_backup_filename_uses_utc_date(self):
        evening = datetime(2026, 10, 19, 23, 30, tzinfo=timezone(timedelta(hours=-5)))
        assert backup_filename(evening) == "bluelock-backup-2026-10-20.json"

    def test_backup_filename_matches_exported_at(self, populated_store):
        now = datetime(2026, 10, 20, 1, 15, tzinfo=timezone.utc)
        document = export_snapshot(populated_store, now=now)
        assert document["exportedAt"].startswith("2026-10-20")
        assert backup_filename(now) == "bluelock-backup-2026-10-20.json"

    def test_write_and_read(self, populated_store):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "out" / backup_filename()
            document = export_snapshot(populated_store)
            write_snapshot(path, document)

            assert path.read_text().startswith("{\n  ")
            assert read_snapshot(path) == document

    def test_read_missing_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(SnapshotError):
                read_snapshot(Path(tmpdir) / "missing.json")

    def test_read_corrupt_file(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "bad.json"
            path.write_text("{oops")
            with pytest.raises(SnapshotError):
                read_snapshot(path)
