"""Snapshot export and import for Blue Lock Terminal."""

import json
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError

from bluelock.db.store import RecordStore
from bluelock.models import DrillEntry, EgoEntry, Settings, TradeEntry


class SnapshotError(ValueError):
    """Raised when a snapshot document cannot be imported."""


class Snapshot(BaseModel):
    """Full-store export document."""

    ego_entries: list[EgoEntry] = Field(default_factory=list, alias="egoEntries")
    trade_entries: list[TradeEntry] = Field(default_factory=list, alias="tradeEntries")
    drill_entries: list[DrillEntry] = Field(default_factory=list, alias="drillEntries")
    settings: Settings = Field(default_factory=Settings)
    exported_at: Optional[datetime] = Field(default=None, alias="exportedAt")

    model_config = {"frozen": True, "populate_by_name": True}


def export_snapshot(store: RecordStore, now: Optional[datetime] = None) -> dict[str, Any]:
    """Build a snapshot document of the whole store.

    Collections are copied verbatim; only exportedAt varies between
    calls on an unchanged store.

    Args:
        store: Record store to export.
        now: Generation timestamp. Defaults to the current UTC time.

    Returns:
        JSON-ready dict with egoEntries, tradeEntries, drillEntries,
        settings and exportedAt.
    """
    generated = now or datetime.now(timezone.utc)
    return {
        "egoEntries": [e.model_dump(mode="json", by_alias=True) for e in store.ego_entries],
        "tradeEntries": [t.model_dump(mode="json", by_alias=True) for t in store.trade_entries],
        "drillEntries": [d.model_dump(mode="json", by_alias=True) for d in store.drill_entries],
        "settings": store.settings.model_dump(mode="json", by_alias=True),
        "exportedAt": generated.isoformat(),
    }


def backup_filename(when: Optional[datetime] = None) -> str:
    """Get the download file name for a snapshot taken at when.

    The date is the UTC calendar date, matching the exportedAt stamp.
    """
    generated = (when or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return f"bluelock-backup-{generated.date().isoformat()}.json"


def write_snapshot(path: Path, document: dict[str, Any]) -> Path:
    """Write a snapshot document as indented JSON."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(document, indent=2))
    return path


def read_snapshot(path: Path) -> dict[str, Any]:
    """Read a snapshot document from disk.

    Raises:
        SnapshotError: If the file is missing or not valid JSON.
    """
    try:
        return json.loads(Path(path).read_text())
    except (OSError, ValueError) as e:
        raise SnapshotError(f"Cannot read snapshot {path}: {e}") from e


def import_snapshot(store: RecordStore, document: Any) -> Snapshot:
    """Replace the store contents with a snapshot document.

    Args:
        store: Record store to restore into.
        document: Snapshot dict as produced by export_snapshot.

    Returns:
        The validated snapshot.

    Raises:
        SnapshotError: If the document is invalid. The store is unchanged.
    """
    try:
        snapshot = Snapshot.model_validate(document)
    except ValidationError as e:
        raise SnapshotError(f"Invalid snapshot: {e.error_count()} error(s)") from e

    store.restore(
        snapshot.ego_entries,
        snapshot.trade_entries,
        snapshot.drill_entries,
        snapshot.settings,
    )
    return snapshot
