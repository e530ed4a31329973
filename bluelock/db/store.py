"""In-memory record store for Blue Lock Terminal.

Holds the ego, trade and drill collections plus the settings record,
and writes each collection back through JsonStorage when it changes.
"""

import logging
import uuid
from datetime import datetime, timezone
from typing import Any, Callable, Optional, Sequence

from pydantic import BaseModel, ValidationError

from bluelock.db.kv import STORAGE_KEYS, JsonStorage
from bluelock.models import DRILL_CATEGORIES, TRADE_RESULTS, DrillEntry, EgoEntry, Settings, TradeEntry
from bluelock.models.coerce import coerce_float, coerce_int
from bluelock.stats.classify import ego_label

logger = logging.getLogger(__name__)


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _new_id() -> str:
    return str(uuid.uuid4())


def _clamp(value: int, low: int, high: int) -> int:
    return max(low, min(high, value))


class RecordStore:
    """Single source of truth for all tracked records.

    Nothing is persisted until initialize() has loaded the stored state,
    so empty startup collections can never overwrite saved data.
    """

    def __init__(
        self,
        storage: JsonStorage,
        default_settings: Optional[Settings] = None,
        clock: Callable[[], datetime] = _utcnow,
        id_factory: Callable[[], str] = _new_id,
    ):
        """Initialize the store.

        Args:
            storage: JsonStorage used for persistence.
            default_settings: Settings used when none are stored.
            clock: Returns the creation timestamp for new entries.
            id_factory: Returns a fresh identifier for new entries.
        """
        self._storage = storage
        self._default_settings = default_settings or Settings()
        self._clock = clock
        self._id_factory = id_factory
        self._ready = False

        # Collections may also hold raw records that failed validation.
        self._ego: list = []
        self._trades: list = []
        self._drills: list = []
        self._locked: set[str] = set()
        self._settings = self._default_settings

    @property
    def ready(self) -> bool:
        """Whether the initial load has completed."""
        return self._ready

    # ==================== Loading ====================

    def _load_collection(self, name: str, model: type[BaseModel]) -> list:
        """Load one collection, validating each record on its own.

        Records that fail validation are kept as their raw JSON so the
        next save writes them back unchanged. A stored value that is not
        a list at all locks the key until reset_all() or restore().
        """
        raw = self._storage.load(STORAGE_KEYS[name], [])
        if not isinstance(raw, list):
            logger.warning("Stored %s data is not a list; leaving it untouched", name)
            self._locked.add(name)
            return []

        records: list = []
        unreadable = 0
        for item in raw:
            try:
                records.append(model.model_validate(item))
            except ValidationError:
                records.append(item)
                unreadable += 1
        if unreadable:
            logger.warning("Keeping %d unreadable %s record(s) as stored", unreadable, name)
        return records

    def _load_settings(self) -> Settings:
        raw = self._storage.load(STORAGE_KEYS["settings"], None)
        if raw is None:
            return self._default_settings
        try:
            return Settings.model_validate(raw)
        except ValidationError as e:
            if not isinstance(raw, dict):
                logger.warning("Ignoring invalid settings data: %s", e.error_count())
                return self._default_settings
            bad_fields = {err["loc"][0] for err in e.errors() if err["loc"]}
            logger.warning("Ignoring invalid settings fields: %s", ", ".join(map(str, bad_fields)))
            defaults = self._default_settings.model_dump(by_alias=True)
            aliases = {name: field.alias for name, field in Settings.model_fields.items()}
            kept = {aliases.get(k) or k: v for k, v in raw.items() if k not in bad_fields}
            try:
                return Settings.model_validate({**defaults, **kept})
            except ValidationError:
                return self._default_settings

    def initialize(self) -> "RecordStore":
        """Load all collections and the settings record from storage.

        Only the first call loads; later calls are no-ops.

        Returns:
            The store itself, for chaining.
        """
        if self._ready:
            return self
        self._ego = self._load_collection("ego", EgoEntry)
        self._trades = self._load_collection("trades", TradeEntry)
        self._drills = self._load_collection("drills", DrillEntry)
        self._settings = self._load_settings()
        self._ready = True
        logger.debug(
            "Loaded %d ego, %d trade, %d drill entries",
            len(self._ego), len(self._trades), len(self._drills),
        )
        return self

    # ==================== Persistence ====================

    def _persist(self, name: str) -> None:
        """Write one collection (or settings) back to storage."""
        if not self._ready:
            logger.warning("Store not initialized; skipping save of %s", name)
            return
        if name in self._locked:
            logger.warning("Stored %s data is unreadable; skipping save", name)
            return
        if name == "settings":
            value: Any = self._settings.model_dump(mode="json", by_alias=True)
        else:
            records = {"ego": self._ego, "trades": self._trades, "drills": self._drills}[name]
            value = [
                r.model_dump(mode="json", by_alias=True) if isinstance(r, BaseModel) else r
                for r in records
            ]
        self._storage.save(STORAGE_KEYS[name], value)

    # ==================== Accessors ====================

    @property
    def ego_entries(self) -> tuple[EgoEntry, ...]:
        return tuple(r for r in self._ego if isinstance(r, EgoEntry))

    @property
    def trade_entries(self) -> tuple[TradeEntry, ...]:
        return tuple(r for r in self._trades if isinstance(r, TradeEntry))

    @property
    def drill_entries(self) -> tuple[DrillEntry, ...]:
        return tuple(r for r in self._drills if isinstance(r, DrillEntry))

    @property
    def settings(self) -> Settings:
        return self._settings

    # ==================== Mutations ====================

    def append_ego(self, score: Any, notes: str = "") -> EgoEntry:
        """Record an ego self-rating.

        Args:
            score: Score 0-100. Out-of-range values are clamped and
                malformed values become 0.
            notes: Free-form notes.

        Returns:
            The stored entry, with its label frozen at creation time.
        """
        value = _clamp(coerce_int(score, default=0), 0, 100)
        entry = EgoEntry(
            id=self._id_factory(),
            timestamp=self._clock(),
            score=value,
            label=ego_label(value),
            notes=notes or "",
        )
        self._ego.append(entry)
        self._persist("ego")
        return entry

    def append_trade(
        self,
        ticker: str,
        entry_price: Any,
        exit_price: Any,
        shares: Any = 1,
        result: str = "WIN",
        notes: str = "",
    ) -> TradeEntry:
        """Record a completed trade.

        pnl is derived as (exit - entry) * shares and is not checked
        against the chosen result.

        Args:
            ticker: Trading symbol; upper-cased.
            entry_price: Entry price; malformed values become 0.
            exit_price: Exit price; malformed values become 0.
            shares: Share count; malformed or non-positive values become 1.
            result: WIN, LOSS or BREAKEVEN.
            notes: Free-form notes.

        Returns:
            The stored entry.
        """
        entry_p = max(0.0, coerce_float(entry_price))
        exit_p = max(0.0, coerce_float(exit_price))
        count = coerce_int(shares, default=1)
        if count < 1:
            count = 1
        outcome = (result or "").upper()
        if outcome not in TRADE_RESULTS:
            outcome = "WIN"

        entry = TradeEntry(
            id=self._id_factory(),
            timestamp=self._clock(),
            ticker=(ticker or "").strip().upper(),
            entry_price=entry_p,
            exit_price=exit_p,
            shares=count,
            result=outcome,
            pnl=(exit_p - entry_p) * count,
            notes=notes or "",
        )
        self._trades.append(entry)
        self._persist("trades")
        return entry

    def append_drill(
        self, weapon: str, intensity: Any = 5, category: str = "TRADING"
    ) -> Optional[DrillEntry]:
        """Record a practice session.

        Args:
            weapon: Skill or activity practiced. Blank names are ignored.
            intensity: Intensity 1-10; clamped, malformed values become 5.
            category: TRADING, FITNESS, SKILL or MINDSET.

        Returns:
            The stored entry, or None if the name was blank.
        """
        name = (weapon or "").strip()
        if not name:
            return None
        level = _clamp(coerce_int(intensity, default=5), 1, 10)
        kind = (category or "").upper()
        if kind not in DRILL_CATEGORIES:
            kind = "TRADING"

        entry = DrillEntry(
            id=self._id_factory(),
            timestamp=self._clock(),
            weapon=name,
            intensity=level,
            category=kind,
        )
        self._drills.append(entry)
        self._persist("drills")
        return entry

    def update_settings(self, settings: Settings) -> Settings:
        """Replace the settings record wholesale."""
        self._settings = settings
        self._persist("settings")
        return settings

    def reset_all(self) -> None:
        """Clear ego, trade and drill collections. Settings are kept."""
        self._ego = []
        self._trades = []
        self._drills = []
        self._locked.clear()
        self._persist("ego")
        self._persist("trades")
        self._persist("drills")

    def restore(
        self,
        ego_entries: Sequence[EgoEntry],
        trades: Sequence[TradeEntry],
        drills: Sequence[DrillEntry],
        settings: Settings,
    ) -> None:
        """Replace all four collections, e.g. from an imported snapshot."""
        self._ego = list(ego_entries)
        self._trades = list(trades)
        self._drills = list(drills)
        self._settings = settings
        self._locked.clear()
        for name in ("ego", "trades", "drills", "settings"):
            self._persist(name)
