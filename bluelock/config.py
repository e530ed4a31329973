"""Configuration for Blue Lock Terminal.

Reads ~/.config/bluelock/config.toml. A missing or broken config file
is not an error; built-in defaults apply.
"""

import os
from pathlib import Path
from typing import Optional

from bluelock.models import Settings
from bluelock.models.coerce import coerce_float

CONFIG_DIR_ENV = "BLUELOCK_CONFIG_DIR"
CONFIG_FILENAME = "config.toml"
DB_FILENAME = "bluelock.db"


def get_config_dir() -> Path:
    """Get the configuration directory, honoring BLUELOCK_CONFIG_DIR."""
    override = os.environ.get(CONFIG_DIR_ENV)
    if override:
        return Path(override).expanduser()
    return Path.home() / ".config" / "bluelock"


def get_config_path() -> Path:
    return get_config_dir() / CONFIG_FILENAME


def load_config(config_path: Optional[Path] = None) -> dict:
    """Load configuration.

    Returns:
        Config dict, empty if the file is missing or unreadable.
    """
    import toml

    config_path = config_path or get_config_path()

    if not config_path.exists():
        return {}

    try:
        return toml.load(config_path)
    except Exception:
        return {}


def create_template_config(config_path: Optional[Path] = None) -> Path:
    """Create a template configuration file."""
    import toml

    config_path = config_path or get_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)

    defaults = Settings()
    template = {
        "storage": {
            "path": str(config_path.parent / DB_FILENAME),
        },
        "defaults": {
            "starting_capital": defaults.starting_capital,
            "target_capital": defaults.target_capital,
            "weekly_injection": defaults.weekly_injection,
            "current_capital": defaults.current_capital,
        },
        "logging": {
            "level": "WARNING",  # DEBUG, INFO, WARNING or ERROR
        },
    }

    with open(config_path, "w") as f:
        toml.dump(template, f)

    return config_path


def get_db_path(config: dict) -> Path:
    """Get the SQLite database path from config.

    A missing, empty or non-string storage.path falls back to the default.
    """
    storage = config.get("storage")
    path = storage.get("path") if isinstance(storage, dict) else None
    if isinstance(path, str) and path:
        return Path(path).expanduser()
    return get_config_dir() / DB_FILENAME


def get_default_settings(config: dict) -> Settings:
    """Get first-run settings, with config overrides applied."""
    defaults = config.get("defaults", {})
    base = Settings()
    return Settings(
        starting_capital=coerce_float(defaults.get("starting_capital"), base.starting_capital),
        target_capital=coerce_float(defaults.get("target_capital"), base.target_capital),
        weekly_injection=coerce_float(defaults.get("weekly_injection"), base.weekly_injection),
        current_capital=coerce_float(defaults.get("current_capital"), base.current_capital),
    )


def get_log_level(config: dict) -> str:
    level = str(config.get("logging", {}).get("level", "WARNING")).upper()
    if level not in ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"):
        return "WARNING"
    return level


def open_store(config: Optional[dict] = None):
    """Build and initialize the record store described by config.

    Args:
        config: Config dict. Loaded from disk if None.

    Returns:
        An initialized RecordStore.
    """
    from bluelock.db.kv import JsonStorage, SQLiteBackend
    from bluelock.db.store import RecordStore

    if config is None:
        config = load_config()

    storage = JsonStorage(SQLiteBackend(get_db_path(config)))
    store = RecordStore(storage, default_settings=get_default_settings(config))
    return store.initialize()
