"""Settings: optional JSON overrides for the data directory and trigger phrases."""
from __future__ import annotations

from functools import lru_cache
from pathlib import Path
import json
import logging
from typing import Any, Dict

_CONFIG_PATH = Path(__file__).with_name("name_days.json")
_DEFAULT_DATA_DIR = Path(__file__).with_name("data")

DEFAULT_TRIGGERS = (
    "name day", "name days", "nameday", "namedays",
    "imieniny", "jmeniny", "svátek",
)


def _default_settings() -> Dict[str, Any]:
    return {
        "data_dir": _DEFAULT_DATA_DIR,
        "triggers": DEFAULT_TRIGGERS,
    }


def read_settings(path: Path) -> Dict[str, Any]:
    """Merge the JSON file at `path` over the defaults, ignoring bad values."""
    base = _default_settings()
    path = Path(path)
    if not path.exists():
        return base
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except Exception:
        logging.exception("Failed to read settings from %s, using defaults", path)
        return base
    if not isinstance(raw, dict):
        logging.warning("Settings file %s is not a JSON object, using defaults", path)
        return base

    data_dir = raw.get("data_dir")
    if isinstance(data_dir, str) and data_dir.strip():
        candidate = Path(data_dir.strip()).expanduser()
        # relative paths are taken from the settings file's directory
        base["data_dir"] = candidate if candidate.is_absolute() else path.parent / candidate

    raw_triggers = raw.get("triggers")
    triggers = []
    for item in raw_triggers if isinstance(raw_triggers, list) else []:
        if isinstance(item, str) and item.strip():
            triggers.append(" ".join(item.lower().split()))
    if triggers:
        base["triggers"] = tuple(triggers)
    return base


@lru_cache(maxsize=1)
def load_settings() -> Dict[str, Any]:
    return read_settings(_CONFIG_PATH)
