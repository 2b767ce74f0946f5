"""JSON-based settings persistence for the date picker."""

import json
import logging
import os

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".mini-date-picker-settings.json")

_DEFAULTS = {
    "date_format": "{month}/{day}/{year}",
    "highlight_today": True,
    "fields": ["Start date", "End date"],
    "log_level": "WARNING",
    "tray_icon": True,
}


def load_settings() -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    settings["fields"] = list(_DEFAULTS["fields"])
    try:
        with open(_SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as exc:
        logger.warning("Ignoring unreadable settings file %s: %s", _SETTINGS_PATH, exc)
        return settings
    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file %s: not a JSON object", _SETTINGS_PATH)
        return settings

    for key in ("highlight_today", "tray_icon"):
        if key in stored and isinstance(stored[key], bool):
            settings[key] = stored[key]
    for key in ("date_format", "log_level"):
        if key in stored and isinstance(stored[key], str):
            settings[key] = stored[key]
    if "fields" in stored and isinstance(stored["fields"], list):
        settings["fields"] = [k for k in stored["fields"] if isinstance(k, str)]
    return settings


def save_settings(settings: dict) -> None:
    """Persist settings to disk."""
    with open(_SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
