"""JSON-based settings persistence for the shift calendar."""

import json
import logging
import os

logger = logging.getLogger(__name__)

_SETTINGS_PATH = os.path.join(os.path.expanduser("~"), ".shift-calendar-settings.json")

_DEFAULTS = {
    "window_width": None,
    "window_height": None,
    "start_hidden": False,
    "show_tray": True,
    "log_level": "INFO",
}


def load_settings() -> dict:
    """Load settings from disk, returning defaults for missing keys."""
    settings = dict(_DEFAULTS)
    try:
        with open(_SETTINGS_PATH, "r", encoding="utf-8") as f:
            stored = json.load(f)
    except FileNotFoundError:
        return settings
    except (json.JSONDecodeError, OSError) as e:
        logger.warning("Ignoring unreadable settings file %s: %s", _SETTINGS_PATH, e)
        return settings

    if not isinstance(stored, dict):
        logger.warning("Ignoring settings file %s: not a JSON object", _SETTINGS_PATH)
        return settings
    for key in ("window_width", "window_height"):
        if key in stored and isinstance(stored[key], int) and not isinstance(stored[key], bool):
            settings[key] = stored[key]
    for key in ("start_hidden", "show_tray"):
        if key in stored and isinstance(stored[key], bool):
            settings[key] = stored[key]
    if "log_level" in stored and isinstance(stored["log_level"], str):
        settings["log_level"] = stored["log_level"].upper()
    return settings


def save_settings(settings: dict) -> None:
    """Persist settings to disk."""
    with open(_SETTINGS_PATH, "w", encoding="utf-8") as f:
        json.dump(settings, f, indent=2)
