"""User preferences persistence for the localization editor.

Stores and retrieves settings (preferred group name, last opened folder)
from a JSON file in the user's home directory. Defaults are provided for
all settings.
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

_PREFERENCES_PATH = Path.home() / ".localization_editor.json"

# Group selected after loading a folder, when present
DEFAULT_GROUP_NAME = "Localizable.strings"

# All default preferences combined
DEFAULT_PREFERENCES: Dict[str, Any] = {
    "preferred_group": DEFAULT_GROUP_NAME,
    "last_folder": "",
}


def get_preferred_group(preferences: Dict[str, Any]) -> str:
    """Return the group name to select after a load.

    Args:
        preferences: The loaded preferences dictionary.

    Returns:
        The stored group name, or DEFAULT_GROUP_NAME when unset or invalid.
    """
    stored = preferences.get("preferred_group")
    if not isinstance(stored, str) or not stored.strip():
        return DEFAULT_GROUP_NAME
    return stored


def remember_folder(preferences: Dict[str, Any], folder: Path | str) -> None:
    """Record the most recently loaded folder in preferences.

    Args:
        preferences: Preferences dictionary to update in place.
        folder: Folder that was loaded.
    """
    preferences["last_folder"] = str(folder)


def load_preferences() -> Dict[str, Any]:
    """Return stored user preferences, merged with defaults.

    Missing keys are filled in from DEFAULT_PREFERENCES to ensure
    all expected settings exist.

    Returns:
        A dictionary containing all preference keys with their current values.
    """
    defaults = DEFAULT_PREFERENCES.copy()
    if not _PREFERENCES_PATH.exists():
        return defaults

    try:
        raw = _PREFERENCES_PATH.read_text(encoding="utf-8")
        data = json.loads(raw)
    except (OSError, json.JSONDecodeError):
        return defaults

    if not isinstance(data, dict):
        return defaults

    # Merge stored data with defaults (stored values take precedence)
    result = defaults.copy()
    for key, value in data.items():
        result[key] = value

    return result


def save_preferences(preferences: Dict[str, Any]) -> None:
    """Persist user preferences to disk.

    Args:
        preferences: The complete preferences dictionary to save.
    """
    try:
        _PREFERENCES_PATH.parent.mkdir(parents=True, exist_ok=True)
        serialized = json.dumps(preferences, indent=2, sort_keys=True)
        _PREFERENCES_PATH.write_text(serialized, encoding="utf-8")
    except OSError:
        pass


__all__ = [
    "load_preferences",
    "save_preferences",
    "get_preferred_group",
    "remember_folder",
    "DEFAULT_GROUP_NAME",
    "DEFAULT_PREFERENCES",
]
