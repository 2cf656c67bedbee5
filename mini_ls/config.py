"""Optional JSON preferences for listing presentation.

Holds icon overrides and the color toggle. Access is defensive: a missing,
unreadable, or malformed file falls back to defaults, and each key is
validated on its own so one bad value does not discard the rest.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "mini-ls"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

FILE_ICON = "\U0001F4BE"
DIRECTORY_ICON = "\U0001F4C1"
OTHER_ICON = "❓"


@dataclass(frozen=True)
class Preferences:
    color: bool = True
    file_icon: str = FILE_ICON
    directory_icon: str = DIRECTORY_ICON
    other_icon: str = OTHER_ICON


def load_config() -> dict[str, object]:
    """Load the preferences JSON object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _load_icon(data: dict[str, object], key: str, default: str) -> str:
    """Read an icon override; only non-empty single-line strings are accepted."""
    value = data.get(key)
    if not isinstance(value, str) or not value.strip() or "\n" in value:
        return default
    return value


def load_preferences() -> Preferences:
    """Return presentation preferences merged over the defaults."""
    data = load_config()
    color = data.get("color")
    return Preferences(
        color=color if isinstance(color, bool) else True,
        file_icon=_load_icon(data, "file_icon", FILE_ICON),
        directory_icon=_load_icon(data, "directory_icon", DIRECTORY_ICON),
        other_icon=_load_icon(data, "other_icon", OTHER_ICON),
    )


__all__ = [
    "CONFIG_PATH",
    "FILE_ICON",
    "DIRECTORY_ICON",
    "OTHER_ICON",
    "Preferences",
    "load_config",
    "load_preferences",
]
