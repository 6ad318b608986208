"""Persistent JSON config helpers.

Reads input timing, quit confirmation count, message lifetime, theme and
logging preferences. The file is edited by hand; the editor never writes it.
All access is defensive: malformed or missing config falls back to defaults.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "simpad"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME

DEFAULT_KEY_TIMEOUT_MS = 100
DEFAULT_QUIT_TIMES = 1
DEFAULT_MESSAGE_SECONDS = 5.0


@dataclass(frozen=True)
class EditorSettings:
    """Resolved editor preferences with defaults applied."""

    key_timeout_ms: int = DEFAULT_KEY_TIMEOUT_MS
    quit_times: int = DEFAULT_QUIT_TIMES
    message_seconds: float = DEFAULT_MESSAGE_SECONDS
    theme: str | None = None
    logging: dict[str, object] = field(default_factory=dict)


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except Exception:
        return {}
    return data if isinstance(data, dict) else {}


def _coerce_int(value: object, default: int, minimum: int) -> int:
    """Accept real integers at or above ``minimum``; booleans are rejected."""
    if isinstance(value, bool) or not isinstance(value, int):
        return default
    if value < minimum:
        return default
    return value


def _coerce_positive_float(value: object, default: float) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return default
    if value <= 0:
        return default
    return float(value)


def load_theme_name(data: dict[str, object]) -> str | None:
    """Extract the configured UI theme name, returning ``None`` when unset/invalid."""
    value = data.get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def load_settings() -> EditorSettings:
    """Read the config file once and normalize every known key."""
    data = load_config()
    logging_section = data.get("logging")
    return EditorSettings(
        key_timeout_ms=_coerce_int(data.get("key_timeout_ms"), DEFAULT_KEY_TIMEOUT_MS, 1),
        quit_times=_coerce_int(data.get("quit_times"), DEFAULT_QUIT_TIMES, 0),
        message_seconds=_coerce_positive_float(data.get("message_seconds"), DEFAULT_MESSAGE_SECONDS),
        theme=load_theme_name(data),
        logging=dict(logging_section) if isinstance(logging_section, dict) else {},
    )
