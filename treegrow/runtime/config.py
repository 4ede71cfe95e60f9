"""Persistent JSON config helpers.

Stores animation speed, click policy, scan options, theme, pane split and the
size-label toggle. All access is defensive: malformed or missing config falls
back to defaults.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from .state import CLICK_POLICIES

log = logging.getLogger(__name__)

APP_NAME = "treegrow"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


def load_config() -> dict[str, object]:
    """Return the stored settings object, or ``{}`` for anything but a JSON object."""
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as exc:
        log.debug("ignoring unreadable config %s: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON; write failures are logged only."""
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        log.warning("could not write config %s: %s", CONFIG_PATH, exc)


def _load_bool(key: str, default: bool) -> bool:
    value = load_config().get(key)
    return value if isinstance(value, bool) else default


def load_tick_interval_ms() -> int | None:
    """Return the growth tick interval in milliseconds, if configured."""
    value = load_config().get("tick_interval_ms")
    if isinstance(value, bool) or not isinstance(value, int) or value <= 0:
        return None
    return value


def load_click_policy() -> str | None:
    value = load_config().get("click_policy")
    if isinstance(value, str) and value.strip().lower() in CLICK_POLICIES:
        return value.strip().lower()
    return None


def load_show_files() -> bool:
    """Whether file nodes are kept in the tree (folders only by default)."""
    return _load_bool("show_files", False)


def load_show_hidden() -> bool:
    """Whether dot-entries are scanned (shown by default)."""
    return _load_bool("show_hidden", True)


def load_theme_name() -> str | None:
    value = load_config().get("theme")
    if isinstance(value, str) and value.strip():
        return value.strip()
    return None


def load_left_pane_percent() -> float | None:
    """Read the tree-pane width percentage constrained to ``(0, 100)``."""
    value = load_config().get("left_pane_percent")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if value <= 0 or value >= 100:
        return None
    return float(value)


def load_show_size_labels() -> bool:
    return _load_bool("show_size_labels", False)


def save_show_size_labels(show_size_labels: bool) -> None:
    """Persist the tree size-label toggle as a boolean."""
    config = load_config()
    config["show_size_labels"] = bool(show_size_labels)
    save_config(config)
