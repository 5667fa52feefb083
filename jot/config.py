"""Persistent JSON config helpers.

Stores the UI theme, the directory-pane width and the hidden-file preference.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from pathlib import Path

from platformdirs import user_config_dir

from .logging_config import get_logger

CONFIG_PATH = Path(user_config_dir("jot", appauthor=False)) / "config.json"

logger = get_logger("config")


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    target = path if path is not None else CONFIG_PATH
    try:
        data = json.loads(target.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object], path: Path | None = None) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem errors are logged and otherwise ignored so an unwritable
    config directory never interrupts editing.
    """
    target = path if path is not None else CONFIG_PATH
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        target.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except OSError as exc:
        logger.warning("cannot write config %s: %s", target, exc)


def load_theme_name(path: Path | None = None) -> str | None:
    value = load_config(path).get("theme")
    return value if isinstance(value, str) and value else None


def load_tree_pane_percent(path: Path | None = None) -> float | None:
    """Read the directory-pane width constrained to the open interval (0, 100)."""
    value = load_config(path).get("tree_pane_percent")
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    if value <= 0 or value >= 100:
        return None
    return float(value)


def load_show_hidden(path: Path | None = None) -> bool:
    """Return persisted hidden-file visibility preference.

    Only explicit boolean values are accepted; anything else falls back to
    ``True``.
    """
    value = load_config(path).get("show_hidden")
    return value if isinstance(value, bool) else True


def save_show_hidden(show_hidden: bool, path: Path | None = None) -> None:
    config = load_config(path)
    config["show_hidden"] = bool(show_hidden)
    save_config(config, path)


__all__ = [
    "CONFIG_PATH",
    "load_config",
    "load_show_hidden",
    "load_theme_name",
    "load_tree_pane_percent",
    "save_config",
    "save_show_hidden",
]
