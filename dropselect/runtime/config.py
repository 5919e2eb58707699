"""Persistent JSON config helpers.

Stores the UI theme, extra key bindings, and the default selection mode.
All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from platformdirs import user_config_dir

from ..input.intents import intent_from_name
from ..ui_theme import normalize_theme_name

logger = logging.getLogger(__name__)

APP_NAME = "dropselect"
CONFIG_FILENAME = "config.json"
DEFAULT_CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
CONFIG_PATH = DEFAULT_CONFIG_PATH


def load_config() -> dict[str, object]:
    """Load the persisted JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        logger.debug("config %s not loaded: %s", CONFIG_PATH, exc)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON.

    Filesystem/serialization errors are logged and otherwise ignored so a
    read-only config directory never interrupts an interactive session.
    """
    try:
        CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
        CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")
    except (OSError, TypeError, ValueError) as exc:
        logger.debug("config %s not saved: %s", CONFIG_PATH, exc)


def load_theme_name() -> str | None:
    """Load persisted UI theme name, returning ``None`` when unset/invalid."""
    value = load_config().get("theme")
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped if stripped else None


def save_theme_name(theme_name: str) -> None:
    """Persist selected UI theme name in normalized form."""
    stripped = str(theme_name).strip()
    if not stripped:
        return
    config = load_config()
    config["theme"] = normalize_theme_name(stripped)
    save_config(config)


def load_key_bindings() -> dict[str, list[str]]:
    """Load extra key bindings keyed by intent name.

    Unknown intent names, non-list values and non-string or empty tokens are
    dropped.
    """
    value = load_config().get("key_bindings")
    if not isinstance(value, dict):
        return {}

    bindings: dict[str, list[str]] = {}
    for name, tokens in value.items():
        if not isinstance(name, str) or intent_from_name(name) is None:
            continue
        if not isinstance(tokens, list):
            continue
        cleaned = [token for token in tokens if isinstance(token, str) and token]
        if cleaned:
            bindings[name.strip().lower()] = cleaned
    return bindings


def load_default_multiple() -> bool:
    """Return persisted default for multi-select mode.

    Only explicit boolean values are accepted; anything else means ``False``.
    """
    value = load_config().get("multiple")
    return bool(value) if isinstance(value, bool) else False


def save_default_multiple(multiple: bool) -> None:
    """Persist default multi-select mode as a boolean."""
    config = load_config()
    config["multiple"] = bool(multiple)
    save_config(config)
