"""Normalized keyboard intents and key-token mapping.

Raw key tokens (``ENTER_CR``, ``UP``, ``ESC``...) are reduced to the four
intents the selection controller understands before they reach it.
"""

from __future__ import annotations

import logging
from collections.abc import Collection, Mapping, Sequence
from enum import Enum

from .key_registry import KeyComboBinding, KeyComboRegistry

logger = logging.getLogger(__name__)


class Intent(Enum):
    """Keyboard input alphabet consumed by :class:`SelectionController`."""

    CONFIRM = "confirm"
    UP = "up"
    DOWN = "down"
    DISMISS = "dismiss"


DEFAULT_KEY_BINDINGS: tuple[KeyComboBinding[Intent], ...] = (
    KeyComboBinding(("ENTER_CR", "ENTER_LF", " "), Intent.CONFIRM),
    KeyComboBinding(("UP", "k"), Intent.UP),
    KeyComboBinding(("DOWN", "j"), Intent.DOWN),
    KeyComboBinding(("ESC",), Intent.DISMISS),
)


def intent_from_name(name: str) -> Intent | None:
    """Resolve a config-style intent name (``"confirm"``) to an :class:`Intent`."""
    candidate = str(name).strip().lower()
    for intent in Intent:
        if intent.value == candidate:
            return intent
    return None


class KeyMap:
    """Key-token to intent lookup with default and user bindings.

    Tokens in ``reserved`` belong to the host loop and are
    never bound from user bindings.
    """

    def __init__(
        self,
        extra_bindings: Mapping[str, Sequence[str]] | None = None,
        *,
        reserved: Collection[str] = (),
    ) -> None:
        self._registry: KeyComboRegistry[Intent] = KeyComboRegistry()
        self._registry.register_bindings(*DEFAULT_KEY_BINDINGS)
        if extra_bindings:
            for name, tokens in extra_bindings.items():
                intent = intent_from_name(name)
                if intent is None:
                    continue
                combos: list[str] = []
                for token in tokens:
                    if not isinstance(token, str) or not token:
                        continue
                    if token in reserved:
                        logger.warning("key %r is reserved; ignoring binding to %s", token, intent.value)
                        continue
                    combos.append(token)
                if combos:
                    self._registry.register_binding(KeyComboBinding(tuple(combos), intent))

    def intent_for(self, key: str) -> Intent | None:
        """Return the intent bound to ``key`` or ``None`` when unmapped."""
        return self._registry.lookup(key)

    def keys_for(self, intent: Intent) -> tuple[str, ...]:
        """Return every key token currently bound to ``intent``."""
        return tuple(key for key in self._registry.combos() if self._registry.lookup(key) is intent)


__all__ = ["Intent", "DEFAULT_KEY_BINDINGS", "KeyMap", "intent_from_name"]
