"""Input-layer public API for key decoding, intents and event routing.

Exports are split between low-level terminal decoding (`read_key`), intent
normalization (`KeyMap`), and the origin-scoped event bus (`InputSource`).
"""

from .intents import DEFAULT_KEY_BINDINGS, Intent, KeyMap, intent_from_name
from .key_registry import KeyComboBinding, KeyComboRegistry
from .mouse import ControlPlacement, is_click_key, is_mouse_key, mouse_hits_control, resolve_pointer
from .reader import ESC_SEQUENCE_TIMEOUT_MS, _PENDING_BYTES, parse_mouse_col_row, read_key
from .source import (
    FocusLostEvent,
    InputEvent,
    InputSource,
    KeyIntentEvent,
    PointerAction,
    PointerEvent,
    Subscription,
)

__all__ = [
    "read_key",
    "parse_mouse_col_row",
    "_PENDING_BYTES",
    "ESC_SEQUENCE_TIMEOUT_MS",
    "Intent",
    "KeyMap",
    "DEFAULT_KEY_BINDINGS",
    "intent_from_name",
    "KeyComboBinding",
    "KeyComboRegistry",
    "ControlPlacement",
    "is_click_key",
    "is_mouse_key",
    "mouse_hits_control",
    "resolve_pointer",
    "InputEvent",
    "InputSource",
    "KeyIntentEvent",
    "PointerAction",
    "PointerEvent",
    "FocusLostEvent",
    "Subscription",
]
