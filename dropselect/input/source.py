"""Origin-scoped input events and the bus that delivers them.

An :class:`InputSource` forwards an event only to the control whose id
matches the event's origin. Events produced while no control holds focus
carry ``origin=None`` and are dropped before any controller sees them.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum

from ..options import Option
from .intents import Intent

logger = logging.getLogger(__name__)


class PointerAction(Enum):
    """Pointer gestures a rendered control can report."""

    CONTAINER_CLICK = "container_click"
    OPTION_CLICK = "option_click"
    OPTION_HOVER = "option_hover"
    BADGE_CLICK = "badge_click"
    CLEAR_CLICK = "clear_click"


@dataclass(frozen=True)
class KeyIntentEvent:
    origin: str | None
    intent: Intent


@dataclass(frozen=True)
class PointerEvent:
    origin: str | None
    action: PointerAction
    index: int | None = None
    option: Option | None = None


@dataclass(frozen=True)
class FocusLostEvent:
    origin: str | None


InputEvent = KeyIntentEvent | PointerEvent | FocusLostEvent
EventHandler = Callable[[InputEvent], None]


class Subscription:
    """Handle for one control's registration on an :class:`InputSource`."""

    def __init__(self, source: InputSource, control_id: str) -> None:
        self.source = source
        self.control_id = control_id
        self._active = True

    @property
    def active(self) -> bool:
        return self._active

    def close(self) -> None:
        """Deregister from the source; calling twice is harmless."""
        if not self._active:
            return
        self._active = False
        self.source._release(self.control_id)

    def __enter__(self) -> Subscription:
        return self

    def __exit__(self, *_exc_info) -> None:
        self.close()


class InputSource:
    """Named event bus delivering each event to the control it originated from."""

    def __init__(self, name: str) -> None:
        self.name = name
        self._handlers: dict[str, EventHandler] = {}

    def subscribe(self, control_id: str, handler: EventHandler) -> Subscription:
        """Register ``handler`` for events whose origin is ``control_id``."""
        if control_id in self._handlers:
            raise ValueError(f"control {control_id!r} is already subscribed to {self.name!r}")
        self._handlers[control_id] = handler
        logger.debug("source %s: subscribed %s", self.name, control_id)
        return Subscription(self, control_id)

    def _release(self, control_id: str) -> None:
        self._handlers.pop(control_id, None)
        logger.debug("source %s: released %s", self.name, control_id)

    def is_subscribed(self, control_id: str) -> bool:
        return control_id in self._handlers

    def publish(self, event: InputEvent) -> bool:
        """Deliver ``event`` to its origin's handler; return whether it was delivered."""
        origin = event.origin
        handler = self._handlers.get(origin) if origin is not None else None
        if handler is None:
            logger.debug("source %s: dropped %s from %r", self.name, type(event).__name__, origin)
            return False
        handler(event)
        return True


__all__ = [
    "PointerAction",
    "KeyIntentEvent",
    "PointerEvent",
    "FocusLostEvent",
    "InputEvent",
    "EventHandler",
    "Subscription",
    "InputSource",
]
