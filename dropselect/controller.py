"""Selection-and-navigation state machine for one dropdown control.

``SelectionController`` is the single writer of the control's state triple:
whether the list is open, which option is highlighted, and what is selected.
Keyboard intents, pointer actions and focus loss all funnel into the
operations defined here. Committed selection changes are reported to a value
sink; everything else is read back by a presentation layer through
``is_open``, ``highlighted_index`` and ``is_selected``.

No operation raises for out-of-domain input. Out-of-range highlights,
redundant selections and redundant clears are silent no-ops and never reach
the sink.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from .input.intents import Intent
from .input.source import (
    FocusLostEvent,
    InputEvent,
    InputSource,
    KeyIntentEvent,
    PointerAction,
    PointerEvent,
    Subscription,
)
from .options import Option
from .selection import Mode, MultipleSelection, Selection, SingleSelection, selection_for_mode

logger = logging.getLogger(__name__)

SelectionValue = Option | None | tuple[Option, ...]
ValueSink = Callable[[SelectionValue], None]


class SelectionController:
    """Own open/highlight/selection state and apply every mutation to it."""

    def __init__(
        self,
        options: Sequence[Option],
        selection: Selection,
        on_change: ValueSink,
        *,
        input_source: InputSource | None = None,
        control_id: str | None = None,
    ) -> None:
        self.options: tuple[Option, ...] = tuple(options)
        for member in _selected_members(selection):
            if member not in self.options:
                raise ValueError(f"initial selection {member!r} is not one of the options")
        self._selection = selection
        self._on_change = on_change
        self.is_open = False
        self.highlighted_index = 0
        self.control_id = control_id
        self._subscription: Subscription | None = None
        if input_source is not None:
            if control_id is None:
                raise ValueError("control_id is required when subscribing to an input source")
            self._subscription = input_source.subscribe(control_id, self.handle_event)

    @classmethod
    def single(
        cls,
        options: Sequence[Option],
        on_change: ValueSink,
        value: Option | None = None,
        **kwargs,
    ) -> SelectionController:
        """Build a single-select controller."""
        return cls(options, selection_for_mode(Mode.SINGLE, value), on_change, **kwargs)

    @classmethod
    def multiple(
        cls,
        options: Sequence[Option],
        on_change: ValueSink,
        value: Sequence[Option] = (),
        **kwargs,
    ) -> SelectionController:
        """Build a multi-select controller."""
        return cls(options, selection_for_mode(Mode.MULTIPLE, value), on_change, **kwargs)

    @property
    def mode(self) -> Mode:
        """Selection shape chosen at construction."""
        return self._selection.mode

    @property
    def selection(self) -> SelectionValue:
        """Current selection: ``Option | None`` or a tuple of options."""
        return self._selection.value

    # Subscription lifecycle

    @property
    def subscribed(self) -> bool:
        """Whether the input-source registration is still held."""
        return self._subscription is not None and self._subscription.active

    def close_subscription(self) -> None:
        """Release the input-source registration taken at construction."""
        if self._subscription is not None:
            self._subscription.close()
            self._subscription = None

    def __enter__(self) -> SelectionController:
        return self

    def __exit__(self, *_exc_info) -> None:
        self.close_subscription()

    # Open/highlight state

    def toggle_open(self) -> None:
        """Flip the open state; opening resets the highlight to the first option."""
        self.is_open = not self.is_open
        if self.is_open:
            self.highlighted_index = 0
        logger.debug("%s: %s", self._name(), "opened" if self.is_open else "closed")

    def open(self) -> None:
        """Open the list if it is closed."""
        if not self.is_open:
            self.toggle_open()

    def close(self) -> None:
        """Close the list; the highlight and selection are kept."""
        if self.is_open:
            logger.debug("%s: closed", self._name())
        self.is_open = False

    def set_highlighted(self, index: int) -> None:
        """Move the highlight to ``index``; out-of-range requests are ignored."""
        if 0 <= index < len(self.options):
            self.highlighted_index = index

    # Selection

    def is_selected(self, option: Option) -> bool:
        """Return whether ``option`` is part of the current selection."""
        return self._selection.contains(option)

    def select_option(self, option: Option) -> None:
        """Choose ``option`` (single mode) or toggle its membership (multiple mode).

        Single mode skips the sink when ``option`` is already selected;
        multiple mode always reports the full updated tuple.
        """
        updated = self._selection.toggled(option)
        if updated is None:
            return
        self._commit(updated)

    def clear_selection(self) -> None:
        """Reset to no selection; a clear of an empty selection is a no-op."""
        if self._selection.is_empty:
            return
        self._commit(self._selection.cleared())

    def _commit(self, updated: Selection) -> None:
        self._selection = updated
        logger.debug("%s: selection -> %r", self._name(), updated.value)
        self._on_change(updated.value)

    # Keyboard

    def handle_intent(self, intent: Intent) -> None:
        """Apply one normalized keyboard intent."""
        if intent is Intent.CONFIRM:
            # Commit and toggle happen on the same press.
            if self.is_open and self.options:
                self.select_option(self.options[self.highlighted_index])
            self.toggle_open()
            return
        if intent is Intent.UP or intent is Intent.DOWN:
            if not self.is_open:
                self.toggle_open()
                return
            step = 1 if intent is Intent.DOWN else -1
            self.set_highlighted(self.highlighted_index + step)
            return
        if intent is Intent.DISMISS:
            self.close()

    # Pointer

    def handle_pointer(
        self,
        action: PointerAction,
        index: int | None = None,
        option: Option | None = None,
    ) -> None:
        """Apply one pointer action reported by the presentation layer."""
        if action is PointerAction.CONTAINER_CLICK:
            self.toggle_open()
            return
        if action is PointerAction.OPTION_CLICK:
            if index is None or not 0 <= index < len(self.options):
                return
            self.select_option(self.options[index])
            self.close()
            return
        if action is PointerAction.OPTION_HOVER:
            if index is not None:
                self.set_highlighted(index)
            return
        if action is PointerAction.BADGE_CLICK:
            if option is not None:
                self.select_option(option)
            return
        if action is PointerAction.CLEAR_CLICK:
            self.clear_selection()

    def handle_event(self, event: InputEvent) -> None:
        """Dispatch an event delivered by the input source."""
        if isinstance(event, KeyIntentEvent):
            self.handle_intent(event.intent)
        elif isinstance(event, PointerEvent):
            self.handle_pointer(event.action, index=event.index, option=event.option)
        elif isinstance(event, FocusLostEvent):
            self.close()

    def _name(self) -> str:
        return self.control_id or f"select@{id(self):x}"


def _selected_members(selection: Selection) -> tuple[Option, ...]:
    if isinstance(selection, MultipleSelection):
        return selection.members
    if isinstance(selection, SingleSelection) and selection.current is not None:
        return (selection.current,)
    return ()


__all__ = ["SelectionController", "SelectionValue", "ValueSink"]
