"""Main interactive event loop for the terminal selection control.

Coordinates rendering, focus tracking, and input dispatch. Every key or
mouse token is turned into an event and published on the input source;
the source delivers it only while the control holds focus.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass

from ..controller import SelectionController
from ..input import read_key
from ..input.intents import KeyMap
from ..input.mouse import ControlPlacement, is_click_key, is_mouse_key, mouse_hits_control, resolve_pointer
from ..input.source import FocusLostEvent, InputSource, KeyIntentEvent
from ..render import RenderedSelect, SelectLayout, render_select
from ..ui_theme import UITheme
from .terminal import TerminalController

logger = logging.getLogger(__name__)

ACCEPT_KEYS = frozenset({"q"})
ABORT_KEYS = frozenset({"\x03"})
FOCUS_KEY = "TAB"
RESERVED_KEYS = ACCEPT_KEYS | ABORT_KEYS | {FOCUS_KEY}
HINT_TEXT = "Enter/Space open/pick  Up/Down move  Esc close  Tab focus  q accept  Ctrl-C abort"


@dataclass(frozen=True)
class RuntimeLoopTiming:
    """Timing constants controlling interactive loop behavior."""

    read_timeout_ms: int = 250


@dataclass
class LoopState:
    """Host-side bookkeeping that is not part of the control's own state."""

    focused: bool = True
    dirty: bool = True
    columns: int = 0
    layout: SelectLayout | None = None


def compose_frame(rendered: RenderedSelect, placement: ControlPlacement, theme: UITheme) -> str:
    """Build a full-screen frame string with the control at ``placement``."""
    out: list[str] = ["\033[H\033[2J"]
    indent = " " * max(0, placement.col - 1)
    for offset, line in enumerate(rendered.lines):
        out.append(f"\033[{placement.row + offset};1H{indent}{line}")
    hint_row = placement.row + len(rendered.lines) + 1
    out.append(f"\033[{hint_row};1H{indent}{theme.placeholder}{HINT_TEXT}{theme.reset}")
    return "".join(out)


def handle_loop_key(
    key: str,
    state: LoopState,
    controller: SelectionController,
    source: InputSource,
    keymap: KeyMap,
    placement: ControlPlacement,
) -> bool | None:
    """Apply one key token; return ``True`` to accept, ``False`` to abort."""
    control_id = controller.control_id
    if key in ABORT_KEYS:
        return False
    if key in ACCEPT_KEYS:
        return True

    if key == FOCUS_KEY:
        if state.focused:
            source.publish(FocusLostEvent(control_id))
        state.focused = not state.focused
        state.dirty = True
        return None

    if is_mouse_key(key):
        layout = state.layout
        if layout is None:
            return None
        inside = mouse_hits_control(key, layout, placement)
        if is_click_key(key):
            if not inside:
                if state.focused:
                    source.publish(FocusLostEvent(control_id))
                    state.focused = False
                    state.dirty = True
                return None
            if not state.focused:
                state.focused = True
                state.dirty = True
        pointer = resolve_pointer(key, layout, placement, control_id if state.focused else None)
        if pointer is not None and source.publish(pointer):
            state.dirty = True
        return None

    intent = keymap.intent_for(key)
    if intent is None:
        return None
    if source.publish(KeyIntentEvent(control_id if state.focused else None, intent)):
        state.dirty = True
    return None


def run_select_loop(
    controller: SelectionController,
    terminal: TerminalController,
    stdin_fd: int,
    source: InputSource,
    keymap: KeyMap,
    theme: UITheme,
    *,
    placement: ControlPlacement | None = None,
    timing: RuntimeLoopTiming | None = None,
) -> bool:
    """Run the interactive loop until the user accepts or aborts.

    Returns ``True`` when the selection was accepted and ``False`` on abort.
    """
    placement = placement or ControlPlacement()
    timing = timing or RuntimeLoopTiming()
    state = LoopState()

    with terminal.raw_mode():
        terminal.set_mouse_reporting(True)
        while True:
            columns = shutil.get_terminal_size((80, 24)).columns
            if columns != state.columns:
                state.columns = columns
                state.dirty = True
            if state.dirty:
                rendered = render_select(
                    controller,
                    theme,
                    columns - (placement.col - 1),
                    focused=state.focused,
                )
                state.layout = rendered.layout
                terminal.write(compose_frame(rendered, placement, theme))
                state.dirty = False

            try:
                key = read_key(stdin_fd, timeout_ms=timing.read_timeout_ms)
            except KeyboardInterrupt:
                continue
            if not key:
                continue

            outcome = handle_loop_key(key, state, controller, source, keymap, placement)
            if outcome is not None:
                logger.debug("loop finished: %s", "accepted" if outcome else "aborted")
                return outcome
