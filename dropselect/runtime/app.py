"""Runtime composition layer for dropselect.

Builds the controller, input source and key map, then runs the terminal loop.
"""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from ..controller import SelectionController, SelectionValue
from ..input.intents import KeyMap
from ..input.source import InputSource
from ..options import Option
from ..ui_theme import resolve_theme
from .config import load_key_bindings, load_theme_name
from .loop import RESERVED_KEYS, run_select_loop
from .terminal import TerminalController

CONTROL_ID = "select"
SOURCE_NAME = "terminal"


@dataclass(frozen=True)
class SessionResult:
    """Outcome of one interactive session."""

    accepted: bool
    selection: SelectionValue
    changes: int


def run_select(
    options: Sequence[Option],
    *,
    multiple: bool = False,
    initial: Option | Sequence[Option] | None = None,
    theme_name: str | None = None,
    no_color: bool = False,
    start_open: bool = False,
) -> SessionResult:
    """Run an interactive selection on the controlling terminal.

    ``start_open`` shows the option list before the first key is read.
    ``changes`` in the result counts value-sink notifications.
    """
    stdin_fd = sys.stdin.fileno()
    stdout_fd = sys.stdout.fileno()
    if not os.isatty(stdin_fd) or not os.isatty(stdout_fd):
        raise SystemExit("Interactive selection requires a TTY (use --render for static output).")

    changes: list[SelectionValue] = []
    source = InputSource(SOURCE_NAME)
    if multiple:
        members = () if initial is None else tuple(initial)  # type: ignore[arg-type]
        controller = SelectionController.multiple(
            options, changes.append, members, input_source=source, control_id=CONTROL_ID
        )
    else:
        controller = SelectionController.single(
            options, changes.append, initial, input_source=source, control_id=CONTROL_ID  # type: ignore[arg-type]
        )

    if start_open:
        controller.open()

    keymap = KeyMap(load_key_bindings(), reserved=RESERVED_KEYS)
    theme = resolve_theme(theme_name if theme_name is not None else load_theme_name(), no_color=no_color)
    terminal = TerminalController(stdin_fd, stdout_fd)
    with controller:
        accepted = run_select_loop(controller, terminal, stdin_fd, source, keymap, theme)
    return SessionResult(accepted=accepted, selection=controller.selection, changes=len(changes))
