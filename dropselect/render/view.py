"""Presentation of a selection control as styled terminal lines.

The view reads the controller's presentation contract (``is_open``,
``highlighted_index``, ``is_selected``, ``selection``) and never mutates it.
Alongside the lines it returns the hit regions a pointer handler needs to map
a click back to a badge, the clear button or an option row.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from ..options import Option
from ..selection import Mode
from ..ui_theme import UITheme
from .ansi import display_width, pad_ansi_line

if TYPE_CHECKING:
    from ..controller import SelectionController

FRAME_MARK = "▌ "
BADGE_REMOVE = "×"
CLEAR_BUTTON = "×"
DIVIDER = "│"
CARET_CLOSED = "▾"
CARET_OPEN = "▴"
SELECTED_MARK = "✓"
PLACEHOLDER = "(none)"
MIN_WIDTH = 12


@dataclass(frozen=True)
class BadgeRegion:
    """Half-open column span ``[start, end)`` of one badge on the value row."""

    start: int
    end: int
    option: Option


@dataclass(frozen=True)
class SelectLayout:
    """Hit regions of one rendered frame, in 0-based cells relative to the control."""

    width: int
    is_open: bool
    option_count: int
    badges: tuple[BadgeRegion, ...]
    clear_span: tuple[int, int]

    @property
    def height(self) -> int:
        return 1 + (self.option_count if self.is_open else 0)

    def contains(self, col: int, line: int) -> bool:
        return 0 <= col < self.width and 0 <= line < self.height

    def badge_at(self, col: int) -> Option | None:
        for badge in self.badges:
            if badge.start <= col < badge.end:
                return badge.option
        return None

    def is_clear_button(self, col: int) -> bool:
        start, end = self.clear_span
        return start <= col < end

    def option_index_at(self, line: int) -> int | None:
        """Map a line of the control to an option index when the list is open."""
        if not self.is_open or line < 1:
            return None
        index = line - 1
        return index if index < self.option_count else None


@dataclass(frozen=True)
class RenderedSelect:
    lines: tuple[str, ...]
    layout: SelectLayout


def _value_area(
    controller: SelectionController,
    theme: UITheme,
    origin: int,
    area_width: int,
) -> tuple[str, tuple[BadgeRegion, ...]]:
    """Compose the value text for the control row and its badge spans."""
    if controller.mode is Mode.SINGLE:
        current = controller.selection
        if current is None:
            return f"{theme.placeholder}{PLACEHOLDER}{theme.reset}", ()
        return f"{theme.value_text}{current.label}{theme.reset}", ()

    members = controller.selection
    if not members:
        return f"{theme.placeholder}{PLACEHOLDER}{theme.reset}", ()

    parts: list[str] = []
    badges: list[BadgeRegion] = []
    col = 0
    for option in members:
        badge_width = display_width(option.label) + 2
        parts.append(f"{theme.badge}{option.label} {theme.badge_remove}{BADGE_REMOVE}{theme.reset} ")
        if col + badge_width > area_width:
            # Partially visible badges are drawn but are not clickable.
            break
        badges.append(BadgeRegion(origin + col, origin + col + badge_width, option))
        col += badge_width + 1
    return "".join(parts), tuple(badges)


def render_select(
    controller: SelectionController,
    theme: UITheme,
    width: int,
    *,
    focused: bool = True,
) -> RenderedSelect:
    """Render ``controller`` into at most ``width`` cells per line."""
    width = max(MIN_WIDTH, width)
    caret = CARET_OPEN if controller.is_open else CARET_CLOSED
    frame_style = theme.frame_focused if focused else theme.frame_blurred
    suffix_width = 6
    area_origin = display_width(FRAME_MARK)
    area_width = width - area_origin - suffix_width

    value_text, badges = _value_area(controller, theme, area_origin, area_width)
    clear_col = area_origin + area_width + 1
    control_row = (
        f"{frame_style}{FRAME_MARK}{theme.reset}"
        + pad_ansi_line(value_text, area_width)
        + theme.reset
        + f" {theme.clear_button}{CLEAR_BUTTON}{theme.reset}"
        + f" {theme.divider}{DIVIDER}{theme.reset}"
        + f" {theme.caret}{caret}{theme.reset}"
    )
    lines = [control_row]

    if controller.is_open:
        for index, option in enumerate(controller.options):
            selected = controller.is_selected(option)
            mark = SELECTED_MARK if selected else " "
            text_style = theme.option_selected if selected else theme.option_text
            row = pad_ansi_line(f"  {mark} {option.label}", width)
            if index == controller.highlighted_index:
                lines.append(f"{theme.reverse}{text_style}{row}{theme.reset}")
            else:
                lines.append(f"{text_style}{row}{theme.reset}")

    layout = SelectLayout(
        width=width,
        is_open=controller.is_open,
        option_count=len(controller.options),
        badges=badges,
        clear_span=(clear_col, clear_col + 1),
    )
    return RenderedSelect(lines=tuple(lines), layout=layout)


def render_select_text(controller: SelectionController, theme: UITheme, width: int) -> str:
    """Render one frame as newline-joined text for non-interactive output."""
    rendered = render_select(controller, theme, width, focused=False)
    out: list[str] = []
    for line in rendered.lines:
        out.append(line)
        if "\033" in line:
            out.append("\033[0m")
        out.append("\n")
    return "".join(out)
