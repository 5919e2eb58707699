"""Mouse routing from terminal tokens to control pointer events."""

from __future__ import annotations

from dataclasses import dataclass

from ..render.view import SelectLayout
from .reader import parse_mouse_col_row
from .source import PointerAction, PointerEvent


@dataclass(frozen=True)
class ControlPlacement:
    """Screen position of a control's top-left cell (1-based terminal coords)."""

    col: int = 1
    row: int = 1

    def to_local(self, col: int, row: int) -> tuple[int, int]:
        return col - self.col, row - self.row


def is_mouse_key(key: str) -> bool:
    return key.startswith("MOUSE")


def is_click_key(key: str) -> bool:
    return key.startswith("MOUSE_LEFT_DOWN:")


def mouse_hits_control(key: str, layout: SelectLayout, placement: ControlPlacement) -> bool:
    """Return whether a mouse token lands inside the rendered control."""
    col, row = parse_mouse_col_row(key)
    if col is None or row is None:
        return False
    local_col, local_line = placement.to_local(col, row)
    return layout.contains(local_col, local_line)


def resolve_pointer(
    key: str,
    layout: SelectLayout,
    placement: ControlPlacement,
    origin: str | None,
) -> PointerEvent | None:
    """Translate a mouse token into a pointer event for the control, if any.

    Left clicks on the value row hit a badge, the clear button or the
    container; clicks on list rows pick an option. Motion over list rows
    becomes a hover. Releases, wheel events and misses yield ``None``.
    """
    is_click = is_click_key(key)
    is_move = key.startswith("MOUSE_MOVE:")
    if not (is_click or is_move):
        return None
    col, row = parse_mouse_col_row(key)
    if col is None or row is None:
        return None
    local_col, local_line = placement.to_local(col, row)
    if not layout.contains(local_col, local_line):
        return None

    index = layout.option_index_at(local_line)
    if is_move:
        if index is None:
            return None
        return PointerEvent(origin, PointerAction.OPTION_HOVER, index=index)

    if index is not None:
        return PointerEvent(origin, PointerAction.OPTION_CLICK, index=index)
    if local_line != 0:
        return None
    badge = layout.badge_at(local_col)
    if badge is not None:
        return PointerEvent(origin, PointerAction.BADGE_CLICK, option=badge)
    if layout.is_clear_button(local_col):
        return PointerEvent(origin, PointerAction.CLEAR_CLICK)
    return PointerEvent(origin, PointerAction.CONTAINER_CLICK)
