"""Rendering for the terminal selection control.

``render_select`` builds one styled frame plus hit regions; the ANSI helpers
keep widths aligned when labels carry colour codes or wide characters.
"""

from __future__ import annotations

from .ansi import ANSI_ESCAPE_RE, clip_ansi_line, display_width, pad_ansi_line
from .view import BadgeRegion, RenderedSelect, SelectLayout, render_select, render_select_text

__all__ = [
    "ANSI_ESCAPE_RE",
    "clip_ansi_line",
    "display_width",
    "pad_ansi_line",
    "BadgeRegion",
    "RenderedSelect",
    "SelectLayout",
    "render_select",
    "render_select_text",
]
