"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the control chrome, badges and option list.
Colour escapes come from ``pygments.console`` so palettes stay in terms of
named terminal colours rather than raw SGR numbers.
"""

from __future__ import annotations

from dataclasses import dataclass

from pygments.console import codes

REVERSE = "\033[7m"


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by renderers."""

    name: str
    reset: str
    reverse: str
    frame_focused: str
    frame_blurred: str
    value_text: str
    placeholder: str
    badge: str
    badge_remove: str
    clear_button: str
    divider: str
    caret: str
    option_text: str
    option_selected: str


DEFAULT_THEME = UITheme(
    name="default",
    reset=codes["reset"],
    reverse=REVERSE,
    frame_focused=codes["brightcyan"],
    frame_blurred=codes["faint"],
    value_text=codes["bold"],
    placeholder=codes["faint"],
    badge=codes["brightblue"],
    badge_remove=codes["brightred"],
    clear_button=codes["brightred"],
    divider=codes["faint"],
    caret=codes["brightcyan"],
    option_text="",
    option_selected=codes["bold"] + codes["brightgreen"],
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset=codes["reset"],
    reverse=REVERSE,
    frame_focused=codes["blue"],
    frame_blurred=codes["faint"] + codes["blue"],
    value_text=codes["brightcyan"],
    placeholder=codes["faint"] + codes["cyan"],
    badge=codes["cyan"],
    badge_remove=codes["brightmagenta"],
    clear_button=codes["brightmagenta"],
    divider=codes["faint"] + codes["blue"],
    caret=codes["blue"],
    option_text=codes["cyan"],
    option_selected=codes["bold"] + codes["brightcyan"],
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    reverse="",
    frame_focused="",
    frame_blurred="",
    value_text="",
    placeholder="",
    badge="",
    badge_remove="",
    clear_button="",
    divider="",
    caret="",
    option_text="",
    option_selected="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
