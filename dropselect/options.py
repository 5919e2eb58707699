"""Option records and option-spec parsing.

An option is an immutable ``(label, value)`` pair. Specs come from the CLI
or an options file as ``label`` or ``label=value`` strings.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

OptionValue = str | int | float

_INT_RE = re.compile(r"[+-]?\d+")
_FLOAT_RE = re.compile(r"[+-]?(\d+\.\d*|\.\d+)")


@dataclass(frozen=True)
class Option:
    """One labeled, valued entry of the selectable list."""

    label: str
    value: OptionValue


def coerce_value(raw: str) -> OptionValue:
    """Return ``raw`` as int/float when it is purely numeric, else unchanged."""
    text = raw.strip()
    if _INT_RE.fullmatch(text):
        return int(text)
    if _FLOAT_RE.fullmatch(text):
        return float(text)
    return raw


def parse_option_spec(spec: str) -> Option:
    """Parse ``label`` or ``label=value`` into an :class:`Option`.

    A bare label uses itself as value. Raises ``ValueError`` for an empty
    label.
    """
    label, sep, raw_value = spec.partition("=")
    label = label.strip()
    if not label:
        raise ValueError(f"option label must not be empty: {spec!r}")
    if not sep:
        return Option(label=label, value=label)
    raw_value = raw_value.strip()
    return Option(label=label, value=coerce_value(raw_value) if raw_value else label)


def parse_option_lines(lines: Iterable[str]) -> list[Option]:
    """Parse one option spec per non-blank line; ``#`` lines are comments."""
    out: list[Option] = []
    for line in lines:
        stripped = line.strip()
        if not stripped or stripped.startswith("#"):
            continue
        out.append(parse_option_spec(stripped))
    return out


def find_option(options: Iterable[Option], needle: str) -> Option | None:
    """Find an option by exact label, then by value rendered as text."""
    candidates = tuple(options)
    for option in candidates:
        if option.label == needle:
            return option
    for option in candidates:
        if str(option.value) == needle:
            return option
    return None


def duplicate_options(options: Iterable[Option]) -> list[Option]:
    """Return options that occur more than once, in first-repeat order."""
    seen: set[Option] = set()
    repeated: list[Option] = []
    for option in options:
        if option in seen and option not in repeated:
            repeated.append(option)
        seen.add(option)
    return repeated


__all__ = [
    "Option",
    "OptionValue",
    "coerce_value",
    "parse_option_spec",
    "parse_option_lines",
    "find_option",
    "duplicate_options",
]
