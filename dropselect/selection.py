"""Selection variants for single- and multi-select controls.

Each variant is an immutable value holding the current selection and
exposing pure transforms that return a new variant. The controller holds
exactly one variant, so single-mode and multi-mode operations cannot be
mixed on one instance.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum

from .options import Option


class Mode(Enum):
    """Selection shape fixed for the lifetime of a controller."""

    SINGLE = "single"
    MULTIPLE = "multiple"


@dataclass(frozen=True)
class SingleSelection:
    """At most one selected option."""

    current: Option | None = None

    mode = Mode.SINGLE

    @property
    def value(self) -> Option | None:
        return self.current

    @property
    def is_empty(self) -> bool:
        return self.current is None

    def contains(self, option: Option) -> bool:
        return option == self.current

    def toggled(self, option: Option) -> SingleSelection | None:
        """Return the selection with ``option`` chosen, or ``None`` if unchanged."""
        if self.contains(option):
            return None
        return SingleSelection(option)

    def cleared(self) -> SingleSelection:
        return SingleSelection(None)


@dataclass(frozen=True)
class MultipleSelection:
    """Ordered set of distinct selected options."""

    members: tuple[Option, ...] = ()

    mode = Mode.MULTIPLE

    def __post_init__(self) -> None:
        # Drop repeats while keeping first-seen order.
        unique = tuple(dict.fromkeys(self.members))
        if unique != self.members:
            object.__setattr__(self, "members", unique)

    @property
    def value(self) -> tuple[Option, ...]:
        return self.members

    @property
    def is_empty(self) -> bool:
        return not self.members

    def contains(self, option: Option) -> bool:
        return option in self.members

    def toggled(self, option: Option) -> MultipleSelection:
        """Return a new set with ``option`` removed if present, else appended."""
        if self.contains(option):
            return MultipleSelection(tuple(member for member in self.members if member != option))
        return MultipleSelection(self.members + (option,))

    def cleared(self) -> MultipleSelection:
        return MultipleSelection(())


Selection = SingleSelection | MultipleSelection


def selection_for_mode(mode: Mode, initial: Option | Sequence[Option] | None = None) -> Selection:
    """Build the variant for ``mode`` from an initial value.

    Raises ``ValueError`` when the initial value does not fit the mode's shape.
    """
    if mode is Mode.SINGLE:
        if initial is None or isinstance(initial, Option):
            return SingleSelection(initial)
        raise ValueError("single selection expects an Option or None")
    if initial is None:
        return MultipleSelection(())
    if isinstance(initial, Option):
        raise ValueError("multiple selection expects a sequence of Options")
    members = tuple(initial)
    if not all(isinstance(member, Option) for member in members):
        raise ValueError("multiple selection members must be Options")
    return MultipleSelection(members)


__all__ = [
    "Mode",
    "SingleSelection",
    "MultipleSelection",
    "Selection",
    "selection_for_mode",
]
