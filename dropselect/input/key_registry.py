"""Reusable key-combo registry primitives."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class KeyComboBinding(Generic[T]):
    """Mapping from one or more key tokens to a single bound target."""

    combos: tuple[str, ...]
    target: T


class KeyComboRegistry(Generic[T]):
    """Small key-lookup table with optional key normalization strategy."""

    def __init__(self, normalize: Callable[[str], str] | None = None) -> None:
        """Initialize empty registry with optional token normalizer."""
        self._normalize = normalize if normalize is not None else self._identity
        self._targets: dict[str, T] = {}

    @staticmethod
    def _identity(key: str) -> str:
        """Return key unchanged for exact-match registries."""
        return key

    def register_binding(self, binding: KeyComboBinding[T]) -> KeyComboRegistry[T]:
        """Register one binding, overwriting existing targets for same combos."""
        for combo in binding.combos:
            self._targets[self._normalize(combo)] = binding.target
        return self

    def register_bindings(self, *bindings: KeyComboBinding[T]) -> KeyComboRegistry[T]:
        """Register multiple bindings and return ``self`` for fluent usage."""
        for binding in bindings:
            self.register_binding(binding)
        return self

    def lookup(self, key: str) -> T | None:
        """Return the target bound to ``key``, or ``None`` when unbound."""
        return self._targets.get(self._normalize(key))

    def combos(self) -> tuple[str, ...]:
        """Return all registered (normalized) key tokens."""
        return tuple(self._targets)
