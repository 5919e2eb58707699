"""Public runtime orchestration entry points.

This package groups the interactive session bootstrap (`run_select`) and the
lower-level event loop contracts used by tests and composition code.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .loop import LoopState, RuntimeLoopTiming


def run_select(*args, **kwargs):
    """Lazily import session entrypoint to avoid terminal setup on import."""
    from .app import run_select as _run_select

    return _run_select(*args, **kwargs)


def run_select_loop(*args, **kwargs):
    """Lazily import loop runner to avoid package-import cycles."""
    from .loop import run_select_loop as _run_select_loop

    return _run_select_loop(*args, **kwargs)


def __getattr__(name: str):
    if name in {"LoopState", "RuntimeLoopTiming"}:
        from . import loop as _loop

        return getattr(_loop, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "run_select",
    "run_select_loop",
    "LoopState",
    "RuntimeLoopTiming",
]
