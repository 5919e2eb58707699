"""Public package surface for dropselect.

Exports the selection core (``SelectionController``, ``Option``, ``Mode``,
``Intent``) and ``main`` for programmatic CLI invocation. Terminal runtime
and rendering live in submodules under ``dropselect``.
"""

from __future__ import annotations

from .controller import SelectionController
from .input.intents import Intent
from .input.source import InputSource
from .options import Option
from .selection import Mode


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = ["Intent", "InputSource", "Mode", "Option", "SelectionController", "main"]
