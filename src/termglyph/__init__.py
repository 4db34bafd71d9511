"""
termglyph: a minimal real-time terminal game loop

Moves a glyph around a full-screen raw terminal while a background
thread captures keystrokes.

Quick Start:
    $ termglyph play
    $ termglyph keys

Library use:
    >>> from termglyph.cli.core import Terminal
    >>> from termglyph.cli.game import run_game
    >>> terminal = Terminal()
    >>> with terminal.managed_mode():
    ...     run_game(terminal)
"""

import logging

__version__ = "0.1.0"

from termglyph.core.color import Color
from termglyph.core.world import WorldBounds, WorldState
from termglyph.errors import GameError, SessionError, SetupError, TermglyphError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    "Color",
    "WorldBounds",
    "WorldState",
    "TermglyphError",
    "SetupError",
    "SessionError",
    "GameError",
]
