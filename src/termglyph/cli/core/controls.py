"""Keyboard controls for the game.

Single source of truth for which characters do what, used both by the
game loop and by the ``keys`` command to print help.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional


class Action(Enum):
    """What a control character does."""
    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)
    QUIT = None

    @property
    def delta(self) -> tuple[int, int]:
        """(dx, dy) for movement actions."""
        if self.value is None:
            raise ValueError(f"{self.name} does not move")
        return self.value


@dataclass(frozen=True)
class ControlDef:
    """A single control binding.

    Attributes:
        key: Character that triggers the action
        action: Action performed
        description: Text shown in help output
    """
    key: str
    action: Action
    description: str


CONTROLS: tuple[ControlDef, ...] = (
    ControlDef("w", Action.UP, "Move up"),
    ControlDef("a", Action.LEFT, "Move left"),
    ControlDef("s", Action.DOWN, "Move down"),
    ControlDef("d", Action.RIGHT, "Move right"),
    ControlDef("q", Action.QUIT, "Quit"),
)

_BY_KEY: dict[str, Action] = {c.key: c.action for c in CONTROLS}


def action_for(char: str) -> Optional[Action]:
    """Look up the action bound to a character. Unbound characters give None."""
    return _BY_KEY.get(char)


def instructions() -> str:
    """One-line usage hint drawn at the top of the screen."""
    moves = "".join(c.key for c in CONTROLS if c.action is not Action.QUIT)
    quit_key = next(c.key for c in CONTROLS if c.action is Action.QUIT)
    return f"move with {moves}, press {quit_key} to exit"
