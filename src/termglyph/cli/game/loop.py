"""Render/control loop: drain input, move the glyph, repaint."""

from __future__ import annotations

import logging
from enum import Enum, auto
from typing import Iterable, Optional

from termglyph.cli.core.controls import Action, action_for, instructions
from termglyph.cli.core.input import InputCapture
from termglyph.cli.core.terminal import TERMINAL_ERRORS, Surface, Terminal
from termglyph.core.color import Color
from termglyph.core.world import WorldBounds, WorldState
from termglyph.errors import GameError

logger = logging.getLogger(__name__)

GLYPH = "[]"
GLYPH_COLOR = Color.from_rgb(255, 0, 0)
TEXT_COLOR = Color.WHITE


class LoopState(Enum):
    RUNNING = auto()
    TERMINATING = auto()


class GameLoop:
    """
    Moves a glyph around the terminal in response to queued key presses.

    Each frame drains every pending event, clamps the glyph to the current
    viewport, then clears and repaints the whole surface with one flush.
    Nothing blocks: a frame with no input just repaints.
    """

    def __init__(
        self,
        surface: Surface,
        capture: InputCapture,
        world: Optional[WorldState] = None,
    ) -> None:
        self.surface = surface
        self.capture = capture
        self.world = world if world is not None else WorldState()
        self.state = LoopState.RUNNING
        self.frames = 0

    @property
    def running(self) -> bool:
        return self.state is LoopState.RUNNING

    def apply(self, events: Iterable[str]) -> None:
        """Apply events in order, stopping at the first quit."""
        for char in events:
            action = action_for(char)
            if action is None:
                continue
            if action is Action.QUIT:
                self.state = LoopState.TERMINATING
                return
            self.world.move(*action.delta)

    def step(self) -> bool:
        """Run one frame. Returns False once the loop has quit."""
        if not self.running:
            return False
        self.apply(self.capture.drain())
        if not self.running:
            return False

        size = self.surface.size()
        bounds = WorldBounds.from_viewport(size.cols, size.rows)
        self.world.clamp(bounds)
        self._render()
        self.frames += 1
        return True

    def _render(self) -> None:
        surface = self.surface
        surface.clear()

        surface.set_foreground(TEXT_COLOR)
        surface.move_to(0, 0)
        surface.write(instructions())

        col, row = self.world.screen_position
        surface.move_to(col, row)
        surface.set_foreground(GLYPH_COLOR)
        surface.write(GLYPH)

        surface.flush()

    def run(self) -> None:
        """
        Run frames until quit.

        Raises:
            GameError: a terminal read or write failed mid-frame
        """
        try:
            while self.step():
                pass
        except TERMINAL_ERRORS as exc:
            raise GameError("terminal I/O failed") from exc
        logger.info("Game loop finished after %d frames", self.frames)


def run_game(terminal: Terminal) -> GameLoop:
    """Capture input from the terminal and play until quit.

    Must be called with the terminal already in raw mode.
    """
    capture = InputCapture(terminal.fd).start()
    loop = GameLoop(terminal, capture)
    try:
        loop.run()
    finally:
        capture.stop()
    return loop
