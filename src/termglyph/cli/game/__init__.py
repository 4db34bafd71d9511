"""The movable-glyph game."""

from termglyph.cli.game.loop import GameLoop, LoopState, run_game

__all__ = ["GameLoop", "LoopState", "run_game"]
