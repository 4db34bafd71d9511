"""Core TUI infrastructure - terminal I/O, session, input capture, controls."""

from termglyph.cli.core.terminal import (
    Surface,
    Terminal,
    TerminalSession,
    TerminalSize,
)
from termglyph.cli.core.input import InputCapture
from termglyph.cli.core.controls import CONTROLS, Action, ControlDef, action_for

__all__ = [
    "Surface",
    "Terminal",
    "TerminalSession",
    "TerminalSize",
    "InputCapture",
    "CONTROLS",
    "Action",
    "ControlDef",
    "action_for",
]
