"""Low-level terminal operations and the raw terminal session."""

from __future__ import annotations

import logging
import os
import sys
import termios
import tty
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Callable, Iterator, Optional, Protocol, TextIO

from termglyph.core.color import Color
from termglyph.errors import SessionError, SetupError

logger = logging.getLogger(__name__)

# Anything a terminal call can fail with. Closed streams raise ValueError.
TERMINAL_ERRORS = (OSError, ValueError, termios.error)


@dataclass(frozen=True)
class TerminalSize:
    """Terminal dimensions."""
    rows: int
    cols: int


class Surface(Protocol):
    """Drawing operations the game loop needs from a terminal."""

    def size(self) -> TerminalSize:
        ...

    def clear(self) -> None:
        ...

    def move_to(self, col: int, row: int) -> None:
        ...

    def set_foreground(self, color: Color) -> None:
        ...

    def write(self, text: str) -> None:
        ...

    def flush(self) -> None:
        ...


class Terminal:
    """
    Terminal I/O for a single full-screen session.

    Drawing calls (clear, move_to, set_foreground, write) are queued and
    only reach the stream on flush(), as one write. Mode switches
    (alternate screen, cursor, raw mode) take effect immediately.
    """

    def __init__(self, stream: Optional[TextIO] = None, fd: Optional[int] = None) -> None:
        self.stream = stream if stream is not None else sys.stdout
        self.fd = fd if fd is not None else sys.stdin.fileno()
        self._pending: list[str] = []
        self._saved_attrs: Optional[list] = None

    # Queued drawing

    def size(self) -> TerminalSize:
        """Get current terminal dimensions."""
        size = os.get_terminal_size(self.stream.fileno())
        return TerminalSize(size.lines, size.columns)

    def clear(self) -> None:
        self._pending.append('\x1b[2J')

    def move_to(self, col: int, row: int) -> None:
        """Move cursor to a 0-indexed cell."""
        self._pending.append(f'\x1b[{row + 1};{col + 1}H')

    def set_foreground(self, color: Color) -> None:
        self._pending.append(color.escape())

    def write(self, text: str) -> None:
        self._pending.append(text)

    @property
    def pending(self) -> str:
        """Output queued since the last flush."""
        return ''.join(self._pending)

    def flush(self) -> None:
        """Write everything queued as one batch."""
        data = self.pending
        self._pending.clear()
        self.stream.write(data)
        self.stream.flush()

    # Immediate mode switches

    def _execute(self, sequence: str) -> None:
        self.stream.write(sequence)
        self.stream.flush()

    def enter_alternate_screen(self) -> None:
        self._execute('\x1b[?1049h')

    def leave_alternate_screen(self) -> None:
        self._execute('\x1b[0m\x1b[?1049l')

    def hide_cursor(self) -> None:
        self._execute('\x1b[?25l')

    def show_cursor(self) -> None:
        self._execute('\x1b[?25h')

    def enable_raw_mode(self) -> None:
        """Deliver every keystroke immediately and unechoed."""
        attrs = termios.tcgetattr(self.fd)
        tty.setraw(self.fd)
        self._saved_attrs = attrs

    def disable_raw_mode(self) -> None:
        """Restore the input attributes saved by enable_raw_mode()."""
        if self._saved_attrs is None:
            return
        termios.tcsetattr(self.fd, termios.TCSADRAIN, self._saved_attrs)
        self._saved_attrs = None

    @property
    def raw(self) -> bool:
        return self._saved_attrs is not None

    @contextmanager
    def managed_mode(self) -> Iterator[TerminalSession]:
        """Full TUI mode: alternate screen, raw input, hidden cursor."""
        with TerminalSession(self) as session:
            yield session


class TerminalSession:
    """
    Exclusive ownership of the terminal in full-screen raw mode.

    enter() acquires alternate screen, raw mode and hidden cursor in that
    order; exit() releases them in reverse. Use as a context manager so
    exit() runs however the body ends.
    """

    def __init__(self, terminal: Terminal) -> None:
        self.terminal = terminal
        self._undo: list[tuple[str, Callable[[], None]]] = []
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def _steps(self) -> list[tuple[str, Callable[[], None], Callable[[], None]]]:
        t = self.terminal
        return [
            ("alternate screen", t.enter_alternate_screen, t.leave_alternate_screen),
            ("raw mode", t.enable_raw_mode, t.disable_raw_mode),
            ("hidden cursor", t.hide_cursor, t.show_cursor),
        ]

    def enter(self) -> TerminalSession:
        """Acquire the session. Raises SetupError if any step fails."""
        if self._active:
            raise SessionError("terminal session is already active")

        undo: list[tuple[str, Callable[[], None]]] = []
        for name, acquire, release in self._steps():
            try:
                acquire()
            except TERMINAL_ERRORS as exc:
                logger.error("Could not set up %s: %s", name, exc)
                self._unwind(undo)
                raise SetupError(f"could not set up {name}") from exc
            undo.append((name, release))

        self._undo = undo
        self._active = True
        logger.debug("Terminal session entered")
        return self

    def exit(self) -> list[Exception]:
        """
        Release the session.

        Every teardown step runs even if an earlier one fails. Failures are
        logged and returned, never raised.
        """
        if not self._active:
            return []
        failures = self._unwind(self._undo)
        self._undo = []
        self._active = False
        logger.debug("Terminal session exited (%d teardown failures)", len(failures))
        return failures

    @staticmethod
    def _unwind(undo: list[tuple[str, Callable[[], None]]]) -> list[Exception]:
        failures: list[Exception] = []
        for name, release in reversed(undo):
            try:
                release()
            except TERMINAL_ERRORS as exc:
                logger.warning("Could not restore %s: %s", name, exc)
                failures.append(exc)
        return failures

    def __enter__(self) -> TerminalSession:
        return self.enter()

    def __exit__(self, *exc_info: object) -> None:
        self.exit()
