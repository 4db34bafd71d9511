"""Shared fakes for terminal and input tests."""

from __future__ import annotations

import io
import logging
import os
from typing import Iterator

import pytest

from termglyph.cli.core.input import InputCapture
from termglyph.cli.core.terminal import Terminal, TerminalSize
from termglyph.core.color import Color


class FakeSurface:
    """Records drawing calls; each flush closes one frame."""

    def __init__(self, cols: int = 10, rows: int = 5) -> None:
        self.viewport = TerminalSize(rows=rows, cols=cols)
        self.ops: list[tuple] = []
        self.frames: list[list[tuple]] = []
        self.fail_on: set[str] = set()

    def _record(self, name: str, *args: object) -> None:
        if name in self.fail_on:
            raise OSError(f"{name} failed")
        self.ops.append((name, *args))

    def size(self) -> TerminalSize:
        self._record("size")
        return self.viewport

    def clear(self) -> None:
        self._record("clear")

    def move_to(self, col: int, row: int) -> None:
        self._record("move_to", col, row)

    def set_foreground(self, color: Color) -> None:
        self._record("set_foreground", color)

    def write(self, text: str) -> None:
        self._record("write", text)

    def flush(self) -> None:
        self._record("flush")
        self.frames.append(self.ops)
        self.ops = []


class RecordingTerminal(Terminal):
    """Terminal writing to a StringIO, with raw mode faked and failures injectable."""

    def __init__(self, fd: int = -1, cols: int = 10, rows: int = 5) -> None:
        super().__init__(stream=io.StringIO(), fd=fd)
        self.calls: list[str] = []
        self.fail_on: set[str] = set()
        self.viewport = TerminalSize(rows=rows, cols=cols)
        self.is_raw = False

    def _call(self, name: str) -> None:
        self.calls.append(name)
        if name in self.fail_on:
            raise OSError(f"{name} failed")

    def size(self) -> TerminalSize:
        return self.viewport

    def enter_alternate_screen(self) -> None:
        self._call("enter_alternate_screen")
        super().enter_alternate_screen()

    def leave_alternate_screen(self) -> None:
        self._call("leave_alternate_screen")
        super().leave_alternate_screen()

    def hide_cursor(self) -> None:
        self._call("hide_cursor")
        super().hide_cursor()

    def show_cursor(self) -> None:
        self._call("show_cursor")
        super().show_cursor()

    def enable_raw_mode(self) -> None:
        self._call("enable_raw_mode")
        self.is_raw = True

    def disable_raw_mode(self) -> None:
        self._call("disable_raw_mode")
        self.is_raw = False


@pytest.fixture
def surface() -> FakeSurface:
    return FakeSurface()


@pytest.fixture
def capture() -> InputCapture:
    """An InputCapture fed by put(); its thread is never started."""
    return InputCapture(fd=-1)


@pytest.fixture
def pipe() -> Iterator[tuple[int, int]]:
    """(read_fd, write_fd) closed after the test, write end first."""
    read_fd, write_fd = os.pipe()

    yield read_fd, write_fd

    for fd in (write_fd, read_fd):
        try:
            os.close(fd)
        except OSError:
            pass


@pytest.fixture(autouse=True)
def _reset_logging() -> Iterator[None]:
    """Drop handlers added by configure_logging() during a test."""
    logger = logging.getLogger("termglyph")
    handlers = list(logger.handlers)
    level = logger.level

    yield

    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
