"""Background keyboard capture feeding a non-blocking event queue."""

from __future__ import annotations

import logging
import os
import queue
import sys
import threading
from typing import Iterator, Optional

logger = logging.getLogger(__name__)


class InputCapture:
    """
    Reads raw input one byte at a time on a daemon thread.

    Each byte becomes a one-character event on an unbounded FIFO queue.
    The render loop takes events with drain(), which never blocks.

    Only meaningful while the terminal is in raw mode; otherwise reads
    return whole lines at a time.
    """

    def __init__(self, fd: Optional[int] = None) -> None:
        self._fd = fd if fd is not None else sys.stdin.fileno()
        self._events: queue.SimpleQueue[str] = queue.SimpleQueue()
        self._stop = threading.Event()
        self._thread = threading.Thread(
            target=self._run, name="input-capture", daemon=True
        )
        self.error: Optional[Exception] = None

    def start(self) -> InputCapture:
        self._thread.start()
        return self

    def stop(self) -> None:
        """
        Ask the thread to finish.

        A read already in progress cannot be interrupted; the thread exits
        after it returns, or with the process.
        """
        self._stop.set()

    @property
    def alive(self) -> bool:
        return self._thread.is_alive()

    def join(self, timeout: Optional[float] = None) -> None:
        self._thread.join(timeout)

    def _run(self) -> None:
        while not self._stop.is_set():
            try:
                data = os.read(self._fd, 1)
            except OSError as exc:
                self.error = exc
                logger.error("Input capture stopped: %s", exc)
                return
            if not data:
                logger.info("Input capture reached end of input")
                return
            if self._stop.is_set():
                return
            # Byte value taken as the code point
            self._events.put(chr(data[0]))

    def put(self, char: str) -> None:
        """Queue an event directly, bypassing the reader thread."""
        self._events.put(char)

    def drain(self) -> Iterator[str]:
        """Yield queued events in arrival order until the queue is empty."""
        while True:
            try:
                yield self._events.get_nowait()
            except queue.Empty:
                return
