"""Logging setup.

The terminal belongs to the game while it runs, so log records can only
go to a file.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)-7s %(threadName)s %(name)s: %(message)s"


def configure_logging(log_file: Optional[Path], verbose: bool = False) -> Optional[logging.Handler]:
    """Send termglyph logs to log_file. Does nothing when log_file is None."""
    if log_file is None:
        return None
    handler = logging.FileHandler(log_file, encoding="utf-8")
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root = logging.getLogger("termglyph")
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.INFO)
    return handler
