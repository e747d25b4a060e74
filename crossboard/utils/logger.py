"""Logging utilities for the crossword board."""

from __future__ import annotations

import logging
from typing import Optional


LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"


def parse_level(name: str, default: int = logging.WARNING) -> int:
    """Map a level name such as ``"debug"`` to its numeric value."""

    level = logging.getLevelName(name.strip().upper())
    return level if isinstance(level, int) else default


def configure_logging(level: int = logging.INFO) -> None:
    """Configure root logging with a compact formatter.

    The interactive session prints the board on stdout, so records go to the
    handler's default stream (stderr) and stay out of the rendered grid.
    """

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a logger under the ``crossboard`` namespace, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or "crossboard")
