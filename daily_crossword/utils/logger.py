"""Logging setup shared by the library and the CLI.

Every module logs through ``get_logger(__name__)`` so records are named
``daily_crossword.<subpackage>.<module>``. Levels used across the package:

- DEBUG: per-word placement decisions (seed, best crossing and its score,
  random fallback hits, dropped words) and Gemini reply sizes.
- INFO: one summary per placement and generation run, plus the number of
  usable words a Gemini request produced.
- WARNING: word sources that failed and were skipped, unreadable Gemini
  replies.
- ERROR: a finished puzzle that failed post-generation validation.

The CLI calls :func:`configure_logging` with the ``--log-level`` value;
library users may install their own handlers instead.
"""

from __future__ import annotations

import logging
from typing import Optional


LOG_FORMAT = "%(asctime)s | %(levelname)-7s | %(name)s | %(message)s"
DEFAULT_LOGGER_NAME = "daily_crossword"


def configure_logging(level: int = logging.INFO) -> None:
    """Replace root handlers with one stderr handler at ``level``."""

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt="%H:%M:%S"))

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or DEFAULT_LOGGER_NAME)
