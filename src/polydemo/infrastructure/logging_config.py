"""Logging configuration helpers for the demo CLI."""

from __future__ import annotations

import logging
from logging import Logger


def configure_logging(verbose: bool = False) -> Logger:
    """Configure basic logging for the application and return its logger.

    Logs go to stderr; WARNING by default so the demo output stays
    clean, DEBUG with ``verbose``.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    return logging.getLogger("polydemo")
