from __future__ import annotations

import sys
from typing import Any

from loguru import logger

LOG_FORMAT = "{level} | <level>{message}</level> "
LOG_LEVELS = ["TRACE", "DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


def configure_logger(level: str = "INFO", sink: Any = None) -> int:
    """
    Replace all loguru handlers with a single sink.

    Parameters
    ----------
    level : str
        Minimum level to emit (case-insensitive).
    sink : optional
        Destination accepted by :func:`loguru.logger.add`; defaults to the
        current ``sys.stderr``.

    Returns
    -------
    int
        Handler id of the new sink.
    """
    logger.remove()
    return logger.add(
        sink if sink is not None else sys.stderr,
        format=LOG_FORMAT,
        level=level.upper(),
    )
