"""
Logging setup for hosts embedding the quote model.

The library modules only create loggers; handlers and levels are the
host's decision and are applied here on request.
"""
from __future__ import annotations

import logging
from typing import Optional, Union

from healthquote import config


LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def configure_logging(level: Optional[Union[int, str]] = None) -> None:
    """
    Configure root logging for the quote model.

    Args:
        level: Logging level name or number. Defaults to `HEALTHQUOTE_LOG_LEVEL`.
    """
    if level is None:
        level = config.LOG_LEVEL
    if isinstance(level, str):
        level = level.upper()
    logging.basicConfig(level=level, format=LOG_FORMAT)


__all__ = ["LOG_FORMAT", "configure_logging"]
