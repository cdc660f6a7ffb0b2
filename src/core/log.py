"""Logging setup (loguru).

The library only emits records through `loguru.logger`; sinks are decided by
whoever embeds it. `configure_logging` is the one-call setup for scripts and
tests that want a plain stderr sink honoring `AppSettings.log_level`.
"""

from __future__ import annotations

import sys

from loguru import logger

from core.config import AppSettings

_FORMAT = "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | {name}:{function} - {message}"


def configure_logging(settings: AppSettings | None = None) -> int:
    """Replace loguru's default sink with a stderr sink at the configured level.

    Returns the sink id so callers can remove it again.
    """

    settings = settings or AppSettings()
    logger.remove()
    return logger.add(sys.stderr, level=settings.log_level.upper(), format=_FORMAT)
