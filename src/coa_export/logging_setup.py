"""Logging for the ``coa_export`` package.

Every module logs through ``get_logger(__name__)``. Nothing is printed until
the CLI calls ``configure_logging`` once at startup; until then the package
logger carries only a ``NullHandler`` so library use stays quiet.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import IO

_PKG_LOGGER_NAME = "coa_export"
LOG_LEVEL_ENV_VAR = "COA_EXPORT_LOG_LEVEL"
LEVEL_NAMES = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")
DEFAULT_FORMAT = "%(asctime)s %(name)s %(levelname)s %(message)s"
_CONFIGURED = False


def _parse_level(level: int | str | None) -> int:
    """Resolve a level number or name; ``None`` reads the environment."""
    if level is None:
        level = os.getenv(LOG_LEVEL_ENV_VAR) or "INFO"
    if isinstance(level, int):
        return level

    name = level.strip().upper()
    if name.isdigit():
        return int(name)
    if name not in LEVEL_NAMES:
        raise ValueError(
            f"Unknown log level '{level}'. Must be one of: {', '.join(LEVEL_NAMES)}"
        )
    return getattr(logging, name)


def configure_logging(
    level: int | str | None = None,
    *,
    fmt: str | None = None,
    stream: IO[str] | None = None,
) -> None:
    """Send package logs to ``stream`` (stderr by default).

    Only the first call has an effect. ``level`` falls back to
    ``COA_EXPORT_LOG_LEVEL`` and then to ``INFO``.

    Raises:
        ValueError: If ``level`` is not a known level name
    """
    global _CONFIGURED
    if _CONFIGURED:
        return

    numeric_level = _parse_level(level)
    logger = logging.getLogger(_PKG_LOGGER_NAME)
    for h in [h for h in logger.handlers if isinstance(h, logging.NullHandler)]:
        logger.removeHandler(h)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(fmt or DEFAULT_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(numeric_level)
    logger.propagate = False

    _CONFIGURED = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger, leaving the package silent until configured."""
    pkg_logger = logging.getLogger(_PKG_LOGGER_NAME)
    if not _CONFIGURED and not pkg_logger.handlers:
        pkg_logger.addHandler(logging.NullHandler())
    return logging.getLogger(name)
