"""Logger setup for the payroll tools.

Handlers write to stderr (and optionally a file) so log output never mixes
with the record listings printed on stdout.
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(
    level: str = "WARNING",
    logfile: str | None = None,
    logger: logging.Logger | None = None,
) -> None:
    """Configure a logger (the root logger by default) once.

    If the logger already has handlers nothing is changed, so repeated calls
    are harmless.

    Args:
        level: Level name such as "DEBUG" or "info". Unknown names fall back to WARNING.
        logfile: Optional path for an additional file handler.
        logger: Logger to configure instead of the root logger.
    """
    target = logger if logger is not None else logging.getLogger()
    if target.handlers:
        return

    numeric_level = logging.getLevelName(level.upper())
    if not isinstance(numeric_level, int):
        numeric_level = logging.WARNING
    target.setLevel(numeric_level)
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    target.addHandler(console_handler)

    if logfile:
        file_handler = logging.FileHandler(Path(logfile).resolve(), encoding="utf-8")
        file_handler.setFormatter(formatter)
        target.addHandler(file_handler)
