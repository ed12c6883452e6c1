"""Loguru setup.

Other modules just do ``from loguru import logger``; only this module
adds or removes handlers.
"""

from __future__ import annotations

import sys
from pathlib import Path

from loguru import logger

_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def _stderr_sink(message: str) -> None:
    # Looked up on every write so a swapped sys.stderr (e.g. click's test runner) is honoured.
    sys.stderr.write(message)


def setup_logging(level: str = "WARNING", logfile: Path | None = None) -> None:
    logger.remove()
    logger.add(_stderr_sink, format=_FORMAT, level=level, colorize=False)
    if logfile is not None:
        logfile.parent.mkdir(parents=True, exist_ok=True)
        logger.add(
            logfile,
            format=_FORMAT,
            level="DEBUG",
            rotation="10 MB",
            retention="30 days",
        )
