"""Logger setup shared by the command-line entry point."""

from __future__ import annotations

import logging
from pathlib import Path

LOG_FORMAT = "[%(asctime)s][%(levelname)s][%(name)s] %(message)s"


def get_logger(
    name: str, log_file: str | Path | None = None, level: int | str = logging.INFO
) -> logging.Logger:
    """Return *name*'s logger with a console handler and an optional file handler.

    Calling it again replaces the handlers instead of stacking them.
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)
    for handler in logger.handlers:
        handler.close()
    logger.handlers.clear()

    fmt = logging.Formatter(LOG_FORMAT)

    ch = logging.StreamHandler()
    ch.setFormatter(fmt)
    logger.addHandler(ch)

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        fh = logging.FileHandler(log_file, encoding="utf-8")
        fh.setFormatter(fmt)
        logger.addHandler(fh)

    logger.propagate = False
    return logger
