from __future__ import annotations

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from .constants import LOG_BACKUP_COUNT, LOG_FORMAT, LOG_MAX_BYTES


def setup_logging(*, level: str = "INFO", log_dir: Optional[str] = "logs") -> None:
    """Configure root logging for the application.

    Logs go to stdout and, when ``log_dir`` is set, to a rotating ``app.log``
    file inside it (5 MB per file, 5 old files kept).
    """
    logger = logging.getLogger()
    logger.setLevel(level.upper())

    # Drop handlers installed by Flask/werkzeug so every line uses our format.
    if logger.hasHandlers():
        logger.handlers.clear()

    stdout_handler = logging.StreamHandler(sys.stdout)
    stdout_handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(stdout_handler)

    if log_dir:
        path = Path(log_dir)
        path.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            path / "app.log",
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
        )
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(file_handler)
