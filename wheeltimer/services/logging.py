"""
wheeltimer/services/logging.py

Central logging setup: rotating file under ~/.wheeltimer/logs plus stderr.
"""

import logging
import sys
import tempfile
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOGGER_NAME = "wheeltimer"
LOG_FILENAME = "wheeltimer.log"


def _resolve_log_dir(preferred: Optional[Path]) -> Optional[Path]:
    candidates = []
    if preferred is not None:
        candidates.append(Path(preferred))
    try:
        candidates.append(Path.home() / ".wheeltimer" / "logs")
    except RuntimeError:
        pass
    candidates.append(Path(tempfile.gettempdir()) / "wheeltimer_logs")

    for candidate in candidates:
        try:
            candidate.mkdir(parents=True, exist_ok=True)
            return candidate
        except OSError:
            continue
    return None


def setup_logging(level=logging.INFO, log_dir: Optional[Path] = None):
    """
    Configure the ``wheeltimer`` logger.
    - File: 1 MB max, 3 rotated backups (when a writable directory exists)
    - Console: stderr, always
    Calling it again only updates the level.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    if logger.handlers:
        return logger

    formatter = logging.Formatter(
        "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    directory = _resolve_log_dir(log_dir)
    if directory is not None:
        try:
            file_handler = RotatingFileHandler(
                directory / LOG_FILENAME, maxBytes=1_000_000, backupCount=3, encoding="utf-8"
            )
            file_handler.setFormatter(formatter)
            logger.addHandler(file_handler)
        except OSError as e:
            print(f"Warning: cannot write log file in {directory}: {e}", file=sys.stderr)

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    logger.debug("Logging initialised (dir=%s)", directory)
    return logger
