"""Logging setup shared by the desktop and web entry points."""
import logging
import os
from logging.handlers import RotatingFileHandler
from typing import Optional

LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_FILENAME = "ttumpire.log"


def setup_logging(log_dir: Optional[str] = None, level: int = logging.INFO) -> None:
    """
    Configure the root logger.

    Always logs to the console; when ``log_dir`` is given, also writes a
    rotating log file (1 MB, 3 backups). Calling it again is a no-op once
    handlers are installed.

    Args:
        log_dir: Directory for ``ttumpire.log``, or None for console only
        level: Root log level
    """
    root = logging.getLogger()
    root.setLevel(level)
    if root.handlers:
        return

    formatter = logging.Formatter(LOG_FORMAT)

    console = logging.StreamHandler()
    console.setFormatter(formatter)
    root.addHandler(console)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        handler = RotatingFileHandler(
            os.path.join(log_dir, LOG_FILENAME),
            maxBytes=1024 * 1024,
            backupCount=3,
            encoding="utf-8",
        )
        handler.setFormatter(formatter)
        root.addHandler(handler)
