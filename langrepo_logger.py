# -*- coding: utf-8 -*-
"""
LangRepo Central Logging Module

Provides the standard logging setup for the whole package.
Log files are stored under ~/.langrepo/logs/.

Handlers are only configured on the root 'langrepo' logger.
Child loggers propagate to root and do not add handlers themselves.
"""

import logging
from pathlib import Path
from datetime import datetime

# Log directory
LOG_DIR = Path.home() / ".langrepo" / "logs"

# Log file name (dated)
LOG_FILE = LOG_DIR / f"langrepo_{datetime.now().strftime('%Y%m%d')}.log"

# Log format
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)-20s | %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Flag to track if root logger is configured
_root_configured = False


def _configure_root_logger():
    """Configure the root 'langrepo' logger with handlers (once only)."""
    global _root_configured
    if _root_configured:
        return

    root_logger = logging.getLogger("langrepo")
    root_logger.setLevel(logging.DEBUG)

    # Prevent propagation to Python's root logger to avoid duplicates
    root_logger.propagate = False

    # Console handler: INFO and above only
    console_handler = logging.StreamHandler()
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
    root_logger.addHandler(console_handler)

    # File handler: every level
    try:
        LOG_DIR.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(LOG_FILE, encoding='utf-8')
    except OSError as e:
        root_logger.warning(f"File logging disabled ({LOG_FILE}): {e}")
    else:
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, DATE_FORMAT))
        root_logger.addHandler(file_handler)

    _root_configured = True


# Main package logger - configure root on module load
_configure_root_logger()
logger = logging.getLogger("langrepo")


def get_logger(name: str) -> logging.Logger:
    """
    Return a child logger for a module.

    Child loggers do NOT add handlers - they propagate to the root 'langrepo' logger.
    This prevents duplicate log lines.

    Args:
        name: Module name

    Returns:
        Logger named langrepo.{name}
    """
    # Ensure root is configured
    _configure_root_logger()

    return logging.getLogger(f"langrepo.{name}")
