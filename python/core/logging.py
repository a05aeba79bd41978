"""
Centralized logging configuration.

Every module logs through get_logger(__name__). Workflow steps prefix their
messages with ✓ (done), ⚠️ (skipped, best effort) or ❌ (failed).
"""

import logging
import sys
from typing import Optional

from core.config import settings

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
DATE_FORMAT = "%H:%M:%S"

# Third-party loggers that are only useful at WARNING and above:
# supabase/postgrest talk through httpx, minio through urllib3
NOISY_LOGGERS = (
    "httpx",
    "httpcore",
    "hpack",
    "postgrest",
    "urllib3",
    "multipart",
    "uvicorn.access",
)


class ColoredFormatter(logging.Formatter):
    """Level name colored by severity, for terminals."""

    COLORS = {
        logging.DEBUG: '\033[36m',     # Cyan
        logging.INFO: '\033[32m',      # Green
        logging.WARNING: '\033[33m',   # Yellow
        logging.ERROR: '\033[31m',     # Red
        logging.CRITICAL: '\033[35m',  # Magenta
    }
    RESET = '\033[0m'

    def format(self, record: logging.LogRecord) -> str:
        # Other handlers must keep seeing the plain level name
        colored = logging.makeLogRecord(record.__dict__)
        color = self.COLORS.get(record.levelno, '')
        colored.levelname = f"{color}{record.levelname}{self.RESET}"
        return super().format(colored)


def setup_logging(level: Optional[str] = None, use_colors: Optional[bool] = None) -> None:
    """
    Configure the root logger with a single stdout handler.

    Args:
        level: Level name; defaults to LOG_LEVEL, then DEBUG/INFO from DEBUG
        use_colors: Defaults to LOG_COLORS, and only applies to a terminal
    """
    level = level or settings.log_level or ("DEBUG" if settings.debug else "INFO")
    if use_colors is None:
        use_colors = settings.log_colors and sys.stdout.isatty()

    formatter_class = ColoredFormatter if use_colors else logging.Formatter
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(formatter_class(LOG_FORMAT, datefmt=DATE_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(level.upper())
    root_logger.handlers = [handler]

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance with the given name.

    Usage:
        from core.logging import get_logger
        logger = get_logger(__name__)
        logger.info("Something happened")
    """
    return logging.getLogger(name)
