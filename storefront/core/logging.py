"""
Logging for the storefront: console output plus rotating app/error files under LOG_DIR.

The log directory is created the first time a logger is requested. When it
cannot be created or written (read-only install, locked-down container) loggers
fall back to console output only.
"""
import logging
import sys
from logging.handlers import RotatingFileHandler
from typing import List

from storefront.config.settings import settings

MAX_LOG_BYTES = 10 * 1024 * 1024  # 10 MB
LOG_BACKUPS = 5

_file_logging_disabled = False


def _file_handlers(formatter: logging.Formatter) -> List[logging.Handler]:
    """app.log (DEBUG+) and error.log (ERROR+), or nothing if LOG_DIR is unusable."""
    global _file_logging_disabled
    if _file_logging_disabled:
        return []

    handlers = []
    try:
        settings.LOG_DIR.mkdir(parents=True, exist_ok=True)
        for filename, level in (("app.log", logging.DEBUG), ("error.log", logging.ERROR)):
            handler = RotatingFileHandler(
                settings.LOG_DIR / filename,
                maxBytes=MAX_LOG_BYTES,
                backupCount=LOG_BACKUPS,
                encoding="utf-8",
            )
            handler.setLevel(level)
            handler.setFormatter(formatter)
            handlers.append(handler)
    except OSError as e:
        for handler in handlers:
            handler.close()
        _file_logging_disabled = True
        print(f"File logging disabled - cannot write to {settings.LOG_DIR}: {e}", file=sys.stderr)
        return []
    return handlers


def get_logger(name: str) -> logging.Logger:
    """
    Return the logger for ``name`` with storefront handlers attached.

    Args:
        name: Name of the logger (typically __name__ of the module)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Streamlit reruns re-import pages; attach handlers only once.
    if logger.handlers:
        return logger

    logger.setLevel(getattr(logging, settings.LOG_LEVEL, logging.INFO))

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.INFO)
    console_handler.setFormatter(logging.Formatter(
        fmt="%(asctime)s - %(levelname)s - %(message)s",
        datefmt="%H:%M:%S",
    ))
    logger.addHandler(console_handler)

    detailed_formatter = logging.Formatter(
        fmt="%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    for handler in _file_handlers(detailed_formatter):
        logger.addHandler(handler)

    return logger
