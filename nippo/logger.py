"""
Logging setup for the daily report analyzer.

Library modules log through logging.getLogger(__name__); the CLI calls
setup_logging() once to route those records to stderr and, optionally, to a
rotating log file. Calling it again replaces the handlers it installed
earlier and leaves any other root handlers alone.
"""

import logging
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

LOG_FORMAT = '%(asctime)s [%(levelname)s] %(name)s: %(message)s'

# Handlers added to the root logger by setup_logging
_installed_handlers: list[logging.Handler] = []


def remove_handlers():
    """Detach and close every handler installed by setup_logging."""
    root = logging.getLogger()
    while _installed_handlers:
        handler = _installed_handlers.pop()
        root.removeHandler(handler)
        handler.close()


def setup_logging(
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    max_bytes: int = 10_000_000,
    backup_count: int = 5
) -> logging.Logger:
    """
    Configure the root logger for a CLI run.

    Args:
        level: Root logging level
        log_file: Optional path of a UTF-8 rotating log file; parent
            directories are created
        max_bytes: Size at which the log file rotates
        backup_count: Number of rotated files kept

    Returns:
        The root logger
    """
    remove_handlers()

    root = logging.getLogger()
    root.setLevel(level)
    formatter = logging.Formatter(LOG_FORMAT)

    handlers = [logging.StreamHandler(sys.stderr)]
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(RotatingFileHandler(
            log_file, maxBytes=max_bytes, backupCount=backup_count, encoding='utf-8'
        ))

    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
        _installed_handlers.append(handler)

    return root
