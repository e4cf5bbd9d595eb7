"""
Logging Configuration Module

Provides standardized logging with:
- Consistent log format across all modules
- Session ID tracking for debugging
- Console and optional rotating file output

Usage:
    from core.logging_config import setup_logging, get_logger

    # Setup at application startup
    setup_logging()

    # Get a logger in any module
    logger = get_logger(__name__)
    logger.info("Application started")
"""

import logging
import sys
import uuid
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

# Global session ID for the running application
_session_id: str = ""


def generate_session_id() -> str:
    """Generate a new UUID session ID."""
    global _session_id
    _session_id = str(uuid.uuid4())
    return _session_id


def get_session_id() -> str:
    """Get the current session ID."""
    if not _session_id:
        generate_session_id()
    return _session_id


class SessionIdFilter(logging.Filter):
    """Filter that adds session_id to log records."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.session_id = get_session_id()
        return True


def setup_logging(
    level: Optional[str] = None,
    log_dir: Optional[str] = None,
    log_file: Optional[str] = None,
    max_size_mb: Optional[int] = None,
    backup_count: Optional[int] = None
) -> None:
    """
    Setup application logging with standardized format.

    Explicit arguments win over values from config/*.yaml.

    Args:
        level: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for log files (default: logs/)
        log_file: Log filename (default: n64_login.log)
        max_size_mb: Maximum log file size before rotation
        backup_count: Number of backup log files to keep
    """
    from config import get_config
    config = get_config()
    level = level or config.get('logging.level', 'INFO')
    if config.get('logging.file.enabled', True):
        log_dir = log_dir or config.get('logging.file.path', 'logs')
        log_file = log_file or config.get('logging.file.filename', 'n64_login.log')
    max_size_mb = max_size_mb or config.get('logging.file.max_size_mb', 10)
    backup_count = backup_count or config.get('logging.file.backup_count', 5)

    # New session for every setup
    generate_session_id()

    # Standardized log format
    log_format = (
        "%(asctime)s - %(levelname)s - [%(filename)s:%(lineno)d] - "
        "[session_id=%(session_id)s] - %(message)s"
    )
    date_format = "%Y-%m-%d %H:%M:%S"

    formatter = logging.Formatter(log_format, datefmt=date_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, str(level).upper(), logging.INFO))

    # Replace handlers from a previous setup, releasing their files
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)
        handler.close()

    session_id_filter = SessionIdFilter()

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(formatter)
    console_handler.addFilter(session_id_filter)
    root_logger.addHandler(console_handler)

    # File handler with rotation
    if log_dir and log_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path / log_file,
            maxBytes=int(max_size_mb) * 1024 * 1024,
            backupCount=int(backup_count),
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        file_handler.addFilter(session_id_filter)
        root_logger.addHandler(file_handler)

    root_logger.info(f"Logging initialized - level={level}, session_id={get_session_id()}")


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger instance for the specified module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Configured logger instance
    """
    return logging.getLogger(name)
