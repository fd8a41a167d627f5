"""
Logging Configuration for Chat Translit
=======================================

Sets up console logging and, when enabled in settings, a rotating log file.
Library modules (tools/*) only call logging.getLogger(__name__); handlers are
configured here, once, by the entry point.

Usage:
    from logging_config import setup_logging, get_logger

    setup_logging()
    logger = get_logger(__name__)
"""

import logging
import sys
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Optional

from config import get_settings

# Track if logging has been set up
_logging_initialized = False


def get_log_file(log_dir: Path) -> Path:
    """Get the dated log file path, creating the directory if needed."""
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir / f"chat_translit_{datetime.now().strftime('%Y%m%d')}.log"


def setup_logging(
    level: Optional[int] = None,
    console_level: Optional[int] = None,
    log_file: Optional[str] = None,
    force: bool = False
) -> logging.Logger:
    """
    Configure logging for the application.

    Args:
        level: Root / file handler level (default: DEBUG)
        console_level: Console handler level (default: settings.log_level)
        log_file: Path to log file; when omitted, settings.log_to_file decides
        force: Force re-initialization even if already initialized

    Returns:
        The root logger
    """
    global _logging_initialized

    if _logging_initialized and not force:
        return logging.getLogger()

    settings = get_settings()
    if level is None:
        level = logging.DEBUG
    if console_level is None:
        console_level = logging.getLevelName(settings.log_level)

    formatter = logging.Formatter(settings.log_format, datefmt=settings.log_date_format)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Clear existing handlers to avoid duplicates
    root_logger.handlers.clear()

    # Console handler
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    # File handler with rotation (optional)
    if log_file is None and settings.log_to_file:
        log_file = str(get_log_file(settings.log_dir))

    if log_file:
        log_path = Path(log_file)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        file_handler = RotatingFileHandler(
            log_path,
            maxBytes=10 * 1024 * 1024,  # 10 MB
            backupCount=5,
            encoding='utf-8'
        )
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logger = logging.getLogger(__name__)
    logger.info("=" * 60)
    logger.info(f"{settings.app_name} {settings.app_version} - Logging initialized")
    if log_file:
        logger.info(f"Log file: {log_file}")
    logger.info("=" * 60)

    _logging_initialized = True
    return root_logger


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger for a specific module.

    Args:
        name: Module name (typically __name__)

    Returns:
        Configured logger
    """
    return logging.getLogger(name)


def is_initialized() -> bool:
    """Check if logging has been initialized."""
    return _logging_initialized
