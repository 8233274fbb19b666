# utils/logger.py
"""
Logging utility for the service registry store.
Provides consistent logging across all components with file and console output.
"""

import logging
import os
from datetime import datetime

from config import Config


# Global logger configuration
LOG_DIR = Config.LOGS_DIR
os.makedirs(LOG_DIR, exist_ok=True)

# Create log file with timestamp
LOG_FILE = os.path.join(
    LOG_DIR,
    f"service_registry_{datetime.now().strftime('%Y%m%d_%H%M%S')}.log"
)


def _default_level() -> int:
    return getattr(logging, Config.LOG_LEVEL, logging.INFO)


def get_logger(name: str, level: int = None) -> logging.Logger:
    """
    Get or create a logger with both file and console handlers.

    Args:
        name: Logger name (usually module or class name)
        level: Logging level (default: Config.LOG_LEVEL)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)

    # Only configure if not already configured
    if not logger.handlers:
        level = level if level is not None else _default_level()
        logger.setLevel(logging.DEBUG)

        detailed_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

        simple_formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
            datefmt='%H:%M:%S'
        )

        # File handler (detailed)
        file_handler = logging.FileHandler(LOG_FILE, encoding='utf-8')
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)

        # Console handler (simpler)
        console_handler = logging.StreamHandler()
        console_handler.setLevel(level)
        console_handler.setFormatter(simple_formatter)

        logger.addHandler(file_handler)
        logger.addHandler(console_handler)

        # Prevent propagation to root logger
        logger.propagate = False

    return logger


def set_log_level(logger: logging.Logger, level: int):
    """
    Set console logging level for a logger.

    Args:
        logger: Logger instance
        level: New logging level
    """
    for handler in logger.handlers:
        # FileHandler subclasses StreamHandler; keep the file at DEBUG
        if isinstance(handler, logging.StreamHandler) and not isinstance(handler, logging.FileHandler):
            handler.setLevel(level)
