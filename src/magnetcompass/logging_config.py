"""
Logging Configuration
Sets up the global logger for the application.
"""
import logging
import os
import sys
from typing import Optional

LOG_LEVEL_ENV = "MAGNETCOMPASS_LOG_LEVEL"


def level_from_env(default: int = logging.INFO) -> int:
    """Resolve the logging level from the MAGNETCOMPASS_LOG_LEVEL variable."""
    name = os.environ.get(LOG_LEVEL_ENV, "").strip().upper()
    if not name:
        return default
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else default


def setup_logging(level: Optional[int] = None, log_file: Optional[str] = None) -> logging.Logger:
    """
    Configures the root logger for the 'magnetcompass' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO). When omitted
            it is read from MAGNETCOMPASS_LOG_LEVEL, falling back to INFO.
        log_file: Optional path to save logs to a file.

    Returns:
        The configured namespace logger.
    """
    if level is None:
        level = level_from_env()
    logger = logging.getLogger("magnetcompass")
    logger.setLevel(level)

    # Avoid duplicate handlers when the app is restarted in the same process
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)

    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(f"Logging initialized at {logging.getLevelName(level)}.")
    return logger
