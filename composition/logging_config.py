"""
Logging Configuration
Sets up the loggers of the project's packages.
"""
import logging
import sys
from typing import Optional, Union

from .config import LOGGER_NAMESPACES


def setup_logging(level: Union[int, str] = logging.WARNING, log_file: Optional[str] = None) -> None:
    """
    Configures the loggers for the 'shapes', 'composition', 'plotting'
    and 'scale_shapes' namespaces.

    Args:
        level: Logging level (e.g. logging.DEBUG or "INFO")
        log_file: Optional path to save logs to a file.
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level}")
        level = resolved

    # Console handler on stderr; stdout carries the report
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)

    file_handler = None
    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)

    for name in LOGGER_NAMESPACES:
        logger = logging.getLogger(name)
        logger.setLevel(level)
        # Avoid duplicate output when called more than once
        if logger.hasHandlers():
            for old in logger.handlers:
                old.close()
            logger.handlers.clear()
        logger.addHandler(console_handler)
        if file_handler is not None:
            logger.addHandler(file_handler)

    logging.getLogger("composition").info("Logging initialized.")
