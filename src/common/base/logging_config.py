"""
Centralized logging configuration for bblex.

Sets up consistent logging for the lexer and the web API:
- Detailed formatting including line numbers and function names
- Both console and file output
- Automatic log rotation
- A separate level for the bb_parser loggers, which log every token at DEBUG
"""

import logging
import logging.handlers
from pathlib import Path
from typing import Optional

import constants

LOG_FORMAT = '%(asctime)s - %(levelname)s - %(name)s - %(filename)s:%(lineno)d:%(funcName)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def configure_logging(
    log_level: str = "INFO",
    lexer_log_level: str = "INFO",
    log_filename: Optional[str] = None,
    log_to_file: bool = True
) -> Optional[Path]:
    """
    Configure application-wide logging settings.

    Args:
        log_level: Root logger level (default: "INFO")
        lexer_log_level: Level for the bb_parser loggers; "DEBUG" traces every token
        log_filename: Optional custom log filename to use instead of default
        log_to_file: Whether to add the rotating file handler

    Returns:
        Path of the log file, or None when file logging is disabled
    """
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, log_level.upper()))

    # Clear any existing handlers to avoid duplicates on reconfiguration
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    log_file_path = None
    if log_to_file:
        log_dir = Path(constants.LOG_DIR)
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file_path = log_dir / (log_filename or 'bblex.log')

        file_handler = logging.handlers.RotatingFileHandler(
            log_file_path,
            maxBytes=1024 * 1024,  # 1MB per file
            backupCount=10,
            encoding='utf-8'
        )
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    logging.getLogger('bb_parser').setLevel(getattr(logging, lexer_log_level.upper()))

    logging.info(f"Logging initialized: root_level={log_level}, lexer_level={lexer_log_level}, log_file={log_file_path}")
    return log_file_path


def get_logger(name: str) -> logging.Logger:
    """
    Get a logger with the standardized configuration.

    Args:
        name: Name for the logger, typically __name__ from the calling module

    Returns:
        A configured logger instance
    """
    return logging.getLogger(name)
