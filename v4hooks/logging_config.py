"""
Logging setup for the hook tag fetcher.

Console output always, plus an optional log file.
"""

import logging
import sys
from typing import Optional

SIMPLE_FORMAT = "%(asctime)s - %(levelname)s - %(message)s"
DETAILED_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - [%(filename)s:%(lineno)d] - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: str,
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    detailed: bool = False,
) -> logging.Logger:
    """
    Setup a logger with a console handler and, if log_file is given, a file handler.

    Args:
        name: Logger name, "v4hooks" covers every module of the package
        level: Logging level
        log_file: Optional path of a log file
        detailed: Whether to include logger name and file/line

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    # Prevent duplicate handlers
    if logger.handlers:
        return logger

    formatter = logging.Formatter(DETAILED_FORMAT if detailed else SIMPLE_FORMAT, datefmt=DATE_FORMAT)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    return logger
