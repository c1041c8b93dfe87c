"""
Logging for glypto.

The package logs through one "glypto" logger with a single console
handler.  Library use writes to stdout; the CLI reconfigures the same
handler onto stderr so its JSON output on stdout stays parseable.
"""

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logger(
    name: str = "glypto",
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    stream: Optional[TextIO] = None
) -> logging.Logger:
    """
    Configure the package logger, or reconfigure it if already set up.

    Args:
        name: Logger name
        level: Logging level (default: INFO)
        log_file: Optional file path for an extra file handler
        stream: Console stream (default: sys.stdout at first setup; on
                later calls the console handler keeps its stream unless
                one is given)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    console = next(
        (h for h in logger.handlers
         if type(h) is logging.StreamHandler),
        None
    )
    if console is None:
        console = logging.StreamHandler(stream or sys.stdout)
        console.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(console)
    elif stream is not None:
        console.setStream(stream)

    if log_file and not any(isinstance(h, logging.FileHandler) for h in logger.handlers):
        file_handler = logging.FileHandler(log_file)
        file_handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
        logger.addHandler(file_handler)

    for handler in logger.handlers:
        handler.setLevel(level)

    return logger


# Package logger, configured once at import time
logger = setup_logger()


def get_module_logger(module_name: str) -> logging.Logger:
    """Child logger named "glypto.<module_name>"; shares the package handlers."""
    return logging.getLogger(f"glypto.{module_name}")
