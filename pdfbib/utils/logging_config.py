"""
Logging configuration module
"""

import sys
import time
from pathlib import Path

from loguru import logger

from .config import Config


def setup_logging(
    config: Config,
    log_file: Path | None = None,
    max_file_size: str = "10 MB",
    retention: str = "1 week"
) -> None:
    """
    Setup logging configuration

    Args:
        config: Configuration object
        log_file: Path to log file (optional, falls back to config.log_file)
        max_file_size: Maximum log file size
        retention: Log retention period
    """
    # Remove default handler
    logger.remove()

    # Interactive tool: status messages go through the console, logs stay quiet
    level = "DEBUG" if config.verbose else "WARNING"

    console_format = (
        "<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | "
        "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
    )

    logger.add(
        sys.stderr,
        format=console_format,
        level=level,
        colorize=True,
        backtrace=config.verbose,
        diagnose=config.verbose
    )

    log_file = log_file or config.log_file
    if log_file:
        log_file = Path(log_file)
        log_file.parent.mkdir(parents=True, exist_ok=True)

        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}",
            level="DEBUG",  # Always debug level for files
            rotation=max_file_size,
            retention=retention,
            encoding="utf-8"
        )


def get_logger(name: str):
    """
    Get logger instance bound to a component name

    Args:
        name: Logger name

    Returns:
        Logger instance
    """
    return logger.bind(name=name)


class OperationTimer:
    """Context manager for timing operations"""

    def __init__(self, operation_name: str, logger_instance=None):
        self.operation_name = operation_name
        self.logger = logger_instance or logger
        self.start_time = None
        self.duration = None

    def __enter__(self):
        self.start_time = time.time()
        self.logger.debug(f"Starting operation: {self.operation_name}")
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.duration = time.time() - self.start_time

        if exc_type is None:
            self.logger.debug(f"Operation {self.operation_name} completed in {self.duration:.3f}s")
        else:
            self.logger.error(f"Operation {self.operation_name} failed after {self.duration:.3f}s: {exc_val}")

        return False  # Don't suppress exceptions
