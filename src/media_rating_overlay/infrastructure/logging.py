"""Logging configuration and setup."""

import logging
import logging.handlers
from pathlib import Path

from ..config.models import LoggingConfig


def setup_logging(config: LoggingConfig) -> None:
    """Set up logging configuration.

    Args:
        config: Logging configuration.
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(getattr(logging, config.level))

    # Clear existing handlers
    root_logger.handlers.clear()

    formatter = logging.Formatter(config.format)

    if config.use_stdout:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, config.level))
        console_handler.setFormatter(formatter)
        root_logger.addHandler(console_handler)

    if config.log_file_path:
        log_path = Path(config.log_file_path)
        log_path.parent.mkdir(parents=True, exist_ok=True)

        file_handler = logging.handlers.RotatingFileHandler(
            log_path,
            maxBytes=config.max_size_mb * 1024 * 1024,
            backupCount=config.backup_count,
            encoding="utf-8",
        )
        file_handler.setLevel(getattr(logging, config.level))
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)

    # httpx logs full request URLs, which carry the provider api_key
    logging.getLogger("httpx").setLevel(logging.WARNING)
    logging.getLogger("httpcore").setLevel(logging.WARNING)

    logging.info(f"Logging configured with level {config.level}")


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance.

    Args:
        name: Logger name (typically __name__).

    Returns:
        Logger instance.
    """
    return logging.getLogger(name)


class LoggerMixin:
    """Mixin class that provides logging functionality."""

    @property
    def logger(self) -> logging.Logger:
        """Get logger for this class."""
        return logging.getLogger(f"{self.__class__.__module__}.{self.__class__.__name__}")
