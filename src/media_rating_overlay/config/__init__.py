"""Configuration management module."""

from .config_manager import ConfigManager
from .models import (
    Config,
    HTTPClientConfig,
    IMDbConfig,
    LoggingConfig,
    ProviderConfig,
    RottenTomatoesConfig,
    TMDbConfig,
)

__all__ = [
    "ConfigManager",
    "Config",
    "ProviderConfig",
    "TMDbConfig",
    "IMDbConfig",
    "RottenTomatoesConfig",
    "HTTPClientConfig",
    "LoggingConfig",
]
