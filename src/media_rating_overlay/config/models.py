"""Configuration data models."""

import os

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ProviderConfig(BaseModel):
    """Common settings shared by every rating provider."""

    enabled: bool = Field(default=False, description="Enable this rating provider")
    api_key: str = Field(default="", description="API key for the provider")
    language: str = Field(default="", description="Language sent with provider requests")
    region: str = Field(default="", description="Region sent with provider requests")

    @field_validator("api_key")
    @classmethod
    def validate_api_key(cls, v: str) -> str:
        """Expand environment variables in API key."""
        return os.path.expandvars(v)


class TMDbConfig(ProviderConfig):
    """TMDb API configuration."""

    language: str = Field(default="en-US", description="Default language for requests")
    region: str = Field(default="US", description="Default region for requests")


class IMDbConfig(ProviderConfig):
    """IMDb configuration (provider not implemented yet)."""


class RottenTomatoesConfig(ProviderConfig):
    """Rotten Tomatoes configuration (provider not implemented yet)."""


class HTTPClientConfig(BaseModel):
    """Shared HTTP transport configuration."""

    timeout: float = Field(default=30.0, gt=0, description="Per-attempt timeout in seconds")
    max_retries: int = Field(default=3, ge=0, description="Retries after the first attempt")
    backoff_multiplier: float = Field(
        default=0.5, ge=0.0, description="Exponential backoff multiplier in seconds"
    )
    backoff_max: float = Field(default=10.0, gt=0, description="Maximum backoff in seconds")


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = Field(default="INFO", description="Logging level")
    format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log format string",
    )
    log_file_path: str = Field(
        default="logs/media-rating-overlay.log", description="Log file path"
    )
    max_size_mb: int = Field(default=100, gt=0, description="Maximum log file size in MB")
    backup_count: int = Field(default=5, ge=0, description="Number of backup log files")
    use_stdout: bool = Field(default=True, description="Also log to standard output")

    @field_validator("level")
    @classmethod
    def validate_level(cls, v: str) -> str:
        """Validate logging level."""
        allowed = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}
        if v.upper() not in allowed:
            raise ValueError(f"Logging level must be one of: {allowed}")
        return v.upper()


class Config(BaseModel):
    """Main configuration model."""

    tmdb: TMDbConfig = Field(default_factory=TMDbConfig, description="TMDb configuration")
    imdb: IMDbConfig = Field(default_factory=IMDbConfig, description="IMDb configuration")
    rotten: RottenTomatoesConfig = Field(
        default_factory=RottenTomatoesConfig, description="Rotten Tomatoes configuration"
    )
    http: HTTPClientConfig = Field(
        default_factory=HTTPClientConfig, description="HTTP client configuration"
    )
    logger: LoggingConfig = Field(
        default_factory=LoggingConfig, description="Logging configuration"
    )

    model_config = ConfigDict(
        validate_assignment=True,
        populate_by_name=True,
    )
