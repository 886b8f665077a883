"""Test configuration management."""

from pathlib import Path

import pytest
import yaml
from pydantic import ValidationError

from media_rating_overlay.config import Config, ConfigManager, HTTPClientConfig, TMDbConfig
from media_rating_overlay.utils import ConfigurationError


def test_config_manager_loads_config(config_manager):
    """Test that config manager loads configuration correctly."""
    config = config_manager.load_config()

    assert isinstance(config, Config)
    assert config.tmdb.enabled is True
    assert config.tmdb.api_key == "test-tmdb-key"
    assert config.tmdb.language == "en"
    assert config.tmdb.region == "US"
    assert config.http.timeout == 5
    assert config.http.max_retries == 2
    assert config.logger.level == "DEBUG"


def test_config_manager_caches_config(config_manager):
    """Test that config manager caches loaded configuration."""
    config1 = config_manager.load_config()
    config2 = config_manager.get_config()

    assert config1 is config2


def test_config_manager_reload_config(config_manager):
    """Test that config manager can reload configuration."""
    config1 = config_manager.load_config()
    config2 = config_manager.reload_config()

    assert config1 is not config2
    assert config1.tmdb.api_key == config2.tmdb.api_key


def test_config_manager_missing_file():
    """Test that config manager raises error for missing file."""
    config_manager = ConfigManager(Path("nonexistent.yaml"))

    with pytest.raises(FileNotFoundError):
        config_manager.load_config()


def test_config_manager_expands_environment_variables(tmp_path, monkeypatch):
    """Test that ${VAR} references are expanded from the environment."""
    monkeypatch.setenv("TEST_TMDB_API_KEY", "from-env")
    config_file = tmp_path / "env.yaml"
    config_file.write_text('tmdb:\n  enabled: true\n  api_key: "${TEST_TMDB_API_KEY}"\n')

    config = ConfigManager(config_file).load_config()

    assert config.tmdb.api_key == "from-env"


def test_config_manager_empty_file_uses_defaults(tmp_path):
    """Test that an empty file yields the default configuration."""
    config_file = tmp_path / "empty.yaml"
    config_file.write_text("")

    config = ConfigManager(config_file).load_config()

    assert config == Config()


def test_config_manager_rejects_non_mapping_root(tmp_path):
    """Test that a YAML list at root level is rejected."""
    config_file = tmp_path / "list.yaml"
    config_file.write_text("- tmdb\n- imdb\n")

    with pytest.raises(yaml.YAMLError):
        ConfigManager(config_file).load_config()


def test_config_validation_invalid_http_settings(tmp_path):
    """Test config validation with a negative retry count."""
    config_file = tmp_path / "invalid.yaml"
    config_file.write_text("http:\n  timeout: 0\n  max_retries: -1\n")

    config_manager = ConfigManager(config_file)

    with pytest.raises(ConfigurationError):
        config_manager.load_config()


def test_config_validation_invalid_log_level(tmp_path):
    """Test config validation with an unknown logging level."""
    config_file = tmp_path / "invalid.yaml"
    config_file.write_text("logger:\n  level: chatty\n")

    with pytest.raises(ConfigurationError):
        ConfigManager(config_file).load_config()


def test_defaults():
    """Test default values of the configuration models."""
    config = Config()

    assert config.tmdb.enabled is False
    assert config.tmdb.language == "en-US"
    assert config.tmdb.region == "US"
    assert config.imdb.enabled is False
    assert config.rotten.enabled is False
    assert config.http.timeout == 30
    assert config.http.max_retries == 3
    assert config.logger.log_file_path == "logs/media-rating-overlay.log"


def test_enabled_provider_without_api_key_is_valid_config():
    """Missing credentials are reported when the provider is built, not here."""
    tmdb = TMDbConfig(enabled=True)

    assert tmdb.api_key == ""


def test_http_config_rejects_non_positive_timeout():
    """Test that the HTTP timeout must be positive."""
    with pytest.raises(ValidationError):
        HTTPClientConfig(timeout=0)


def test_create_default_config(tmp_path):
    """Test creating default configuration file."""
    output_path = tmp_path / "default_config.yaml"

    ConfigManager.create_default_config(output_path)

    assert output_path.exists()

    config_manager = ConfigManager(output_path)
    config = config_manager.load_config()
    assert isinstance(config, Config)
    assert config.tmdb.enabled is True


def test_validate_config_file(tmp_path, temp_config_file):
    """Test validating files without caching them."""
    invalid_file = tmp_path / "invalid.yaml"
    invalid_file.write_text("http:\n  max_retries: -1\n")

    config_manager = ConfigManager(temp_config_file)

    assert config_manager.validate_config_file(temp_config_file) is True
    assert config_manager.validate_config_file(invalid_file) is False
