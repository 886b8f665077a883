"""Integration test fixtures and configuration."""

import pytest
import yaml


@pytest.fixture
def integration_config(tmp_path):
    """Write a configuration file with every provider disabled.

    Keeps CLI runs offline: no provider is built with network access.
    """
    config_data = {
        "tmdb": {"enabled": False, "api_key": "", "language": "en", "region": "US"},
        "imdb": {"enabled": False},
        "rotten": {"enabled": False},
        "http": {"timeout": 5, "max_retries": 0},
        "logger": {
            "level": "INFO",
            "log_file_path": str(tmp_path / "logs" / "integration.log"),
            "use_stdout": False,
        },
    }

    config_file = tmp_path / "integration_config.yaml"
    with open(config_file, "w", encoding="utf-8") as f:
        yaml.dump(config_data, f, default_flow_style=False)

    return config_file


@pytest.fixture
def tmdb_enabled_config_file(tmp_path, integration_config):
    """Configuration file with TMDB enabled but no API key."""
    with open(integration_config, encoding="utf-8") as f:
        config_data = yaml.safe_load(f)
    config_data["tmdb"]["enabled"] = True

    config_file = tmp_path / "tmdb_without_key.yaml"
    with open(config_file, "w", encoding="utf-8") as f:
        yaml.dump(config_data, f, default_flow_style=False)

    return config_file
