from pathlib import Path

import pytest

from config.settings import Settings, load_settings
from exceptions import ConfigurationError


def test_defaults_when_environment_is_empty():
    loaded = load_settings({})

    assert loaded.database_url == Settings().database_url
    assert loaded.api_tokens == frozenset()
    assert loaded.log_level == "INFO"
    assert loaded.cors_origins == ("*",)
    assert loaded.port == 8000


def test_reads_prefixed_variables():
    loaded = load_settings({
        "USERS_API_DATABASE_URL": "sqlite:///:memory:",
        "USERS_API_TOKENS": "alpha, beta,,",
        "USERS_API_LOG_LEVEL": "debug",
        "USERS_API_LOG_DIR": "/tmp/users-api-logs",
        "USERS_API_CORS_ORIGINS": "https://a.example, https://b.example",
        "USERS_API_HOST": "0.0.0.0",
        "USERS_API_PORT": "9001",
    })

    assert loaded.database_url == "sqlite:///:memory:"
    assert loaded.api_tokens == frozenset({"alpha", "beta"})
    assert loaded.log_level == "DEBUG"
    assert loaded.log_dir == Path("/tmp/users-api-logs")
    assert loaded.cors_origins == ("https://a.example", "https://b.example")
    assert loaded.host == "0.0.0.0"
    assert loaded.port == 9001


def test_blank_log_dir_disables_file_logging():
    assert load_settings({"USERS_API_LOG_DIR": ""}).log_dir is None


@pytest.mark.parametrize("port", ["http", "0", "70000"])
def test_invalid_port_is_a_configuration_error(port):
    with pytest.raises(ConfigurationError) as exc_info:
        load_settings({"USERS_API_PORT": port})

    assert exc_info.value.details == {"missing_keys": ["USERS_API_PORT"]}
