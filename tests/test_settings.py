"""
Tests for configuration loading and startup port validation.

Run with: pytest tests/test_settings.py -v
"""

import pytest

from scaffold_api.__main__ import validate_port
from scaffold_api.config.settings import (
    AppConfig,
    load_app_config,
    load_database_config,
    load_logging_config,
    parse_int,
)
from scaffold_api.domain.exceptions import ConfigurationError


class TestAppConfig:
    """Test environment -> AppConfig mapping."""

    def test_defaults_when_nothing_is_set(self):
        config = load_app_config({})

        assert config == AppConfig(
            port=4200, environment="development", api_prefix="v1", log_level="info"
        )

    def test_empty_values_fall_back_to_defaults(self):
        config = load_app_config(
            {"PORT": "", "APP_ENV": "", "API_PREFIX": "", "LOG_LEVEL": ""}
        )

        assert config.port == 4200
        assert config.environment == "development"
        assert config.api_prefix == "v1"
        assert config.log_level == "info"

    def test_values_are_read_from_environment(self):
        config = load_app_config(
            {
                "PORT": "8080",
                "APP_ENV": "production",
                "API_PREFIX": "api",
                "LOG_LEVEL": "debug",
            }
        )

        assert config.port == 8080
        assert config.environment == "production"
        assert config.is_production
        assert config.api_prefix == "api"
        assert config.log_level == "debug"

    def test_node_env_is_used_when_app_env_is_absent(self):
        assert load_app_config({"NODE_ENV": "staging"}).environment == "staging"
        assert (
            load_app_config({"NODE_ENV": "staging", "APP_ENV": "qa"}).environment
            == "qa"
        )

    def test_port_ignores_trailing_characters(self):
        assert load_app_config({"PORT": "8080abc"}).port == 8080

    def test_unparsable_port_is_none(self):
        assert load_app_config({"PORT": "abc"}).port is None

    def test_non_ascii_digits_are_not_a_port(self):
        assert load_app_config({"PORT": "\u0668\u0660\u0668\u0660"}).port is None

    def test_config_is_immutable(self):
        config = load_app_config({})
        with pytest.raises(AttributeError):
            config.port = 1


class TestParseInt:
    @pytest.mark.parametrize(
        "raw, expected",
        [("42", 42), ("  7  ", 7), ("-3", -3), ("12.9", 12), ("x1", None), (None, None)],
    )
    def test_leading_integer(self, raw, expected):
        assert parse_int(raw) == expected


class TestOtherConfigs:
    def test_database_defaults(self):
        config = load_database_config({})

        assert config.url == ""
        assert config.provider == "postgresql"
        assert config.logging is False
        assert config.connect_timeout == 10

    def test_database_unknown_provider_falls_back(self):
        config = load_database_config(
            {"DATABASE_PROVIDER": "oracle", "DATABASE_LOGGING": "TRUE"}
        )

        assert config.provider == "postgresql"
        assert config.logging is True

    def test_database_bad_timeout_uses_default(self):
        assert load_database_config({"DATABASE_CONNECT_TIMEOUT": "soon"}).connect_timeout == 10

    def test_logging_values(self):
        config = load_logging_config({"LOG_DIR": "/tmp/x", "LOG_BACKUP_COUNT": "3"})

        assert config.log_dir == "/tmp/x"
        assert config.backup_count == 3
        assert "%(correlation_id)s" in config.log_format

    def test_logging_accepts_older_rotation_names(self):
        config = load_logging_config({"LOG_MAX_SIZE": "2048", "LOG_MAX_FILES": "3"})

        assert config.max_bytes == 2048
        assert config.backup_count == 3

    def test_logging_newer_rotation_names_win(self):
        config = load_logging_config({"LOG_MAX_BYTES": "4096", "LOG_MAX_SIZE": "2048"})

        assert config.max_bytes == 4096


class TestValidatePort:
    """Test that the server entry point rejects unusable ports."""

    def test_valid_port_is_returned(self):
        assert validate_port(load_app_config({"PORT": "3000"})) == 3000

    @pytest.mark.parametrize("raw", ["abc", "0", "70000", "-1"])
    def test_invalid_port_raises(self, raw):
        with pytest.raises(ConfigurationError):
            validate_port(load_app_config({"PORT": raw}))
