"""Tests for NumericsConfig."""

import pytest
from structlog.testing import capture_logs

from numerics.config import NumericsConfig
from numerics.constants import (
    DEFAULT_DIVISION_SCALE,
    ENV_CONVERSION_DIGIT_LIMIT,
    ENV_DIVISION_SCALE,
    MAX_CONVERSION_DIGITS,
)


class TestNumericsConfig:
    def test_defaults(self):
        config = NumericsConfig()
        assert config.division_scale == DEFAULT_DIVISION_SCALE == 50
        assert config.conversion_digit_limit == MAX_CONVERSION_DIGITS == 1000

    def test_frozen(self):
        config = NumericsConfig()
        with pytest.raises(AttributeError):
            config.division_scale = 10  # type: ignore

    def test_negative_values_raise(self):
        with pytest.raises(ValueError):
            NumericsConfig(division_scale=-1)
        with pytest.raises(ValueError):
            NumericsConfig(conversion_digit_limit=-1)


class TestNumericsConfigFromEnv:
    """Tests for reading configuration from environment variables."""

    def test_empty_environment_uses_defaults(self):
        assert NumericsConfig.from_env({}) == NumericsConfig()

    def test_reads_values(self):
        config = NumericsConfig.from_env(
            {ENV_DIVISION_SCALE: "12", ENV_CONVERSION_DIGIT_LIMIT: "400"}
        )
        assert config.division_scale == 12
        assert config.conversion_digit_limit == 400

    def test_blank_value_uses_default(self):
        config = NumericsConfig.from_env({ENV_DIVISION_SCALE: "  "})
        assert config.division_scale == DEFAULT_DIVISION_SCALE

    def test_malformed_value_logs_and_uses_default(self):
        with capture_logs() as logs:
            config = NumericsConfig.from_env({ENV_DIVISION_SCALE: "fifty"})
        assert config.division_scale == DEFAULT_DIVISION_SCALE
        assert logs[0]["event"] == "config_invalid_env_value"
        assert logs[0]["name"] == ENV_DIVISION_SCALE

    def test_negative_value_logs_and_uses_default(self):
        with capture_logs() as logs:
            config = NumericsConfig.from_env({ENV_CONVERSION_DIGIT_LIMIT: "-5"})
        assert config.conversion_digit_limit == MAX_CONVERSION_DIGITS
        assert logs[0]["event"] == "config_negative_env_value"

    def test_reads_os_environ(self, monkeypatch):
        monkeypatch.setenv(ENV_DIVISION_SCALE, "7")
        assert NumericsConfig.from_env().division_scale == 7
