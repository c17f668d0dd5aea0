"""
Tests for configuration loading.
"""

import pytest
from pydantic import ValidationError

from daytimeline.config import AppConfig, RangeDefaults
from daytimeline.domain.exceptions import ConfigError


def _write(tmp_path, content):
    path = tmp_path / "daytimeline.yaml"
    path.write_text(content, encoding="utf-8")
    return path


class TestRangeDefaults:
    """Tests for RangeDefaults validation."""

    def test_defaults(self):
        """Test the built-in search window."""
        defaults = RangeDefaults()

        assert defaults.range_start == "06:00"
        assert defaults.range_end == "22:00"
        assert defaults.min_duration_minutes == 0

    def test_invalid_time(self):
        """Test that malformed times are rejected."""
        with pytest.raises(ValidationError, match="HH:MM"):
            RangeDefaults(range_start="6am")

    def test_non_string_time(self):
        """Test that numbers are rejected with a hint to quote them."""
        with pytest.raises(ValidationError, match="quoted"):
            RangeDefaults(range_end=630)

    def test_range_order(self):
        """Test that the window must open before it closes."""
        with pytest.raises(ValidationError, match="range_end must be later"):
            RangeDefaults(range_start="18:00", range_end="08:00")

    def test_negative_duration(self):
        """Test that a negative minimum duration is rejected."""
        with pytest.raises(ValidationError, match="must not be negative"):
            RangeDefaults(min_duration_minutes=-5)


class TestAppConfig:
    """Tests for AppConfig loading."""

    def test_load_from_yaml(self, tmp_path):
        """Test loading a full config file."""
        path = _write(
            tmp_path,
            'defaults:\n'
            '  range_start: "08:00"\n'
            '  range_end: "18:00"\n'
            '  min_duration_minutes: 30\n'
            'strict: true\n'
            'log_level: debug\n'
            'busy_file: busy.yaml\n',
        )

        config = AppConfig.load_from_yaml(path)

        assert config.defaults.range_start == "08:00"
        assert config.defaults.range_end == "18:00"
        assert config.defaults.min_duration_minutes == 30
        assert config.strict is True
        assert config.log_level == "DEBUG"
        assert config.busy_file == "busy.yaml"

    def test_empty_file_uses_defaults(self, tmp_path):
        """Test that an empty file yields the default configuration."""
        config = AppConfig.load_from_yaml(_write(tmp_path, ""))

        assert config == AppConfig()
        assert config.log_level == "WARNING"
        assert config.busy_file is None

    def test_missing_file(self, tmp_path):
        """Test that a missing file raises ConfigError."""
        with pytest.raises(ConfigError, match="Config file not found"):
            AppConfig.load_from_yaml(tmp_path / "missing.yaml")

    def test_invalid_yaml(self, tmp_path):
        """Test that a YAML syntax error raises ConfigError."""
        with pytest.raises(ConfigError, match="Invalid YAML"):
            AppConfig.load_from_yaml(_write(tmp_path, "defaults: [\n"))

    def test_root_must_be_mapping(self, tmp_path):
        """Test that a list at the root is rejected."""
        with pytest.raises(ConfigError, match="mapping at the root"):
            AppConfig.load_from_yaml(_write(tmp_path, "- a\n- b\n"))

    def test_validation_error_wrapped(self, tmp_path):
        """Test that field validation failures surface as ConfigError."""
        path = _write(tmp_path, 'defaults:\n  range_start: "25:00"\n')

        with pytest.raises(ConfigError, match="Invalid configuration"):
            AppConfig.load_from_yaml(path)

    def test_unquoted_time_rejected(self, tmp_path):
        """Test that an unquoted 10:30 is reported instead of misread."""
        path = _write(tmp_path, "defaults:\n  range_start: 10:30\n")

        with pytest.raises(ConfigError, match="quoted"):
            AppConfig.load_from_yaml(path)

    def test_unknown_log_level(self):
        """Test that unknown log levels are rejected."""
        with pytest.raises(ValidationError, match="Unknown log level"):
            AppConfig(log_level="chatty")
