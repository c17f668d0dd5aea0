"""
Configuration management using Pydantic models loaded from YAML.
"""

import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator, model_validator

from .domain.clock import parse_time
from .domain.exceptions import ConfigError

CONFIG_FILE_NAME = "daytimeline.yaml"


class RangeDefaults(BaseModel):
    """Default search window and filtering."""
    range_start: str = "06:00"
    range_end: str = "22:00"
    min_duration_minutes: int = 0

    @field_validator("range_start", "range_end", mode="before")
    @classmethod
    def validate_time(cls, value: Any) -> str:
        """Validate the value is an HH:MM wall-clock string."""
        # Unquoted 10:30 is read by YAML 1.1 as the integer 630.
        if not isinstance(value, str):
            raise ValueError(f"Time must be a quoted 'HH:MM' string, got {value!r}")
        if parse_time(value) is None:
            raise ValueError(f"Time must be HH:MM between 00:00 and 23:59, got {value!r}")
        return value.strip()

    @field_validator("min_duration_minutes")
    @classmethod
    def validate_duration(cls, value: int) -> int:
        """Ensure the minimum duration is not negative."""
        if value < 0:
            raise ValueError("min_duration_minutes must not be negative")
        return value

    @model_validator(mode="after")
    def validate_range_order(self) -> "RangeDefaults":
        """Ensure the window opens before it closes."""
        if parse_time(self.range_end) <= parse_time(self.range_start):
            raise ValueError("range_end must be later than range_start")
        return self


class AppConfig(BaseModel):
    """Application configuration."""
    defaults: RangeDefaults = Field(default_factory=RangeDefaults)
    strict: bool = False
    log_level: str = "WARNING"
    busy_file: str | None = None

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        """Ensure the level is one the logging module knows."""
        level = value.upper()
        if not isinstance(logging.getLevelName(level), int):
            raise ValueError(f"Unknown log level: {value}")
        return level

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "AppConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            AppConfig instance

        Raises:
            ConfigError: If the file is missing or its content is invalid
        """
        if not config_path.exists():
            raise ConfigError(
                f"Config file not found: {config_path}\n"
                f"Please create a {CONFIG_FILE_NAME} file. See daytimeline.example.yaml for reference."
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ConfigError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ConfigError("Config file must contain a mapping at the root level.")

        try:
            return cls(**data)
        except ValidationError as exc:
            raise ConfigError(f"Invalid configuration in {config_path}:\n{exc}") from exc


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look in the current directory first
    config_path = Path.cwd() / CONFIG_FILE_NAME

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / CONFIG_FILE_NAME

    return config_path
