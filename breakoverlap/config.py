"""
Configuration management using Pydantic models.
"""

from pathlib import Path

import yaml
from pydantic import BaseModel, ConfigDict, field_validator

CONFIG_FILE_NAME = "breakoverlap.yaml"


class TimelineConfig(BaseModel):
    """
    Parsing and loading policy for break times.

    Set once at startup and passed into the parser and the engine.
    """
    model_config = ConfigDict(frozen=True)

    time_format: str = "HH:mm"  # pendulum tokens, applied to each half
    time_string_length: int = 10  # e.g. "10:0011:15"
    allow_equal_endpoints: bool = True
    all_or_nothing_file_load: bool = False

    @field_validator("time_format")
    @classmethod
    def validate_time_format(cls, value: str) -> str:
        """Ensure a time pattern is given."""
        if not value.strip():
            raise ValueError("time_format must not be empty")
        return value

    @field_validator("time_string_length")
    @classmethod
    def validate_time_string_length(cls, value: int) -> int:
        """Ensure the combined string splits into two equal halves."""
        if value <= 0 or value % 2:
            raise ValueError(f"time_string_length must be a positive even number, got {value}")
        return value

    @property
    def half_length(self) -> int:
        return self.time_string_length // 2

    @classmethod
    def load_from_yaml(cls, config_path: Path) -> "TimelineConfig":
        """
        Load configuration from YAML file.

        Args:
            config_path: Path to the YAML config file

        Returns:
            TimelineConfig instance

        Raises:
            FileNotFoundError: If config file doesn't exist
            ValueError: If config is invalid
        """
        if not config_path.exists():
            raise FileNotFoundError(f"Config file not found: {config_path}")

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid YAML in {config_path}: {exc}") from exc

        if not isinstance(data, dict):
            raise ValueError("Config file must contain a mapping at the root level.")

        return cls(**data)


def get_default_config_path() -> Path:
    """Get the default configuration file path."""
    # Look for breakoverlap.yaml in current directory
    config_path = Path.cwd() / CONFIG_FILE_NAME

    if not config_path.exists():
        # Try in the project root (parent of the package)
        project_root = Path(__file__).parent.parent
        config_path = project_root / CONFIG_FILE_NAME

    return config_path


def load_config(config_path: Path | None = None) -> TimelineConfig:
    """
    Load the configuration, falling back to defaults.

    An explicitly requested file must exist; the default location is optional.
    """
    if config_path is not None:
        return TimelineConfig.load_from_yaml(config_path)

    default_path = get_default_config_path()
    if default_path.exists():
        return TimelineConfig.load_from_yaml(default_path)
    return TimelineConfig()
