# Paramline Command Line Parser — (c) 2025 rtj.dev LLC — MIT Licensed
"""config.py
Settings loader for the Paramline command-line tool.

Settings are read from a YAML or TOML file:

    # paramline.yaml
    output_format: json
    log_level: debug
    log_mode: cli

Options given on the command line take precedence over file settings.
"""
from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import Any, Literal

import toml
import yaml
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

from paramline.exceptions import ConfigError
from paramline.logger import logger

OUTPUT_FORMATS = ("tree", "table", "json", "yaml", "toml")
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")

OutputFormat = Literal["tree", "table", "json", "yaml", "toml"]


class Settings(BaseModel):
    """Settings for the `paramline` command-line tool."""

    model_config = ConfigDict(extra="forbid")

    output_format: OutputFormat = "tree"
    log_level: str = "WARNING"
    log_mode: Literal["cli", "json"] | None = None
    log_file: str | None = None

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of: {', '.join(LOG_LEVELS)}")
        return level

    @property
    def console_log_level(self) -> int:
        return logging.getLevelName(self.log_level)

    def merged(self, **overrides: Any) -> Settings:
        """Return a copy with every override that is not None applied."""
        values = self.model_dump()
        values.update(
            {key: value for key, value in overrides.items() if value is not None}
        )
        return Settings(**values)


def find_config() -> Path | None:
    candidates = [
        Path.cwd() / "paramline.yaml",
        Path.cwd() / "paramline.toml",
        Path.cwd() / ".paramline.yaml",
        Path.cwd() / ".paramline.toml",
        Path(os.environ.get("PARAMLINE_CONFIG", "paramline.yaml")),
        Path.home() / ".config" / "paramline" / "paramline.yaml",
        Path.home() / ".config" / "paramline" / "paramline.toml",
    ]
    return next((path for path in candidates if path.is_file()), None)


def _read_file(path: Path) -> Any:
    suffix = path.suffix.lower()
    try:
        with open(path, "r", encoding="UTF-8") as file:
            if suffix in (".yaml", ".yml"):
                return yaml.safe_load(file)
            if suffix == ".toml":
                return toml.load(file)
    except (OSError, UnicodeDecodeError) as error:
        raise ConfigError(f"Could not read settings file '{path}': {error}") from error
    except (yaml.YAMLError, toml.TomlDecodeError) as error:
        raise ConfigError(f"Could not parse settings file '{path}': {error}") from error
    raise ConfigError(
        f"Unsupported settings file type '{suffix or path.name}', "
        "expected .yaml, .yml or .toml"
    )


def load_settings(path: str | Path | None = None) -> Settings:
    """
    Load settings from `path`, or from the first file `find_config()` finds.

    Args:
        path (str | Path | None): Settings file. When None, the default
            locations are searched and defaults are used if none exists.

    Returns:
        Settings: The validated settings.

    Raises:
        ConfigError: If the file cannot be read, parsed or validated.
    """
    config_path = Path(path) if path is not None else find_config()
    if config_path is None:
        return Settings()

    logger.debug("Loading settings from '%s'.", config_path)
    raw = _read_file(config_path)
    if raw is None:
        return Settings()
    if not isinstance(raw, dict):
        raise ConfigError(f"Settings file '{config_path}' must contain a mapping")
    try:
        return Settings(**raw)
    except ValidationError as error:
        raise ConfigError(f"Invalid settings in '{config_path}': {error}") from error
