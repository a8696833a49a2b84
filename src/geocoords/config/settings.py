# src/geocoords/config/settings.py
"""
Application settings (Pydantic).

Settings are loaded from `src/geocoords/config/defaults.yaml`, then optionally overridden by:
- an external YAML file via `GEOCOORDS_CONFIG_PATH`
- environment variables (`GEOCOORDS_LOG_LEVEL`, `GEOCOORDS_DELIMITER`)

The coordinate types never read settings; only entrypoints (CLI) do.
"""

from __future__ import annotations

import os
from functools import lru_cache
from importlib import resources
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field, field_validator

from geocoords.core.env import load_dotenv_if_present


def _read_package_yaml(filename: str) -> dict[str, Any]:
    """Read a YAML file packaged inside `geocoords.config`."""
    text = resources.files("geocoords.config").joinpath(filename).read_text(encoding="utf-8")
    data = yaml.safe_load(text) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {filename}; expected a mapping.")
    return data


def _read_yaml_file(path: str | Path) -> dict[str, Any]:
    """Read a YAML file from disk and return its mapping root."""
    data = yaml.safe_load(Path(path).read_text(encoding="utf-8")) or {}
    if not isinstance(data, dict):
        raise ValueError(f"Invalid YAML root object for {path}; expected a mapping.")
    return data


class AppSettings(BaseModel):
    name: str = "geocoords"
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"

    @field_validator("log_level", mode="before")
    @classmethod
    def _normalize_log_level(cls, value: Any) -> Any:
        # Accept `debug` as well as `DEBUG` from env/YAML.
        return value.strip().upper() if isinstance(value, str) else value


class CodecSettings(BaseModel):
    delimiter: str = Field(",", min_length=1)


class OutputSettings(BaseModel):
    distance_decimals: int = Field(3, ge=0, le=12)


class Settings(BaseModel):
    app: AppSettings = Field(default_factory=AppSettings)
    codec: CodecSettings = Field(default_factory=CodecSettings)
    output: OutputSettings = Field(default_factory=OutputSettings)


def _apply_env_overrides(data: dict[str, Any]) -> dict[str, Any]:
    """Overlay selected environment variables onto raw settings payload."""
    load_dotenv_if_present()
    data = dict(data)

    log_level = os.getenv("GEOCOORDS_LOG_LEVEL")
    if log_level:
        data.setdefault("app", {})["log_level"] = log_level

    delimiter = os.getenv("GEOCOORDS_DELIMITER")
    if delimiter:
        data.setdefault("codec", {})["delimiter"] = delimiter

    return data


@lru_cache
def get_settings() -> Settings:
    """Load and validate settings (cached)."""
    load_dotenv_if_present()
    config_path = os.getenv("GEOCOORDS_CONFIG_PATH")
    raw = _read_yaml_file(config_path) if config_path else _read_package_yaml("defaults.yaml")
    raw = _apply_env_overrides(raw)
    return Settings.model_validate(raw)


@lru_cache
def get_logging_config() -> dict[str, Any]:
    """Load logging configuration (cached)."""
    return _read_package_yaml("logging.yaml")
