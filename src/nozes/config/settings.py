"""Pydantic settings for Nozes configuration."""

from functools import lru_cache
from pathlib import Path
from typing import Any, Literal

import yaml
from pydantic import BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from nozes.i18n import Language


def get_config_dir() -> Path:
    """Get the configuration directory (not created until something is saved)."""
    return Path.home() / ".nozes"


def get_config_path() -> Path:
    """Get the path to the config file."""
    return get_config_dir() / "config.yaml"


def _load_yaml_config() -> dict[str, Any]:
    """Load configuration from YAML file if it exists.

    Returns:
        Dictionary of configuration values, or empty dict if file doesn't exist.
    """
    config_path = get_config_path()
    if config_path.exists():
        try:
            with open(config_path, encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except (yaml.YAMLError, OSError):
            # Silently ignore malformed or unreadable config
            return {}
        return data if isinstance(data, dict) else {}
    return {}


class LibrarySettings(BaseModel):
    """Settings for the saved-project library."""

    path: Path = Field(default_factory=lambda: get_config_dir() / "projects.json")


class ExportSettings(BaseModel):
    """Settings for exporters."""

    directory: Path = Field(default_factory=lambda: Path("."))
    tabular_format: Literal["xlsx", "csv"] = "xlsx"
    stylesheet_url: str | None = None  # optional presentation layer for HTML exports


class Settings(BaseSettings):
    """Main settings model for Nozes."""

    model_config = SettingsConfigDict(
        env_prefix="NOZES_",
        env_nested_delimiter="__",
        extra="ignore",
    )

    language: Language = Language.PT
    library: LibrarySettings = Field(default_factory=LibrarySettings)
    export: ExportSettings = Field(default_factory=ExportSettings)


@lru_cache
def get_settings() -> Settings:
    """Get cached settings instance.

    Settings are loaded from (in order of priority, highest first):
    1. YAML config file (~/.nozes/config.yaml), passed as init values
    2. Environment variables (NOZES_* prefix)
    3. Default values
    """
    yaml_config = _load_yaml_config()
    return Settings(**yaml_config)
