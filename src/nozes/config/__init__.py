"""Configuration for Nozes."""

from nozes.config.settings import Settings, get_config_dir, get_config_path, get_settings

__all__ = ["Settings", "get_settings", "get_config_dir", "get_config_path"]
