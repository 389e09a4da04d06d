"""Configuration loading."""

from .loader import DEFAULT_CONFIG_FILE, default_config_path, load_config

__all__ = ["DEFAULT_CONFIG_FILE", "default_config_path", "load_config"]
