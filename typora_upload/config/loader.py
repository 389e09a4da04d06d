"""Configuration file loading."""

from __future__ import annotations

import os
from pathlib import Path

import yaml

from typora_upload.errors import ConfigError
from typora_upload.models.config import UploaderConfig

DEFAULT_CONFIG_FILE = "typora-upload-config.yaml"
CONFIG_ENV_VAR = "TYPORA_UPLOAD_CONFIG"


def default_config_path() -> Path:
    """Return the config path used when none is given on the command line.

    ``TYPORA_UPLOAD_CONFIG`` wins over the built-in file name.
    """
    return Path(os.getenv(CONFIG_ENV_VAR) or DEFAULT_CONFIG_FILE)


def _as_text(key: str, value: object) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ConfigError(f"failed to parse config file: {key} must be a string")
    return value


def load_config(config_file: Path | str) -> UploaderConfig:
    """Load and validate the uploader configuration.

    Args:
        config_file: Path to a YAML file with ``api_url``, ``username`` and ``password``

    Returns:
        UploaderConfig: The validated configuration

    Raises:
        ConfigError: If the file cannot be read or parsed, or a required key is empty
    """
    try:
        raw = Path(config_file).read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as e:
        raise ConfigError(f"failed to read config file: {e}") from e

    try:
        # BaseLoader keeps every scalar as written, e.g. a password of 0123 stays "0123"
        data = yaml.load(raw, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise ConfigError(f"failed to parse config file: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(
            f"failed to parse config file: expected a mapping in {config_file}"
        )

    api_url = _as_text("api_url", data.get("api_url"))
    username = _as_text("username", data.get("username"))
    password = _as_text("password", data.get("password"))

    if not api_url:
        raise ConfigError("api_url is required in config")
    if not username or not password:
        raise ConfigError("username and password are required in config")

    return UploaderConfig(api_url=api_url, username=username, password=password)
