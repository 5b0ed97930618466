"""Configuration loading: JSON file plus environment overrides."""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import ValidationError

from redditview.config.schema import Config
from redditview.errors import ConfigError

ENV_DATA_DIR = "REDDITVIEW_DATA_DIR"
ENV_DEV_MODE = "REDDITVIEW_DEV_MODE"
ENV_LOG_LEVEL = "REDDITVIEW_LOG_LEVEL"


def get_config_path() -> Path:
    """Default configuration file location."""
    return Path.home() / ".redditview" / "config.json"


def load_config(config_path: Path | None = None) -> Config:
    """Load configuration from *config_path* (or the default location).

    A missing file is not an error: defaults apply.  Environment variables
    override whatever the file says.
    """
    path = config_path or get_config_path()
    data: dict[str, Any] = {}

    if path.exists():
        try:
            with open(path, encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise ConfigError(f"Failed to read config from {path}: {e}") from e
        logger.debug(f"Loaded config from {path}")
    elif config_path is not None:
        raise ConfigError(f"Config file not found: {path}")

    _apply_env_overrides(data)

    try:
        return Config.model_validate(data)
    except ValidationError as e:
        raise ConfigError(f"Invalid config in {path}: {e}") from e


def _apply_env_overrides(data: dict[str, Any]) -> None:
    if ENV_DATA_DIR in os.environ:
        data.setdefault("data", {})["data_dir"] = os.environ[ENV_DATA_DIR]
    if ENV_DEV_MODE in os.environ:
        data.setdefault("data", {})["dev_mode"] = os.environ[ENV_DEV_MODE].lower() == "true"
    if ENV_LOG_LEVEL in os.environ:
        data.setdefault("logging", {})["level"] = os.environ[ENV_LOG_LEVEL].upper()
