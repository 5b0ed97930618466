"""Configuration module for redditview."""

from redditview.config.loader import get_config_path, load_config
from redditview.config.schema import Config, DataConfig, LoggingConfig, RenderConfig

__all__ = ["Config", "DataConfig", "LoggingConfig", "RenderConfig", "get_config_path", "load_config"]
