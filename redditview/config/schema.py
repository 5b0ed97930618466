"""Configuration schema using Pydantic."""

from __future__ import annotations

from pydantic import BaseModel, Field


class RenderConfig(BaseModel):
    """Rendering behaviour."""

    prefer_rendered_html: bool = True  # use body_html/selftext_html when the archive has it
    max_recursive_depth: int = Field(default=200, ge=1, le=400)  # deeper threads use the explicit-stack walk
    stylesheet_href: str | None = None
    timestamp_format: str = "%Y-%m-%d"  # for items older than 30 days


class LoggingConfig(BaseModel):
    level: str = "INFO"
    file: str | None = None


class DataConfig(BaseModel):
    """Where archived threads live."""

    data_dir: str = "data"
    dev_mode: bool = False  # show the back-to-index link on rendered pages


class Config(BaseModel):
    """Root configuration for redditview."""

    render: RenderConfig = Field(default_factory=RenderConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    data: DataConfig = Field(default_factory=DataConfig)
