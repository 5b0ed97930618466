"""Exceptions raised at the edges (archive loading, configuration).

The rendering pipeline itself never raises for content reasons.
"""


class RedditViewError(Exception):
    """Base class for redditview errors."""


class ThreadLoadError(RedditViewError):
    """An archived thread could not be read or has an unexpected shape."""


class ConfigError(RedditViewError):
    """The configuration file is unreadable or invalid."""
