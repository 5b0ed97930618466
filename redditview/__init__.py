"""redditview - render archived Reddit threads to HTML."""

__version__ = "0.1.0"
