"""CLI module for redditview."""
