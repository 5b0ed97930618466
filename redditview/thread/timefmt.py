"""Relative timestamps and compact counts for thread headers."""

from __future__ import annotations

import time
from datetime import datetime, timezone

_MINUTE = 60
_HOUR = 3600
_DAY = 86400
_MONTH = 30 * _DAY


def _ago(value: int, unit: str) -> str:
    return f"{value} {unit}{'' if value == 1 else 's'} ago"


def format_time(ts: float, now: float | None = None, date_format: str = "%Y-%m-%d") -> str:
    """``just now`` / ``N minutes ago`` / ... / absolute UTC date past 30 days."""
    diff = (time.time() if now is None else now) - ts
    if diff < _MINUTE:
        return "just now"
    if diff < _HOUR:
        return _ago(int(diff // _MINUTE), "minute")
    if diff < _DAY:
        return _ago(int(diff // _HOUR), "hour")
    if diff < _MONTH:
        return _ago(int(diff // _DAY), "day")
    return datetime.fromtimestamp(ts, tz=timezone.utc).strftime(date_format)


def format_num(num: int) -> str:
    if num >= 1_000_000:
        return f"{num / 1_000_000:.1f}M"
    if num >= 1_000:
        return f"{num / 1_000:.1f}k"
    return str(num)
