"""HTML escaping for user-authored text."""

from __future__ import annotations

import html

_ESCAPE_TABLE = str.maketrans({
    "&": "&amp;",
    "<": "&lt;",
    ">": "&gt;",
    '"': "&quot;",
    "'": "&#39;",
})


def escape_html(text: str) -> str:
    """Escape the five markup-significant characters."""
    return text.translate(_ESCAPE_TABLE)


def decode_entities(text: str | None) -> str:
    """Decode entity-escaped text from the archive (titles, URLs, *_html fields)."""
    if not text:
        return ""
    return html.unescape(text)
