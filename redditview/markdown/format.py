"""Unified entry point for body text → HTML."""

from __future__ import annotations

import re

from redditview.markdown.blocks import transform_blocks
from redditview.markdown.escape import decode_entities, escape_html
from redditview.markdown.inline import format_inline
from redditview.markdown.paragraphs import assemble_paragraphs
from redditview.markdown.protect import ProtectedSpans

_PARAGRAPH_GAP_RE = re.compile(r"</p>\s*<p>")


def markdown_to_html(text: str) -> str:
    """Render Reddit-flavoured raw text to HTML.

    Escape, then block constructs, then inline constructs, then paragraphs,
    then put the protected fragments back.  Each call gets its own registry.
    """
    if not text or not text.strip():
        return ""

    spans = ProtectedSpans()
    working = escape_html(text.replace("\r\n", "\n").replace("\r", "\n"))
    working = transform_blocks(working, spans)
    working = format_inline(working, spans)
    working = assemble_paragraphs(working, spans)
    return spans.restore_all(working)


def normalize_rendered_html(rendered_html: str) -> str:
    """Light cleanup of pre-rendered HTML shipped with the archive."""
    html = decode_entities(rendered_html)
    return _PARAGRAPH_GAP_RE.sub("</p><p>", html)


def format_body(
    text: str | None,
    rendered_html: str | None = None,
    prefer_rendered_html: bool = True,
) -> str:
    """HTML for one post or comment body.

    Pre-rendered HTML wins when present (unless disabled and raw text is
    available); the dialect transform only ever runs on raw text.
    """
    has_text = bool(text and text.strip())
    if rendered_html and (prefer_rendered_html or not has_text):
        return normalize_rendered_html(rendered_html)
    if not has_text:
        return ""
    return markdown_to_html(text)
