"""Reddit-dialect markdown → HTML pipeline."""

from redditview.markdown.escape import decode_entities, escape_html
from redditview.markdown.format import format_body, markdown_to_html, normalize_rendered_html
from redditview.markdown.inline import is_image_url
from redditview.markdown.protect import ProtectedSpans

__all__ = [
    "ProtectedSpans",
    "decode_entities",
    "escape_html",
    "format_body",
    "is_image_url",
    "markdown_to_html",
    "normalize_rendered_html",
]
