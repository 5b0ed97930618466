"""Span-level rewriting: inline code, links, emphasis and bare URLs.

Stages run in a fixed order over whatever text the block pass left
unprotected.  Code, links and images are protected as soon as they are built
so the emphasis stages cannot reach into them.  Bare URLs go last so they
never claim a URL that the explicit ``[text](url)`` syntax already consumed.

All input is already HTML-escaped; nothing here escapes again.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Callable

from redditview.markdown.protect import ProtectedSpans

IMAGE_HOSTS = ("i.redd.it", "i.imgur.com")

_IMAGE_PATH_RE = re.compile(r"\.(?:jpg|jpeg|png|gif|webp)$", re.I)

_CODE_RE = re.compile(r"`([^`]+?)`")
_LINK_RE = re.compile(r"!?\[([^\]]+)\]\(([^)]+)\)")
_BOLD_RES = (
    re.compile(r"\*\*(.+?)\*\*"),
    re.compile(r"__(.+?)__"),
)
_STRIKE_RE = re.compile(r"~~(.+?)~~")
_ITALIC_RES = (
    re.compile(r"(^|[^*])\*([^\s*](?:[^*]*[^\s*])?)\*($|[^*])", re.M),
    re.compile(r"(^|[^_])_([^\s_](?:[^_]*[^\s_])?)_($|[^_])", re.M),
)
_BARE_IMAGE_RE = re.compile(
    r"https?://[^\s<]+\.(?:jpg|jpeg|png|gif|gifv|webp)(?:\?[^\s<]*)?", re.I
)
_BARE_URL_RE = re.compile(r"https?://[^\s<]+", re.I)


def is_image_url(url: str | None) -> bool:
    """Return True for URLs that point straight at an image."""
    if not url:
        return False
    if _IMAGE_PATH_RE.search(url):
        return True
    return any(host in url for host in IMAGE_HOSTS)


def anchor(href: str, label: str) -> str:
    """External link; *href* and *label* must already be escaped."""
    return f'<a href="{href}" target="_blank" rel="noopener noreferrer">{label}</a>'


def image(src: str, alt: str) -> str:
    """Inline image; *src* and *alt* must already be escaped."""
    return f'<img src="{src}" alt="{alt}" />'


# ---------------------------------------------------------------------------
# Stages
# ---------------------------------------------------------------------------

def _code_spans(text: str, spans: ProtectedSpans) -> str:
    return _CODE_RE.sub(lambda m: spans.protect(f"<code>{m.group(1)}</code>"), text)


def _links(text: str, spans: ProtectedSpans) -> str:
    def repl(m: re.Match) -> str:
        label, url = m.group(1), m.group(2)
        if is_image_url(url):
            return spans.protect(image(url, label))
        return spans.protect(anchor(url, label))

    return _LINK_RE.sub(repl, text)


def _bold(text: str, spans: ProtectedSpans) -> str:
    for pattern in _BOLD_RES:
        text = pattern.sub(r"<strong>\1</strong>", text)
    return text


def _strikethrough(text: str, spans: ProtectedSpans) -> str:
    return _STRIKE_RE.sub(r"<del>\1</del>", text)


def _italic_repl(m: re.Match) -> str:
    # Anything carrying a tag was produced by an earlier stage; leave it alone.
    if "<" in m.group(0) or ">" in m.group(0):
        return m.group(0)
    return f"{m.group(1)}<em>{m.group(2)}</em>{m.group(3)}"


def _italic(text: str, spans: ProtectedSpans) -> str:
    for pattern in _ITALIC_RES:
        text = pattern.sub(_italic_repl, text)
    return text


def _bare_images(text: str, spans: ProtectedSpans) -> str:
    return _BARE_IMAGE_RE.sub(lambda m: spans.protect(image(m.group(0), "Image")), text)


def _bare_urls(text: str, spans: ProtectedSpans) -> str:
    return _BARE_URL_RE.sub(lambda m: spans.protect(anchor(m.group(0), m.group(0))), text)


@dataclass(frozen=True)
class InlineStage:
    name: str
    apply: Callable[[str, ProtectedSpans], str]


INLINE_STAGES: tuple[InlineStage, ...] = (
    InlineStage("code", _code_spans),
    InlineStage("links", _links),
    InlineStage("bold", _bold),
    InlineStage("strikethrough", _strikethrough),
    InlineStage("italic", _italic),
    InlineStage("bare_images", _bare_images),
    InlineStage("bare_urls", _bare_urls),
)


def format_inline(text: str, spans: ProtectedSpans) -> str:
    """Run every inline stage over *text*, threading the same registry."""
    for stage in INLINE_STAGES:
        text = stage.apply(text, spans)
    return text
