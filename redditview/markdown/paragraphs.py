"""Paragraph assembly over fully transformed text."""

from __future__ import annotations

import re
from itertools import groupby

from redditview.markdown.protect import ProtectedSpans

_PARAGRAPH_BREAK_RE = re.compile(r"\n{2,}")


def assemble_paragraphs(text: str, spans: ProtectedSpans) -> str:
    """Wrap text runs in ``<p>``; block placeholders pass through unwrapped.

    Paragraphs are separated by two or more newlines.  Inside a paragraph a
    single newline becomes ``<br>``.  A block placeholder sitting directly
    against text (no blank line between) still comes out unwrapped, with the
    text on either side forming its own paragraph.
    """
    parts: list[str] = []
    for candidate in _PARAGRAPH_BREAK_RE.split(text):
        candidate = candidate.strip()
        if not candidate:
            continue
        for is_block, run in groupby(candidate.split("\n"), key=spans.is_block):
            lines = list(run)
            if is_block:
                parts.extend(line.strip() for line in lines)
                continue
            body = "<br>".join(lines)
            if body.strip():
                parts.append(f"<p>{body}</p>")
    return "".join(parts)
