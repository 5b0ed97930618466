"""Line-oriented block constructs: code, rules, quotes and lists.

Two phases.  Every line is first marked by the first rule that claims it,
then each maximal run of same-marked lines collapses into one protected
fragment.  Rules are tried in priority order, which gives the same result as
running them one after another: a collapsed run leaves only a placeholder
line, and no later rule matches a placeholder.

Input is already HTML-escaped, so a quote marker arrives as ``&gt;``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from itertools import groupby

from redditview.markdown.inline import format_inline
from redditview.markdown.protect import ProtectedSpans

_RULES: tuple[tuple[str, re.Pattern], ...] = (
    ("code", re.compile(r"^(?: {4}|\t)(.*)$")),
    ("hr", re.compile(r"^[ \t]*(?:-{3,}|\*{3,}|_{3,})[ \t]*$")),
    ("quote", re.compile(r"^&gt;[ \t]?(.*)$")),
    ("ul", re.compile(r"^[*-][ \t]+(.*)$")),
    ("ol", re.compile(r"^\d+\.[ \t]+(.*)$")),
)


@dataclass(frozen=True)
class MarkedLine:
    kind: str | None  # None for ordinary text
    content: str


def mark_line(line: str) -> MarkedLine:
    for kind, pattern in _RULES:
        m = pattern.match(line)
        if m:
            return MarkedLine(kind, m.group(1) if m.groups() else "")
    return MarkedLine(None, line)


def _collapse(kind: str, contents: list[str], spans: ProtectedSpans) -> list[str]:
    """Turn one run of same-kind lines into placeholder line(s)."""
    if kind == "code":
        code = "\n".join(contents).strip("\n")
        if not code.strip():
            return [""]
        return [spans.protect(f"<pre><code>{code}</code></pre>", block=True)]

    if kind == "hr":
        # every rule line is its own element
        return [spans.protect("<hr>", block=True) for _ in contents]

    if kind == "quote":
        quoted = "\n".join(contents).strip()
        return [spans.protect(f"<blockquote>{quoted}</blockquote>", block=True)]

    # ul / ol: items keep their inline formatting, resolved before the list
    # itself is protected so no token ends up nested inside another.
    items = "".join(
        f"<li>{spans.restore(format_inline(item, spans))}</li>" for item in contents
    )
    return [spans.protect(f"<{kind}>{items}</{kind}>", block=True)]


def transform_blocks(text: str, spans: ProtectedSpans) -> str:
    """Replace every block run in *text* with a placeholder on its own line."""
    marked = [mark_line(line) for line in text.split("\n")]
    out: list[str] = []
    for kind, run in groupby(marked, key=lambda line: line.kind):
        contents = [line.content for line in run]
        if kind is None:
            out.extend(contents)
        else:
            out.extend(_collapse(kind, contents, spans))
    return "\n".join(out)
