"""Comment forest → nested HTML.

Each real comment becomes a ``<div class="comment">`` holding its header,
its body and, inside it, the rendered replies.  Replies at depth > 0 carry
the ``nested`` class.  "more" placeholder nodes produce nothing and are never
expanded.

:func:`render_comments` is the natural recursive walk.
:func:`render_comments_iter` emits byte-identical output with an explicit
stack, and :func:`render_comment_tree` switches to it for threads deeper than
``RenderConfig.max_recursive_depth``.
"""

from __future__ import annotations

import time
from typing import Sequence

from loguru import logger

from redditview.config.schema import RenderConfig
from redditview.markdown.escape import escape_html
from redditview.markdown.format import format_body
from redditview.thread.models import Comment
from redditview.thread.timefmt import format_time

_COMMENT_CLOSE = "</div>"


def _comment_open(node: Comment, depth: int, config: RenderConfig, now: float) -> str:
    """Everything of a comment up to (not including) its replies and closing tag."""
    css = "comment nested" if depth > 0 else "comment"
    when = format_time(node.created_utc, now, config.timestamp_format)
    body = format_body(node.body, node.body_html, config.prefer_rendered_html)
    return (
        f'<div class="{css}">'
        '<div class="comment-author">'
        f'<span class="comment-author-name">u/{escape_html(node.author)}</span>'
        f"<span>• {when}</span>"
        "</div>"
        f'<div class="comment-body">{body}</div>'
    )


def render_comments(
    nodes: Sequence[Comment],
    depth: int = 0,
    *,
    config: RenderConfig | None = None,
    now: float | None = None,
) -> str:
    """Recursive rendering of *nodes* and all their replies."""
    config = config or RenderConfig()
    now = time.time() if now is None else now
    return "".join(
        _comment_open(node, depth, config, now)
        + render_comments(node.replies, depth + 1, config=config, now=now)
        + _COMMENT_CLOSE
        for node in nodes
        if node.is_comment
    )


def render_comments_iter(
    nodes: Sequence[Comment],
    depth: int = 0,
    *,
    config: RenderConfig | None = None,
    now: float | None = None,
) -> str:
    """Same output as :func:`render_comments`, without recursion."""
    config = config or RenderConfig()
    now = time.time() if now is None else now

    parts: list[str] = []
    # (node, depth); a None node closes the comment opened at that depth
    stack: list[tuple[Comment | None, int]] = [(node, depth) for node in reversed(nodes)]
    while stack:
        node, level = stack.pop()
        if node is None:
            parts.append(_COMMENT_CLOSE)
            continue
        if not node.is_comment:
            continue
        parts.append(_comment_open(node, level, config, now))
        stack.append((None, level))
        stack.extend((child, level + 1) for child in reversed(node.replies))
    return "".join(parts)


def tree_depth(nodes: Sequence[Comment]) -> int:
    """Number of levels in the forest (0 for an empty one)."""
    deepest = 0
    stack = [(node, 1) for node in nodes]
    while stack:
        node, level = stack.pop()
        deepest = max(deepest, level)
        stack.extend((child, level + 1) for child in node.replies)
    return deepest


def render_comment_tree(
    nodes: Sequence[Comment],
    *,
    config: RenderConfig | None = None,
    now: float | None = None,
) -> str:
    """Render a whole forest, picking the walk that fits its depth."""
    config = config or RenderConfig()
    depth = tree_depth(nodes)
    if depth > config.max_recursive_depth:
        logger.debug(
            f"Comment tree is {depth} levels deep (limit {config.max_recursive_depth}), "
            "rendering with explicit stack"
        )
        return render_comments_iter(nodes, config=config, now=now)
    return render_comments(nodes, config=config, now=now)
