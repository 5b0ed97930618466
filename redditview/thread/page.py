"""Full post page: post header, body, attachment and comment section."""

from __future__ import annotations

import time
from typing import Sequence

from redditview.config.schema import DataConfig, RenderConfig
from redditview.markdown.escape import escape_html
from redditview.thread.comments import render_comment_tree
from redditview.thread.media import render_post_content
from redditview.thread.models import Comment, Post
from redditview.thread.timefmt import format_num, format_time


def render_post(
    post: Post,
    comments: Sequence[Comment],
    config: RenderConfig | None = None,
    now: float | None = None,
) -> str:
    config = config or RenderConfig()
    now = time.time() if now is None else now
    author = escape_html(post.author)
    subreddit = escape_html(post.subreddit)
    count = format_num(post.num_comments)

    return (
        '<div class="post-container"><div class="post-content">'
        f'<h1 class="post-title">{escape_html(post.title)}</h1>'
        '<div class="post-meta">'
        f'<span>Posted by <a href="https://reddit.com/u/{author}" target="_blank" '
        f'rel="noopener noreferrer">u/{author}</a></span>'
        f'<span>in <a href="https://reddit.com/r/{subreddit}" target="_blank" '
        f'rel="noopener noreferrer">r/{subreddit}</a></span>'
        f"<span>{format_time(post.created_utc, now, config.timestamp_format)}</span>"
        f"<span>{count} comments</span>"
        "</div>"
        f'<div class="post-body">{render_post_content(post, config.prefer_rendered_html)}</div>'
        "</div></div>"
        '<div class="comments-container">'
        f'<div class="comments-header">Comments ({count})</div>'
        f"<div>{render_comment_tree(comments, config=config, now=now)}</div>"
        "</div>"
    )


def render_error(message: str) -> str:
    return f'<div class="error"><h2>Error</h2><p>{escape_html(message)}</p></div>'


def render_document(
    title: str,
    body: str,
    render: RenderConfig | None = None,
    data: DataConfig | None = None,
) -> str:
    """Wrap a rendered fragment in a standalone HTML5 document."""
    render = render or RenderConfig()
    data = data or DataConfig()
    head = f"<title>{escape_html(title)}</title>"
    if render.stylesheet_href:
        head += f'<link rel="stylesheet" href="{escape_html(render.stylesheet_href)}">'
    back = '<a class="back-button visible" href="/index.html">← Back</a>' if data.dev_mode else ""
    return (
        "<!DOCTYPE html>"
        f'<html><head><meta charset="utf-8">{head}</head>'
        f'<body>{back}<div id="app">{body}</div></body></html>'
    )
