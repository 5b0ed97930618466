"""Archived thread loading.

An archive file holds Reddit's own listing pair, optionally wrapped in an
envelope recorded by the capture tool::

    {"path": ..., "timestamp": ..., "data": [postListing, commentsListing]}

The comment forest is built without recursion so arbitrarily deep threads
load on any interpreter stack.
"""

from __future__ import annotations

import json
import math
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

from loguru import logger

from redditview.errors import ThreadLoadError
from redditview.markdown.escape import decode_entities
from redditview.thread.media import select_attachment
from redditview.thread.models import COMMENT_KIND, MORE_KIND, Comment, Post, Thread

INDEX_FILE = "index.json"


def _number(value: Any, cast: type = float) -> Any:
    """Numeric archive field; anything unparseable or non-finite counts as 0."""
    try:
        number = float(value or 0)
    except (TypeError, ValueError):
        number = math.nan
    if not math.isfinite(number):
        logger.debug(f"Ignoring non-numeric archive value {value!r}")
        number = 0.0
    return cast(number)


def _reply_children(child: Any) -> list[Any]:
    if not isinstance(child, dict):
        return []
    replies = (child.get("data") or {}).get("replies")
    if isinstance(replies, dict):
        return (replies.get("data") or {}).get("children") or []
    return []  # Reddit sends "" for no replies


def _comment_from(child: dict[str, Any], replies: tuple[Comment, ...]) -> Comment:
    kind = child.get("kind")
    if kind != COMMENT_KIND:
        return Comment(kind=kind or MORE_KIND)
    data = child["data"]
    return Comment(
        kind=COMMENT_KIND,
        author=data.get("author") or "[deleted]",
        created_utc=_number(data.get("created_utc")),
        body=data.get("body"),
        body_html=data.get("body_html"),
        replies=replies,
    )


def _is_node(child: Any) -> bool:
    return isinstance(child, dict) and isinstance(child.get("data"), dict)


def parse_comments(children: list[Any]) -> tuple[Comment, ...]:
    """Build the comment forest from a listing's ``children`` array."""
    # Pre-order visit, then build in reverse so every node's replies exist
    # before the node itself.
    visit: list[dict[str, Any]] = []
    stack = [c for c in children if _is_node(c)]
    while stack:
        child = stack.pop()
        visit.append(child)
        stack.extend(c for c in _reply_children(child) if _is_node(c))

    built: dict[int, Comment] = {}
    for child in reversed(visit):
        replies = tuple(built[id(c)] for c in _reply_children(child) if _is_node(c))
        built[id(child)] = _comment_from(child, replies)

    dropped = len(children) - sum(1 for c in children if _is_node(c))
    if dropped:
        logger.debug(f"Dropped {dropped} malformed top-level comment entries")
    return tuple(built[id(c)] for c in children if _is_node(c))


def parse_post(data: dict[str, Any]) -> Post:
    return Post(
        id=data.get("id", ""),
        title=decode_entities(data.get("title")),
        author=data.get("author") or "[deleted]",
        subreddit=data.get("subreddit", ""),
        created_utc=_number(data.get("created_utc")),
        num_comments=_number(data.get("num_comments"), int),
        selftext=data.get("selftext"),
        selftext_html=data.get("selftext_html"),
        attachment=select_attachment(data),
        url=data.get("url"),
        permalink=data.get("permalink"),
    )


def parse_thread(payload: Any) -> Thread:
    """Turn an archive payload (envelope or bare listing pair) into a Thread."""
    listings = payload.get("data") if isinstance(payload, dict) else payload
    try:
        post_listing, comments_listing = listings[0], listings[1]
        post_data = post_listing["data"]["children"][0]["data"]
        children = comments_listing["data"]["children"]
    except (KeyError, IndexError, TypeError) as e:
        raise ThreadLoadError(f"Unexpected archive shape: {e!r}") from e
    if not isinstance(post_data, dict) or not isinstance(children, list):
        raise ThreadLoadError("Unexpected archive shape: post data or comment children malformed")

    try:
        return Thread(post=parse_post(post_data), comments=parse_comments(children))
    except (AttributeError, TypeError, ValueError) as e:
        raise ThreadLoadError(f"Malformed archive field: {e!r}") from e


def load_thread(path: Path) -> Thread:
    """Read and parse one archived thread file."""
    try:
        with open(path, encoding="utf-8") as f:
            payload = json.load(f)
    except FileNotFoundError as e:
        raise ThreadLoadError(f"Post not found: {path}") from e
    except (OSError, json.JSONDecodeError) as e:
        raise ThreadLoadError(f"Failed to read post {path}: {e}") from e

    thread = parse_thread(payload)
    logger.info(f"Loaded thread {thread.post.id or path.stem} ({len(thread.comments)} top-level comments)")
    return thread


def resolve_post_path(data_dir: Path, post: str) -> Path:
    """Map a post id (``abc123``) or file name/path to the archive file."""
    if post.endswith(".json"):
        candidate = Path(post)
        return candidate if candidate.exists() else data_dir / post
    return data_dir / f"{post}.json"


def _timestamp_key(entry: Any) -> float:
    value = entry.get("timestamp") if isinstance(entry, dict) else None
    if isinstance(value, (int, float)):
        return float(value)
    if isinstance(value, str):
        try:
            dt = datetime.fromisoformat(value.replace("Z", "+00:00"))
        except ValueError:
            return 0.0
        if dt.tzinfo is None:
            dt = dt.replace(tzinfo=timezone.utc)
        return dt.timestamp()
    return 0.0


def load_index(data_dir: Path) -> list[dict[str, Any]]:
    """Entries of ``index.json``, newest first.  No index means no posts."""
    index_file = data_dir / INDEX_FILE
    if not index_file.exists():
        return []
    try:
        with open(index_file, encoding="utf-8") as f:
            index = json.load(f)
    except (OSError, json.JSONDecodeError) as e:
        raise ThreadLoadError(f"Failed to read index {index_file}: {e}") from e

    entries = index.values() if isinstance(index, dict) else index
    entries = [e for e in entries if isinstance(e, dict)]
    return sorted(entries, key=_timestamp_key, reverse=True)
