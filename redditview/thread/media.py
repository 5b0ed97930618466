"""Post attachment selection and rendering.

Selection is a fixed-priority decision over the archived post fields:
gallery, then looping video, then video, then image, then external link.
Exactly one branch wins; a post matching none has no attachment.
"""

from __future__ import annotations

from typing import Any

from loguru import logger

from redditview.markdown.escape import decode_entities, escape_html
from redditview.markdown.format import format_body
from redditview.markdown.inline import is_image_url
from redditview.thread.gallery import render_gallery
from redditview.thread.models import (
    Attachment,
    GalleryAttachment,
    ImageAttachment,
    LinkAttachment,
    Post,
    VideoAttachment,
)


def _mapping(value: Any) -> dict[str, Any]:
    return value if isinstance(value, dict) else {}


def select_attachment(data: dict[str, Any]) -> Attachment | None:
    """Pick the attachment variant for a raw post ``data`` mapping.

    Fields in an unexpected shape count as absent.
    """
    if data.get("is_gallery") and data.get("gallery_data") and data.get("media_metadata"):
        gallery = _gallery_from(data)
        if gallery is not None:
            return gallery

    if data.get("is_video"):
        video = _mapping(_mapping(data.get("media")).get("reddit_video"))
        if video.get("fallback_url"):
            return VideoAttachment(url=video["fallback_url"], loop=bool(video.get("is_gif")))

    url = data.get("url")
    if not isinstance(url, str):
        url = None
    if data.get("post_hint") == "image" or is_image_url(url):
        image_url = _preview_url(data) or url
        if image_url:
            return ImageAttachment(url=image_url)

    if url and url != data.get("permalink") and not data.get("is_self"):
        thumbnail = data.get("thumbnail")
        if not isinstance(thumbnail, str) or not thumbnail.startswith("http"):
            thumbnail = None
        return LinkAttachment(url=url, thumbnail_url=thumbnail)

    return None


def _gallery_from(data: dict[str, Any]) -> GalleryAttachment | None:
    metadata = data["media_metadata"]
    items = _mapping(data["gallery_data"]).get("items")
    if not isinstance(metadata, dict) or not isinstance(items, list):
        logger.debug("Gallery data has an unexpected shape, ignoring it")
        return None
    urls: list[str] = []
    for item in items:
        media_id = _mapping(item).get("media_id")
        entry = metadata.get(media_id) if isinstance(media_id, str) else None
        source = _mapping(_mapping(entry).get("s"))
        url = source.get("u") or source.get("gif")
        if not isinstance(url, str) or not url:
            logger.debug(f"Gallery item {media_id} has no source image, skipping")
            continue
        urls.append(decode_entities(url))
    return GalleryAttachment(images=tuple(urls))


def _preview_url(data: dict[str, Any]) -> str | None:
    images = _mapping(data.get("preview")).get("images")
    if not isinstance(images, list) or not images:
        return None
    url = _mapping(_mapping(images[0]).get("source")).get("url")
    return decode_entities(url) if isinstance(url, str) and url else None


def render_attachment(attachment: Attachment | None, title: str = "") -> str:
    if isinstance(attachment, GalleryAttachment):
        return render_gallery(attachment)

    if isinstance(attachment, VideoAttachment):
        loop = " loop" if attachment.loop else ""
        return (
            f'<div class="media-frame"><video class="post-video" controls muted{loop}>'
            f'<source src="{escape_html(attachment.url)}" type="video/mp4"></video></div>'
        )

    if isinstance(attachment, ImageAttachment):
        return (
            f'<div class="media-frame"><img src="{escape_html(attachment.url)}" '
            f'alt="{escape_html(title)}" class="post-image" /></div>'
        )

    if isinstance(attachment, LinkAttachment):
        href = escape_html(attachment.url)
        thumb = ""
        if attachment.thumbnail_url:
            thumb = (
                f'<img src="{escape_html(attachment.thumbnail_url)}" '
                'class="post-thumbnail" alt="Link preview" />'
            )
        return (
            f'<a href="{href}" target="_blank" rel="noopener noreferrer" class="post-link">'
            f"{thumb}<div>{href}</div></a>"
        )

    return ""


def render_post_content(post: Post, prefer_rendered_html: bool = True) -> str:
    """Self text (if any) followed by the attachment frame."""
    html = ""
    if post.selftext and post.selftext.strip():
        body = format_body(post.selftext, post.selftext_html, prefer_rendered_html)
        html += f'<div class="post-selftext">{body}</div>'
    html += f'<div class="post-media">{render_attachment(post.attachment, post.title)}</div>'
    return html
