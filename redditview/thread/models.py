"""Thread data model: one post, its attachment, and the comment forest."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Union

COMMENT_KIND = "t1"
MORE_KIND = "more"


@dataclass(frozen=True)
class ImageAttachment:
    url: str


@dataclass(frozen=True)
class VideoAttachment:
    url: str
    loop: bool = False  # gif-style clip: loops, no audio


@dataclass(frozen=True)
class GalleryAttachment:
    images: tuple[str, ...]


@dataclass(frozen=True)
class LinkAttachment:
    url: str
    thumbnail_url: str | None = None


Attachment = Union[ImageAttachment, VideoAttachment, GalleryAttachment, LinkAttachment]


@dataclass(frozen=True)
class Post:
    id: str
    title: str
    author: str
    subreddit: str
    created_utc: float
    num_comments: int = 0
    selftext: str | None = None
    selftext_html: str | None = None
    attachment: Attachment | None = None
    url: str | None = None
    permalink: str | None = None


@dataclass(frozen=True)
class Comment:
    """A node of the comment forest.

    ``kind`` is ``"t1"`` for a real comment and ``"more"`` for the
    "load more comments" placeholder, which renders as nothing.
    """

    kind: str = COMMENT_KIND
    author: str = ""
    created_utc: float = 0
    body: str | None = None
    body_html: str | None = None
    replies: tuple[Comment, ...] = ()

    @property
    def is_comment(self) -> bool:
        return self.kind == COMMENT_KIND


@dataclass(frozen=True)
class Thread:
    post: Post
    comments: tuple[Comment, ...] = field(default_factory=tuple)
