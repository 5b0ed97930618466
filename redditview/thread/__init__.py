"""Thread model, loading and HTML rendering."""

from redditview.thread.comments import render_comment_tree, render_comments, render_comments_iter
from redditview.thread.gallery import GalleryNavigator, render_gallery
from redditview.thread.listing import load_index, load_thread, parse_thread
from redditview.thread.media import render_attachment, render_post_content, select_attachment
from redditview.thread.models import (
    Comment,
    GalleryAttachment,
    ImageAttachment,
    LinkAttachment,
    Post,
    Thread,
    VideoAttachment,
)
from redditview.thread.page import render_document, render_error, render_post

__all__ = [
    "Comment",
    "GalleryAttachment",
    "GalleryNavigator",
    "ImageAttachment",
    "LinkAttachment",
    "Post",
    "Thread",
    "VideoAttachment",
    "load_index",
    "load_thread",
    "parse_thread",
    "render_attachment",
    "render_comment_tree",
    "render_comments",
    "render_comments_iter",
    "render_document",
    "render_error",
    "render_gallery",
    "render_post",
    "render_post_content",
    "select_attachment",
]
