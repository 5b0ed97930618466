"""Multi-image gallery markup and its navigation state."""

from __future__ import annotations

from redditview.markdown.escape import escape_html
from redditview.thread.models import GalleryAttachment


class GalleryNavigator:
    """Current position within one rendered gallery.

    ``total`` must be positive: callers only build a navigator for a gallery
    that actually has images.  The index wraps in both directions, so it
    stays in ``[0, total)`` for any integer step.
    """

    def __init__(self, total: int) -> None:
        self.total = total
        self.index = 0

    @classmethod
    def for_gallery(cls, gallery: GalleryAttachment) -> GalleryNavigator:
        return cls(len(gallery.images))

    def advance(self, direction: int) -> int:
        """Move by *direction* slots (normally ±1) and return the new index."""
        self.index = (self.index + direction + self.total) % self.total
        return self.index

    def reset(self) -> None:
        self.index = 0

    @property
    def has_controls(self) -> bool:
        return self.total > 1

    @property
    def indicator(self) -> str:
        """Human-facing ``current / total`` text."""
        return f"{self.index + 1} / {self.total}"

    @property
    def offset_percent(self) -> int:
        """Horizontal viewport shift for the image strip."""
        return self.index * 100


def render_gallery(gallery: GalleryAttachment, navigator: GalleryNavigator | None = None) -> str:
    """Image strip plus prev/next controls (controls only with 2+ images)."""
    if not gallery.images:
        return ""
    nav = navigator or GalleryNavigator.for_gallery(gallery)

    images = "".join(
        f'<img src="{escape_html(url)}" alt="Image {i}" class="gallery-image" />'
        for i, url in enumerate(gallery.images, 1)
    )
    style = f' style="transform: translateX(-{nav.offset_percent}%)"' if nav.offset_percent else ""
    html = (
        '<div class="gallery-container">'
        f'<div class="gallery-images" id="gallery-images"{style}>{images}</div>'
    )
    if nav.has_controls:
        html += (
            '<button class="gallery-nav gallery-prev" data-direction="-1">‹</button>'
            '<button class="gallery-nav gallery-next" data-direction="1">›</button>'
            f'<div class="gallery-indicator"><span id="gallery-current">{nav.index + 1}</span>'
            f" / {nav.total}</div>"
        )
    return html + "</div>"
