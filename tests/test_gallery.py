"""Tests for redditview.thread.gallery: GalleryNavigator and gallery markup."""

from __future__ import annotations

import pytest

from redditview.thread.gallery import GalleryNavigator, render_gallery
from redditview.thread.models import GalleryAttachment


# ---------------------------------------------------------------------------
# Navigation state
# ---------------------------------------------------------------------------

class TestNavigator:
    def test_wraps_backwards(self):
        nav = GalleryNavigator(5)
        assert nav.advance(-1) == 4

    def test_wraps_forwards(self):
        nav = GalleryNavigator(5)
        nav.index = 4
        assert nav.advance(1) == 0

    def test_large_steps(self):
        nav = GalleryNavigator(5)
        assert nav.advance(7) == 2

    @pytest.mark.parametrize("direction", [-12, -5, -1, 0, 1, 6, 23])
    def test_index_always_in_range(self, direction):
        nav = GalleryNavigator(5)
        nav.advance(3)
        assert 0 <= nav.advance(direction) < 5

    def test_indicator_and_offset(self):
        nav = GalleryNavigator(3)
        nav.advance(1)
        assert nav.indicator == "2 / 3"
        assert nav.offset_percent == 100

    def test_reset(self):
        nav = GalleryNavigator(3)
        nav.advance(2)
        nav.reset()
        assert nav.index == 0

    def test_single_image_has_no_controls(self):
        assert not GalleryNavigator(1).has_controls
        assert GalleryNavigator(2).has_controls


# ---------------------------------------------------------------------------
# Markup
# ---------------------------------------------------------------------------

class TestRenderGallery:
    def test_multi_image_has_controls(self):
        gallery = GalleryAttachment(images=("https://i.redd.it/a.jpg", "https://i.redd.it/b.jpg", "https://i.redd.it/c.jpg"))
        html = render_gallery(gallery)
        assert html.count('class="gallery-image"') == 3
        assert 'data-direction="-1"' in html and 'data-direction="1"' in html
        assert '<span id="gallery-current">1</span> / 3' in html
        assert 'alt="Image 3"' in html

    def test_single_image_without_controls(self):
        html = render_gallery(GalleryAttachment(images=("https://i.redd.it/a.jpg",)))
        assert "gallery-nav" not in html
        assert "gallery-indicator" not in html

    def test_reflects_navigator_position(self):
        gallery = GalleryAttachment(images=("a", "b", "c"))
        nav = GalleryNavigator.for_gallery(gallery)
        nav.advance(-1)
        html = render_gallery(gallery, nav)
        assert "translateX(-200%)" in html
        assert '<span id="gallery-current">3</span>' in html

    def test_image_urls_escaped(self):
        html = render_gallery(GalleryAttachment(images=("https://x/a.jpg?a=1&b=2",)))
        assert 'src="https://x/a.jpg?a=1&amp;b=2"' in html

    def test_empty_gallery_renders_nothing(self):
        assert render_gallery(GalleryAttachment(images=())) == ""
