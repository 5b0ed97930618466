"""Tests for redditview.markdown.format: markdown_to_html and format_body."""

from __future__ import annotations

import pytest

from redditview.markdown.format import format_body, markdown_to_html, normalize_rendered_html


# ---------------------------------------------------------------------------
# Inline emphasis
# ---------------------------------------------------------------------------

class TestInline:
    def test_bold_em_and_strikethrough_single_paragraph(self):
        html = markdown_to_html("**bold** and *em* and ~~gone~~")
        assert html == "<p><strong>bold</strong> and <em>em</em> and <del>gone</del></p>"

    def test_underscore_variants(self):
        assert markdown_to_html("__strong__ and _soft_") == (
            "<p><strong>strong</strong> and <em>soft</em></p>"
        )

    def test_asterisks_inside_inline_code_stay_literal(self):
        assert markdown_to_html("`*a*`") == "<p><code>*a*</code></p>"

    def test_lone_asterisks_with_spaces_are_not_emphasis(self):
        assert markdown_to_html("2 * 3 * 4") == "<p>2 * 3 * 4</p>"

    def test_italic_skipped_when_match_spans_markup(self):
        # the code span becomes markup first, so the surrounding pair is left alone
        assert markdown_to_html("*see `code`*") == "<p>*see <code>code</code>*</p>"


# ---------------------------------------------------------------------------
# Links and URLs
# ---------------------------------------------------------------------------

class TestLinks:
    def test_markdown_link_opens_in_new_context(self):
        assert markdown_to_html("[docs](https://example.com/a)") == (
            '<p><a href="https://example.com/a" target="_blank" '
            'rel="noopener noreferrer">docs</a></p>'
        )

    def test_markdown_link_to_image_becomes_img(self):
        assert markdown_to_html("[pic](https://i.redd.it/abc.png)") == (
            '<p><img src="https://i.redd.it/abc.png" alt="pic" /></p>'
        )

    def test_underscores_in_link_url_are_not_italicised(self):
        html = markdown_to_html("[x](https://example.com/a_b_c)")
        assert 'href="https://example.com/a_b_c"' in html
        assert "<em>" not in html

    def test_underscores_in_bare_url_are_italicised_first(self):
        # emphasis runs before bare-URL linking, so the link stops at the tag
        assert markdown_to_html("https://x.com/a_b_c") == (
            '<p><a href="https://x.com/a" target="_blank" rel="noopener noreferrer">'
            "https://x.com/a</a><em>b</em>c</p>"
        )

    def test_bare_image_url(self):
        assert markdown_to_html("see https://example.com/cat.jpg now") == (
            '<p>see <img src="https://example.com/cat.jpg" alt="Image" /> now</p>'
        )

    def test_bare_url_keeps_escaped_query(self):
        html = markdown_to_html("go to https://example.com/x?a=1&b=2")
        assert 'href="https://example.com/x?a=1&amp;b=2"' in html
        assert ">https://example.com/x?a=1&amp;b=2</a>" in html


# ---------------------------------------------------------------------------
# Block constructs
# ---------------------------------------------------------------------------

class TestBlocks:
    def test_consecutive_quote_lines_make_one_blockquote(self):
        html = markdown_to_html("> one\n> two\n> three")
        assert html == "<blockquote>one\ntwo\nthree</blockquote>"
        assert html.count("<blockquote>") == 1

    def test_indented_code_block(self):
        html = markdown_to_html("Example:\n\n    x = 1\n    y = 2\n\nDone")
        assert html == "<p>Example:</p><pre><code>x = 1\ny = 2</code></pre><p>Done</p>"

    def test_code_block_content_is_escaped_and_unformatted(self):
        html = markdown_to_html("    <b>*x*</b>")
        assert html == "<pre><code>&lt;b&gt;*x*&lt;/b&gt;</code></pre>"

    def test_unordered_list_items_keep_inline_formatting(self):
        html = markdown_to_html("- one\n- **two**\n* three")
        assert html == "<ul><li>one</li><li><strong>two</strong></li><li>three</li></ul>"

    def test_list_item_with_inline_code(self):
        assert markdown_to_html("- use `x`") == "<ul><li>use <code>x</code></li></ul>"

    def test_ordered_list(self):
        assert markdown_to_html("1. first\n2. second") == "<ol><li>first</li><li>second</li></ol>"

    def test_blank_line_splits_list_runs(self):
        assert markdown_to_html("- a\n\n- b") == "<ul><li>a</li></ul><ul><li>b</li></ul>"

    def test_horizontal_rule(self):
        assert markdown_to_html("above\n\n---\n\nbelow") == "<p>above</p><hr><p>below</p>"

    def test_block_directly_after_text_is_not_wrapped(self):
        assert markdown_to_html("intro\n> quoted") == "<p>intro</p><blockquote>quoted</blockquote>"


# ---------------------------------------------------------------------------
# Paragraphs, escaping, edge cases
# ---------------------------------------------------------------------------

class TestParagraphs:
    def test_single_newline_becomes_break(self):
        assert markdown_to_html("line one\nline two\n\npara two") == (
            "<p>line one<br>line two</p><p>para two</p>"
        )

    def test_crlf_line_endings(self):
        assert markdown_to_html("a\r\n\r\nb") == "<p>a</p><p>b</p>"

    def test_script_is_escaped(self):
        assert markdown_to_html('<script>alert("x")</script>') == (
            "<p>&lt;script&gt;alert(&quot;x&quot;)&lt;/script&gt;</p>"
        )

    @pytest.mark.parametrize("text", ["", "   ", "\n\n \n"])
    def test_blank_input_renders_nothing(self, text):
        assert markdown_to_html(text) == ""

    @pytest.mark.parametrize("text", [
        "- use `code` and [a](https://example.com)\n- https://example.com/x.png",
        "> quote with `code`\n\n    indented\n\n---\n\n1. *one*\n2. __two__",
        "`a` `b` `c` `d` `e` `f` `g` `h` `i` `j` `k` `l`",
        "[x](https://i.imgur.com/y) then https://example.com and ~~s~~",
        "*unclosed **mixed `tick",
        "[`code`](https://example.com)",
        "- [`x`](https://example.com)",
        "`start\n- item\nend`",
        "[a\n- item\nb](https://example.com)",
    ])
    def test_no_protected_tokens_leak(self, text):
        assert "PROTECTED" not in markdown_to_html(text)

    def test_code_inside_link_label(self):
        assert markdown_to_html("[`code`](https://example.com)") == (
            '<p><a href="https://example.com" target="_blank" '
            'rel="noopener noreferrer"><code>code</code></a></p>'
        )

    def test_code_inside_list_item_link(self):
        assert markdown_to_html("- [`x`](https://example.com)") == (
            '<ul><li><a href="https://example.com" target="_blank" '
            'rel="noopener noreferrer"><code>x</code></a></li></ul>'
        )


# ---------------------------------------------------------------------------
# format_body
# ---------------------------------------------------------------------------

class TestFormatBody:
    RENDERED = "&lt;div class=&quot;md&quot;&gt;&lt;p&gt;a&lt;/p&gt;\n\n&lt;p&gt;b&lt;/p&gt;&lt;/div&gt;"

    def test_prefers_rendered_html(self):
        assert format_body("**x**", self.RENDERED) == '<div class="md"><p>a</p><p>b</p></div>'

    def test_raw_text_when_rendered_disabled(self):
        assert format_body("**x**", self.RENDERED, prefer_rendered_html=False) == (
            "<p><strong>x</strong></p>"
        )

    def test_rendered_used_when_disabled_but_no_raw_text(self):
        assert format_body(None, self.RENDERED, prefer_rendered_html=False).startswith("<div")

    def test_missing_body(self):
        assert format_body(None) == ""
        assert format_body("  ") == ""

    def test_normalize_collapses_paragraph_gaps(self):
        assert normalize_rendered_html("<p>a</p>\n  <p>b</p>") == "<p>a</p><p>b</p>"
