"""Tests for render/cleanup.py - residual markup, entities and spacing."""

from caat.render.cleanup import (
    cleanup,
    collapse_newlines,
    decode_entities,
    remove_hidden_elements,
    strip_tags,
)


class TestStripTags:
    """Tests for residual tag removal."""

    def test_removes_unknown_tags(self):
        """Tags no earlier stage handled should be removed."""
        assert strip_tags("<div><span>Hello</span></div>") == "Hello"

    def test_removes_tags_with_attributes(self):
        """Tags carrying attributes should be removed entirely."""
        assert strip_tags('<span class="x" id="y">text</span>') == "text"

    def test_leaves_plain_text(self):
        """Text without tags should be unchanged."""
        assert strip_tags("a < b and c > d") == "a < b and c > d"


class TestRemoveHiddenElements:
    """Tests for dropping non-displayed elements."""

    def test_removes_element_and_content(self):
        """Style and script bodies should go with their tags."""
        html = "<style>p { color: red; }</style><p>a</p><script>alert(1)</script>"
        assert remove_hidden_elements(html) == "<p>a</p>"

    def test_removes_head_with_title(self):
        """The whole head, title included, should be removed."""
        html = "<html><head><title>T</title></head><body>b</body></html>"
        assert remove_hidden_elements(html) == "<html><body>b</body></html>"

    def test_case_and_attributes(self):
        """Uppercase tags and attributes should still match."""
        html = '<SCRIPT src="x.js"></SCRIPT>\n<Style media="all">\nb {}\n</Style >ok'
        assert remove_hidden_elements(html) == "\nok"

    def test_header_element_kept(self):
        """Elements that only share a prefix should be left alone."""
        html = "<header>Top</header><p>body</p>"
        assert remove_hidden_elements(html) == html


class TestDecodeEntities:
    """Tests for the fixed entity set."""

    def test_decodes_all_five_entities(self):
        """quot, #39, lt, gt and amp should all decode."""
        assert decode_entities("&quot;&#39;&lt;&gt;&amp;") == "\"'<>&"

    def test_amp_decoded_last(self):
        """An escaped entity should decode exactly once."""
        assert decode_entities("&amp;lt;") == "&lt;"

    def test_other_entities_untouched(self):
        """Entities outside the fixed set should be left as-is."""
        assert decode_entities("&nbsp;&copy;") == "&nbsp;&copy;"


class TestCleanup:
    """Tests for the full cleanup pass."""

    def test_collapses_newline_runs(self):
        """Four newlines should collapse to a single blank line."""
        assert cleanup("a\n\n\n\nb") == "a\n\nb\n"

    def test_keeps_single_blank_line(self):
        """Two newlines should be preserved."""
        assert collapse_newlines("a\n\nb") == "a\n\nb"

    def test_entity_decoded_text_is_not_stripped(self):
        """Decoded angle brackets should survive as literal text."""
        assert cleanup("&lt;b&gt;") == "<b>\n"

    def test_trims_and_terminates_with_one_newline(self):
        """Leading and trailing whitespace should become one newline."""
        assert cleanup("\n\n  text  \n\n\n") == "text\n"

    def test_empty_input(self):
        """Empty input should render as a lone newline."""
        assert cleanup("") == "\n"

    def test_idempotent_on_cleaned_text(self):
        """Running cleanup on its own output should change nothing."""
        once = cleanup("<h1>Title</h1>\n\n\n<p>Body &amp; more</p>\n")
        assert cleanup(once) == once

    def test_preserves_escape_codes(self):
        """ANSI escape sequences are not tags and should survive."""
        styled = "\x1b[1mbold\x1b[0m"
        assert cleanup(styled) == styled + "\n"
