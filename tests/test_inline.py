"""Tests for render/inline.py - inline element rendering."""

from caat.render.inline import render_inline
from caat.style import Styler

PLAIN = Styler(color_system=None, hyperlinks=False)


class TestCodeSpans:
    """Tests for inline code."""

    def test_code_span_wrapped_in_backticks(self):
        """Inline code should be shown between backticks."""
        assert render_inline("<code>x = 1</code>", PLAIN) == "`x = 1`"

    def test_code_span_styles(self):
        """Backticks should be dim and the content cyan."""
        result = render_inline("<code>ls</code>", Styler())
        assert result == "\x1b[2m`\x1b[0m\x1b[36mls\x1b[0m\x1b[2m`\x1b[0m"


class TestEmphasis:
    """Tests for bold and italic."""

    def test_strong_is_bold(self):
        """strong should render bold."""
        assert render_inline("<strong>hi</strong>", Styler()) == "\x1b[1mhi\x1b[0m"

    def test_b_is_bold(self):
        """b should render bold."""
        assert render_inline("<b>hi</b>", Styler()) == "\x1b[1mhi\x1b[0m"

    def test_em_and_i_are_italic(self):
        """em and i should render italic."""
        assert render_inline("<em>a</em>", Styler()) == "\x1b[3ma\x1b[0m"
        assert render_inline("<i>b</i>", Styler()) == "\x1b[3mb\x1b[0m"

    def test_br_not_mistaken_for_bold(self):
        """Tags starting with b or i should not match bold or italic rules."""
        html = "<blockquote>x</blockquote><img src=\"a.png\">"
        result = render_inline(html, Styler())
        assert "\x1b[1m" not in result
        assert "\x1b[3m" not in result

    def test_emphasis_spanning_lines(self):
        """Emphasis across a soft line break should still match."""
        assert render_inline("<em>one\ntwo</em>", PLAIN) == "one\ntwo"


class TestLinks:
    """Tests for link rendering."""

    def test_osc8_hyperlink(self):
        """Links should be wrapped in an OSC-8 hyperlink by default."""
        result = render_inline('<a href="https://example.com">site</a>', Styler())
        assert result == (
            "\x1b]8;;https://example.com\x1b\\"
            "\x1b[4;34msite\x1b[0m"
            "\x1b]8;;\x1b\\"
        )

    def test_plain_link_variant(self):
        """Without hyperlinks the URL should follow the label."""
        result = render_inline('<a href="https://example.com">site</a>', PLAIN)
        assert result == "site (https://example.com)"

    def test_nested_tags_stripped_from_label(self):
        """Markup inside the label should be removed."""
        result = render_inline('<a href="/x"><span>inner</span></a>', PLAIN)
        assert result == "inner (/x)"

    def test_link_with_title_attribute(self):
        """Extra attributes should not affect the href."""
        result = render_inline('<a href="/docs" title="Docs">docs</a>', PLAIN)
        assert result == "docs (/docs)"

    def test_rendering_is_deterministic(self):
        """The same link should render identically every time."""
        html = '<a href="https://example.com/a">a</a>'
        assert render_inline(html, Styler()) == render_inline(html, Styler())


class TestImagesAndBreaks:
    """Tests for images and hard line breaks."""

    def test_image_placeholder_uses_alt(self):
        """Images should become an [image: alt] placeholder."""
        assert render_inline('<img src="logo.png" alt="Logo" />', PLAIN) == "[image: Logo]"

    def test_image_without_alt(self):
        """Images without alt text should use a bare placeholder."""
        assert render_inline('<img src="logo.png">', PLAIN) == "[image]"

    def test_line_break(self):
        """br should become a newline."""
        assert render_inline("one<br />\ntwo", PLAIN) == "one\ntwo"


class TestIdempotence:
    """Tests for text without inline tags."""

    def test_plain_text_unchanged(self):
        """Text without matched tags should pass through."""
        text = "<p>Nothing inline here &amp; there</p>"
        assert render_inline(text, Styler()) == text

    def test_second_pass_is_noop(self):
        """Rendering already-rendered text should change nothing."""
        once = render_inline("<strong>a</strong> <code>b</code>", Styler())
        assert render_inline(once, Styler()) == once
