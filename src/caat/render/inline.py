"""Inline element rendering.

Rewrites inline HTML (code spans, bold, italic, links, images, line breaks)
into styled text. The output contains no tags, so later block stages can
strip structural markup without losing inline styling.
"""

from __future__ import annotations

import re

from ..style import Styler
from .cleanup import strip_tags

CODE_SPAN_PATTERN = re.compile(r"<code(?:\s[^>]*)?>(.*?)</code>", re.S)
BOLD_PATTERN = re.compile(r"<(strong|b)(?:\s[^>]*)?>(.*?)</\1>", re.S)
ITALIC_PATTERN = re.compile(r"<(em|i)(?:\s[^>]*)?>(.*?)</\1>", re.S)
LINK_PATTERN = re.compile(r"<a\s[^>]*?href=\"([^\"]*)\"[^>]*>(.*?)</a>", re.S)
IMAGE_PATTERN = re.compile(r"<img\s[^>]*?>")
ALT_PATTERN = re.compile(r"\balt=\"([^\"]*)\"")
LINE_BREAK_PATTERN = re.compile(r"<br\s*/?>\n?")


def render_code_spans(html: str, styler: Styler) -> str:
    def replace(match: re.Match[str]) -> str:
        tick = styler.style("code_tick", "`")
        return tick + styler.style("code", match.group(1)) + tick

    return CODE_SPAN_PATTERN.sub(replace, html)


def render_bold(html: str, styler: Styler) -> str:
    return BOLD_PATTERN.sub(lambda m: styler.style("bold", m.group(2)), html)


def render_italic(html: str, styler: Styler) -> str:
    return ITALIC_PATTERN.sub(lambda m: styler.style("italic", m.group(2)), html)


def render_links(html: str, styler: Styler) -> str:
    """Render <a href> elements as hyperlinks.

    Nested tags in the label are dropped. The href is left entity-encoded;
    the cleanup pass decodes it along with the rest of the document.
    """

    def replace(match: re.Match[str]) -> str:
        href, label = match.group(1), strip_tags(match.group(2))
        return styler.link(href, label)

    return LINK_PATTERN.sub(replace, html)


def render_images(html: str, styler: Styler) -> str:
    """Replace <img> tags with an [image: alt] placeholder."""

    def replace(match: re.Match[str]) -> str:
        alt = ALT_PATTERN.search(match.group(0))
        label = f"[image: {alt.group(1)}]" if alt and alt.group(1) else "[image]"
        return styler.style("image", label)

    return IMAGE_PATTERN.sub(replace, html)


def render_line_breaks(html: str, styler: Styler) -> str:
    return LINE_BREAK_PATTERN.sub("\n", html)


INLINE_RULES = (
    render_code_spans,
    render_bold,
    render_italic,
    render_links,
    render_images,
    render_line_breaks,
)


def render_inline(html: str, styler: Styler | None = None) -> str:
    """Apply every inline rule to html, in order.

    Args:
        html: HTML fragment or document.
        styler: Styler for the emitted escape codes.

    Returns:
        Text with inline elements replaced by styled text. Text without
        any matching tags is returned unchanged.
    """
    styler = styler or Styler()
    for rule in INLINE_RULES:
        html = rule(html, styler)
    return html
