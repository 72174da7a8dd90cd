"""Block element rendering.

Block rules run in a fixed order. Each rule strips the structural tags of
the element it matches, so a later rule never re-matches text produced by
an earlier one:

1. Code blocks with a language, then without one
2. Headings h1, h2, h3, h4-h6
3. Paragraphs
4. Blockquotes
5. Unordered, then ordered lists
6. Horizontal rules
"""

from __future__ import annotations

import re

from ..style import Styler
from .cleanup import strip_tags
from .codeblock import render_code_block

LANG_CODE_BLOCK_PATTERN = re.compile(
    r"<pre><code[^>]*class=\"language-([^\"]*)\"[^>]*>(.*?)</code></pre>", re.S
)
CODE_BLOCK_PATTERN = re.compile(r"<pre><code[^>]*>(.*?)</code></pre>", re.S)
H1_PATTERN = re.compile(r"<h1(?:\s[^>]*)?>(.*?)</h1>", re.S)
H2_PATTERN = re.compile(r"<h2(?:\s[^>]*)?>(.*?)</h2>", re.S)
H3_PATTERN = re.compile(r"<h3(?:\s[^>]*)?>(.*?)</h3>", re.S)
MINOR_HEADING_PATTERN = re.compile(r"<h([456])(?:\s[^>]*)?>(.*?)</h\1>", re.S)
PARAGRAPH_PATTERN = re.compile(r"<p(?:\s[^>]*)?>(.*?)</p>", re.S)
BLOCKQUOTE_PATTERN = re.compile(r"<blockquote(?:\s[^>]*)?>(.*?)</blockquote>", re.S)
UNORDERED_LIST_PATTERN = re.compile(r"<ul(?:\s[^>]*)?>(.*?)</ul>", re.S)
ORDERED_LIST_PATTERN = re.compile(r"<ol(\s[^>]*)?>(.*?)</ol>", re.S)
LIST_ITEM_PATTERN = re.compile(r"<li(?:\s[^>]*)?>(.*?)</li>", re.S)
START_ATTR_PATTERN = re.compile(r"\bstart=\"(-?\d+)\"")
RULE_PATTERN = re.compile(r"<hr\s*/?>")

RULE_WIDTH = 40


def render_code_blocks(html: str, styler: Styler | None = None) -> str:
    """Replace <pre><code> blocks with bordered code boxes."""
    styler = styler or Styler()
    html = LANG_CODE_BLOCK_PATTERN.sub(
        lambda m: render_code_block(m.group(2), m.group(1), styler), html
    )
    return CODE_BLOCK_PATTERN.sub(lambda m: render_code_block(m.group(1), None, styler), html)


def render_headings(html: str, styler: Styler) -> str:
    html = H1_PATTERN.sub(lambda m: styler.style("heading1", strip_tags(m.group(1))) + "\n\n", html)
    html = H2_PATTERN.sub(lambda m: styler.style("heading2", strip_tags(m.group(1))) + "\n\n", html)
    html = H3_PATTERN.sub(lambda m: styler.style("heading3", strip_tags(m.group(1))) + "\n", html)
    return MINOR_HEADING_PATTERN.sub(
        lambda m: styler.style("heading4", strip_tags(m.group(2))) + "\n", html
    )


def render_paragraphs(html: str, styler: Styler) -> str:
    return PARAGRAPH_PATTERN.sub(lambda m: strip_tags(m.group(1)) + "\n\n", html)


def render_blockquotes(html: str, styler: Styler) -> str:
    """Prefix each non-blank quoted line with a dim bar."""

    def replace(match: re.Match[str]) -> str:
        quote = strip_tags(match.group(1)).strip()
        marker = styler.style("quote_marker", "│ ")
        lines = [marker + line if line.strip() else "" for line in quote.split("\n")]
        return "\n" + "\n".join(lines) + "\n\n"

    return BLOCKQUOTE_PATTERN.sub(replace, html)


def _list_items(content: str) -> list[str]:
    return [strip_tags(item).strip() for item in LIST_ITEM_PATTERN.findall(content)]


def render_unordered_lists(html: str, styler: Styler) -> str:
    def replace(match: re.Match[str]) -> str:
        bullet = styler.style("bullet", "• ")
        items = [bullet + text for text in _list_items(match.group(1))]
        return "\n".join(items) + "\n\n"

    return UNORDERED_LIST_PATTERN.sub(replace, html)


def render_ordered_lists(html: str, styler: Styler) -> str:
    """Number list items from 1, or from the list's start attribute."""

    def replace(match: re.Match[str]) -> str:
        start_attr = START_ATTR_PATTERN.search(match.group(1) or "")
        start = int(start_attr.group(1)) if start_attr else 1
        items = [
            styler.style("number", f"{start + i}. ") + text
            for i, text in enumerate(_list_items(match.group(2)))
        ]
        return "\n".join(items) + "\n\n"

    return ORDERED_LIST_PATTERN.sub(replace, html)


def render_rules(html: str, styler: Styler) -> str:
    return RULE_PATTERN.sub(lambda m: styler.style("rule", "─" * RULE_WIDTH) + "\n\n", html)


BLOCK_RULES = (
    render_headings,
    render_paragraphs,
    render_blockquotes,
    render_unordered_lists,
    render_ordered_lists,
    render_rules,
)


def render_blocks(html: str, styler: Styler | None = None) -> str:
    """Apply every block rule to html, in order.

    Args:
        html: HTML document, usually after render_inline.
        styler: Styler for the emitted escape codes.

    Returns:
        Text with block elements replaced by styled, spaced text.
    """
    styler = styler or Styler()
    html = render_code_blocks(html, styler)
    for rule in BLOCK_RULES:
        html = rule(html, styler)
    return html
