"""Final cleanup pass for rendered terminal text.

- Strips any tag the earlier stages did not handle
- Decodes the entities emitted by the markdown converter
- Collapses 3+ newlines into 2 (paragraph break)
- Trims the document and terminates it with one newline
"""

from __future__ import annotations

import re

TAG_PATTERN = re.compile(r"<[^>]*>")
# Elements whose text is never displayed
HIDDEN_ELEMENT_PATTERN = re.compile(r"<(script|style|head|title)\b[^>]*>.*?</\1\s*>", re.S | re.I)
EXCESS_NEWLINES_PATTERN = re.compile(r"\n{3,}")

# Decoded in this order; &amp; must come last so "&amp;lt;" becomes "&lt;"
ENTITIES: tuple[tuple[str, str], ...] = (
    ("&quot;", '"'),
    ("&#39;", "'"),
    ("&lt;", "<"),
    ("&gt;", ">"),
    ("&amp;", "&"),
)


def remove_hidden_elements(text: str) -> str:
    """Drop script, style, head and title elements along with their content."""
    return HIDDEN_ELEMENT_PATTERN.sub("", text)


def strip_tags(text: str) -> str:
    """Remove every <...> span from text."""
    return TAG_PATTERN.sub("", text)


def decode_entities(text: str) -> str:
    """Decode the fixed set of HTML entities, in a fixed order."""
    for entity, char in ENTITIES:
        text = text.replace(entity, char)
    return text


def collapse_newlines(text: str) -> str:
    return EXCESS_NEWLINES_PATTERN.sub("\n\n", text)


def cleanup(text: str) -> str:
    """Strip residual markup, decode entities and normalize spacing.

    Tags are stripped before decoding, so "&lt;b&gt;" comes out as a
    literal "<b>" rather than being removed as a tag.

    Args:
        text: Output of the inline and block stages.

    Returns:
        Terminal-ready text ending with exactly one newline.
    """
    text = strip_tags(text)
    text = decode_entities(text)
    text = collapse_newlines(text)
    return text.strip() + "\n"
