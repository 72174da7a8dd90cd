"""Bordered code block rendering.

A code block is drawn as a box of uniform width:

    ┌─ python ───────┐
    │ print("hello") │
    └────────────────┘

The inner width is the wider of the longest code line and the language
label, so the label always fits in the top border.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

from rich.cells import cell_len

from ..style import Styler
from .cleanup import decode_entities

logger = logging.getLogger(__name__)

HORIZONTAL = "─"
TAB_SIZE = 4


@dataclass
class CodeBlockLayout:
    """Measured geometry of a single code block."""

    lines: list[str]
    language: str | None
    content_width: int
    label_width: int
    inner_width: int

    @property
    def label(self) -> str:
        return f"{HORIZONTAL} {self.language} {HORIZONTAL}" if self.language else ""


def display_width(text: str) -> int:
    """Width of text in terminal cells once entities are decoded."""
    return cell_len(decode_entities(text))


def layout_code_block(code: str, language: str | None = None) -> CodeBlockLayout:
    """Measure a code block.

    Args:
        code: Raw code text, still entity-encoded.
        language: Optional language tag shown in the top border, also
            entity-encoded.

    Returns:
        CodeBlockLayout with the trimmed, tab-expanded lines and computed widths.
        Empty code has no lines and a content width of 0.
    """
    cleaned = code.strip()
    lines = [line.expandtabs(TAB_SIZE) for line in cleaned.split("\n")] if cleaned else []

    content_width = max((display_width(line) for line in lines), default=0)
    label_width = display_width(f"{HORIZONTAL} {language} {HORIZONTAL}") if language else 0
    inner_width = max(content_width, label_width)

    return CodeBlockLayout(
        lines=lines,
        language=language or None,
        content_width=content_width,
        label_width=label_width,
        inner_width=inner_width,
    )


def render_code_block(
    code: str,
    language: str | None = None,
    styler: Styler | None = None,
) -> str:
    """Render code inside a box-drawing border.

    Args:
        code: Raw code text, still entity-encoded.
        language: Optional language tag for the top border label.
        styler: Styler for borders and code text.

    Returns:
        The bordered block, preceded by a newline and followed by a blank line.
    """
    styler = styler or Styler()
    layout = layout_code_block(code, language)
    width = layout.inner_width
    logger.debug(
        "Code block: %d lines, language=%s, inner width %d",
        len(layout.lines),
        layout.language,
        width,
    )

    if layout.language:
        extra = width - layout.label_width
        top = f"┌{layout.label}{HORIZONTAL * (extra + 2)}┐"
    else:
        top = f"┌{HORIZONTAL * (width + 2)}┐"
    bottom = f"└{HORIZONTAL * (width + 2)}┘"

    rows = [
        styler.style("code_border", "│ ")
        + styler.style("code", line)
        + " " * (width - display_width(line))
        + styler.style("code_border", " │")
        for line in layout.lines
    ]

    parts = [styler.style("code_border", top), *rows, styler.style("code_border", bottom)]
    return "\n" + "\n".join(parts) + "\n\n"
