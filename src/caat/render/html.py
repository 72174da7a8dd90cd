"""HTML to terminal text pipeline.

The renderer is a left-to-right composition of pure str -> str stages:

1. Hidden elements: script, style, head and title content is dropped.
2. Code blocks: their bodies are verbatim, so they are boxed before the
   inline code rule can consume the <code> inside <pre>.
3. Inline rules: code spans, bold, italic, links, images, line breaks.
4. Block rules: headings, paragraphs, blockquotes, lists, rules. Inline
   styling is already plain escape-coded text, so stripping the tags of a
   heading or list item keeps it.
5. Cleanup: residual tags, entities, newline runs.
"""

from __future__ import annotations

import logging
from functools import partial
from typing import Callable

from ..style import Styler
from .blocks import render_blocks, render_code_blocks
from .cleanup import cleanup, remove_hidden_elements
from .inline import render_inline

logger = logging.getLogger(__name__)

Stage = Callable[[str], str]


def build_pipeline(styler: Styler | None = None) -> tuple[Stage, ...]:
    """Bind the render stages to a styler.

    Args:
        styler: Styler shared by every stage.

    Returns:
        The stages, in the order they must run.
    """
    styler = styler or Styler()
    return (
        remove_hidden_elements,
        partial(render_code_blocks, styler=styler),
        partial(render_inline, styler=styler),
        partial(render_blocks, styler=styler),
        cleanup,
    )


def render_html_to_terminal(html: str, styler: Styler | None = None) -> str:
    """Convert HTML to styled text suitable for terminal display.

    Args:
        html: HTML produced by a document parser.
        styler: Styler for the emitted escape codes. Defaults to standard
            ANSI colors with OSC-8 hyperlinks.

    Returns:
        Terminal text ending with exactly one newline.
    """
    text = html
    for stage in build_pipeline(styler):
        text = stage(text)
        logger.debug("Stage %s produced %d characters", _stage_name(stage), len(text))
    return text


def _stage_name(stage: Stage) -> str:
    func = stage.func if isinstance(stage, partial) else stage
    return getattr(func, "__name__", repr(func))
