"""Markdown parser backed by markdown-it-py."""

from __future__ import annotations

import logging

from markdown_it import MarkdownIt

from ..errors import ParseError
from ..render import render_html_to_terminal
from ..style import Styler

logger = logging.getLogger(__name__)


class MarkdownParser:
    """Render CommonMark documents for the terminal.

    Args:
        styler: Styler passed to the HTML renderer.
        allow_html: Pass raw HTML in the document through to the renderer
            instead of escaping it.
    """

    def __init__(self, styler: Styler | None = None, allow_html: bool = True) -> None:
        self.styler = styler
        self._md = MarkdownIt("commonmark", {"html": allow_html})

    def extensions(self) -> list[str]:
        return [".md", ".markdown"]

    def to_html(self, content: str) -> str:
        return self._md.render(content)

    def parse(self, content: str) -> str:
        try:
            html = self.to_html(content)
            logger.debug("Converted %d characters of markdown to HTML", len(content))
            return render_html_to_terminal(html, self.styler)
        except Exception as exc:
            raise ParseError(f"Error parsing markdown: {exc}") from exc
