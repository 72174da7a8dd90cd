"""HTML documents, rendered without a conversion step."""

from __future__ import annotations

from ..errors import ParseError
from ..render import render_html_to_terminal
from ..style import Styler


class HtmlParser:
    """Render HTML files directly through the terminal pipeline."""

    def __init__(self, styler: Styler | None = None) -> None:
        self.styler = styler

    def extensions(self) -> list[str]:
        return [".html", ".htm"]

    def parse(self, content: str) -> str:
        try:
            return render_html_to_terminal(content, self.styler)
        except Exception as exc:
            raise ParseError(f"Error parsing HTML: {exc}") from exc
