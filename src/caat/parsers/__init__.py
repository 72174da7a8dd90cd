"""Parser registry: selects a document parser by file extension."""

from __future__ import annotations

import logging
from pathlib import Path

from ..errors import UnsupportedFormatError
from ..style import Styler
from .base import Parser
from .html import HtmlParser
from .markdown import MarkdownParser

logger = logging.getLogger(__name__)


class ParserRegistry:
    """Maps file extensions to parsers.

    Parsers are consulted in registration order; the first one claiming an
    extension wins.
    """

    def __init__(self) -> None:
        self._parsers: list[Parser] = []

    def register(self, parser: Parser) -> None:
        if not isinstance(parser, Parser):
            raise TypeError(f"{type(parser).__name__} does not implement the Parser protocol")
        self._parsers.append(parser)

    def get_parser_by_extension(self, path: str | Path) -> Parser | None:
        """Find the parser for a file path.

        Args:
            path: File path; only its extension is used, case-insensitively.

        Returns:
            The matching parser, or None for unregistered extensions.
        """
        ext = Path(path).suffix.lower()
        for parser in self._parsers:
            if ext in parser.extensions():
                logger.debug("Selected %s for %r", type(parser).__name__, ext)
                return parser
        return None

    def require_parser(self, path: str | Path) -> Parser:
        """Like get_parser_by_extension, but raise for unknown extensions."""
        parser = self.get_parser_by_extension(path)
        if parser is None:
            raise UnsupportedFormatError(Path(path).suffix.lower(), self.supported_extensions())
        return parser

    def supported_extensions(self) -> list[str]:
        """All registered extensions, without duplicates, in registration order."""
        extensions: list[str] = []
        for parser in self._parsers:
            for ext in parser.extensions():
                if ext not in extensions:
                    extensions.append(ext)
        return extensions


def create_registry(styler: Styler | None = None, allow_html: bool = True) -> ParserRegistry:
    """Build a registry holding the built-in parsers."""
    registry = ParserRegistry()
    registry.register(MarkdownParser(styler=styler, allow_html=allow_html))
    registry.register(HtmlParser(styler=styler))
    return registry


__all__ = [
    "HtmlParser",
    "MarkdownParser",
    "Parser",
    "ParserRegistry",
    "create_registry",
]
