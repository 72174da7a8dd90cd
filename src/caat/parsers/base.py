"""Parser contract for document formats."""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Parser(Protocol):
    """A document format that can be rendered for the terminal.

    Implementations convert their source format to HTML and hand it to
    render_html_to_terminal.
    """

    def extensions(self) -> list[str]:
        """Lowercase file extensions handled, including the leading dot."""
        ...

    def parse(self, content: str) -> str:
        """Render document content as terminal text.

        Raises:
            ParseError: If the content cannot be converted.
        """
        ...
