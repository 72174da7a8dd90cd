"""Exceptions raised while selecting a parser or rendering a document."""

from __future__ import annotations


class CaatError(Exception):
    """Base class for errors reported by caat."""


class UnsupportedFormatError(CaatError):
    """Raised when no registered parser handles a file extension."""

    def __init__(self, extension: str, supported: list[str]) -> None:
        self.extension = extension
        self.supported = supported
        super().__init__(f"Unsupported file format '{extension}'")


class ParseError(CaatError):
    """Raised when a parser fails to convert a document."""
