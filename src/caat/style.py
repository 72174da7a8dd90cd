"""Terminal styling for rendered documents.

Semantic roles (heading1, code, link, ...) map to rich style strings in a
Theme. A Styler turns a role and some text into ANSI-escaped text using
rich's style renderer, for the color system detected for the terminal.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields, replace
from typing import Mapping

from rich.color import ColorSystem
from rich.console import Console
from rich.errors import StyleSyntaxError
from rich.style import Style

logger = logging.getLogger(__name__)

COLOR_SYSTEMS: dict[str, ColorSystem] = {
    "standard": ColorSystem.STANDARD,
    "256": ColorSystem.EIGHT_BIT,
    "truecolor": ColorSystem.TRUECOLOR,
    "windows": ColorSystem.WINDOWS,
}

# OSC-8 hyperlink delimiters
OSC8_OPEN = "\x1b]8;;{url}\x1b\\"
OSC8_CLOSE = "\x1b]8;;\x1b\\"


@dataclass(frozen=True)
class Theme:
    """Rich style strings for each semantic role."""

    heading1: str = "bold underline magenta"
    heading2: str = "bold cyan"
    heading3: str = "bold yellow"
    heading4: str = "bold green"
    bold: str = "bold"
    italic: str = "italic"
    code: str = "cyan"
    code_tick: str = "dim"
    code_border: str = "dim"
    quote_marker: str = "dim"
    bullet: str = "green"
    number: str = "blue"
    link: str = "blue underline"
    image: str = "dim"
    rule: str = "dim"

    @classmethod
    def roles(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    def with_overrides(self, overrides: Mapping[str, str]) -> Theme:
        """Return a copy with valid overrides applied.

        Unknown roles and unparseable style strings are logged and skipped.
        """
        known = set(self.roles())
        changes: dict[str, str] = {}
        for role, value in overrides.items():
            if role not in known:
                logger.warning("Unknown theme role %r ignored", role)
                continue
            try:
                Style.parse(value)
            except StyleSyntaxError as exc:
                logger.warning("Invalid style %r for theme role %r: %s", value, role, exc)
                continue
            changes[role] = value
        return replace(self, **changes) if changes else self


class Styler:
    """Apply theme roles to text as terminal escape codes.

    Args:
        theme: Role-to-style mapping. Defaults to Theme().
        color_system: One of COLOR_SYSTEMS keys, or None to emit plain text.
        hyperlinks: Emit OSC-8 hyperlinks; otherwise links are written as
            "label (url)".
    """

    def __init__(
        self,
        theme: Theme | None = None,
        color_system: str | None = "standard",
        hyperlinks: bool = True,
    ) -> None:
        if color_system is not None and color_system not in COLOR_SYSTEMS:
            raise ValueError(f"Unknown color system: {color_system!r}")
        self.theme = theme or Theme()
        self.color_system = color_system
        self.hyperlinks = hyperlinks

    @property
    def color_enabled(self) -> bool:
        return self.color_system is not None

    def style(self, role: str, text: str) -> str:
        """Wrap text in the escape codes for a theme role."""
        if not text or self.color_system is None:
            return text
        style = Style.parse(getattr(self.theme, role))
        return style.render(text, color_system=COLOR_SYSTEMS[self.color_system])

    def link(self, url: str, label: str) -> str:
        """Render a link label, clickable when hyperlinks are enabled."""
        styled = self.style("link", label)
        if not self.hyperlinks:
            return f"{styled} ({url})"
        return OSC8_OPEN.format(url=url) + styled + OSC8_CLOSE


def create_styler(
    color: str = "auto",
    hyperlinks: bool = True,
    theme_overrides: Mapping[str, str] | None = None,
    console: Console | None = None,
) -> Styler:
    """Build a Styler for the current terminal.

    Args:
        color: "always", "never", or "auto" to follow terminal detection
            (which honors NO_COLOR and FORCE_COLOR).
        hyperlinks: Whether OSC-8 hyperlinks may be emitted.
        theme_overrides: Role-to-style overrides from the user config.
        console: Console used for detection; defaults to one on stdout.

    Returns:
        Configured Styler. Hyperlinks are only emitted when color is.
    """
    theme = Theme().with_overrides(theme_overrides or {})

    if color == "never":
        color_system = None
    elif color == "always":
        detected = (console or Console(force_terminal=True)).color_system
        color_system = detected or "standard"
    else:
        console = console or Console()
        color_system = None if console.no_color else console.color_system

    logger.debug("Using color system %s", color_system)
    return Styler(
        theme=theme,
        color_system=color_system,
        hyperlinks=hyperlinks and color_system is not None,
    )
