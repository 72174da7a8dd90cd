"""CLI entry point for caat.

Renders a document file as styled terminal text:
- Parser chosen by file extension (markdown, HTML)
- Color and hyperlink support detected from the terminal
- Defaults read from the user config file, overridable by flags
"""

from __future__ import annotations

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from . import __version__
from .config_store import COLOR_MODES, Config, load_config, save_config
from .errors import CaatError, UnsupportedFormatError
from .parsers import create_registry
from .style import create_styler

logger = logging.getLogger(__name__)

_stderr = Console(stderr=True, highlight=False, soft_wrap=True)


def _error(message: str) -> None:
    _stderr.print(f"[red]{escape(message)}[/red]")


def _hint(message: str, style: str = "yellow") -> None:
    _stderr.print(f"[{style}]{escape(message)}[/{style}]")


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def _effective_config(args: argparse.Namespace) -> Config:
    """Merge command-line flags over the stored config."""
    config = replace(load_config())
    if args.color is not None:
        config.color = args.color
    if args.no_hyperlinks:
        config.hyperlinks = False
    return config


def _cmd_write_config(config: Config) -> int:
    """Handle --write-config."""
    try:
        path = save_config(config)
    except OSError as exc:
        _error(f"Error: Could not write config: {exc}")
        return 1
    print(f"Wrote config to {path}")
    return 0


def _cmd_render(args: argparse.Namespace, config: Config) -> int:
    """Handle rendering a single file."""
    styler = create_styler(
        color=config.color,
        hyperlinks=config.hyperlinks,
        theme_overrides=config.theme,
    )
    registry = create_registry(styler=styler, allow_html=config.allow_html)
    supported = ", ".join(registry.supported_extensions())

    file_path = args.file
    if not file_path:
        _error("Error: Please provide a file")
        _hint("Usage: caat <file>")
        _hint(f"Supported formats: {supported}", style="dim")
        return 1

    path = Path(file_path)
    if not path.exists():
        _error(f"Error: File '{file_path}' not found.")
        return 1

    try:
        parser = registry.require_parser(path)
        content = path.read_text(encoding="utf-8")
        output = parser.parse(content)
    except UnsupportedFormatError as exc:
        _error(f"Error: {exc}")
        _hint(f"Supported formats: {', '.join(exc.supported)}")
        return 1
    except CaatError as exc:
        _error(f"Error processing file: {exc}")
        return 1
    except Exception as exc:
        logger.debug("Rendering %s failed", file_path, exc_info=True)
        _error(f"Error processing file: {exc}")
        return 1

    sys.stdout.write(output)
    sys.stdout.flush()
    return 0


def main(argv: list[str] | None = None) -> int:
    """Main CLI entrypoint.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code (0 for success, 1 for errors).
    """
    parser = argparse.ArgumentParser(
        prog="caat",
        description="Render markdown documents as styled terminal text",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    parser.add_argument(
        "file",
        nargs="?",
        help="Document to render",
    )
    parser.add_argument(
        "--color",
        choices=COLOR_MODES,
        default=None,
        help="When to emit color (default: from config, else auto)",
    )
    parser.add_argument(
        "--no-hyperlinks",
        action="store_true",
        help="Print link URLs in parentheses instead of clickable links",
    )
    parser.add_argument(
        "--write-config",
        action="store_true",
        help="Save the effective settings to the config file and exit",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug output to stderr",
    )

    args = parser.parse_args(argv)
    _configure_logging(args.verbose)

    config = _effective_config(args)
    if args.write_config:
        return _cmd_write_config(config)

    return _cmd_render(args, config)


if __name__ == "__main__":
    raise SystemExit(main())
