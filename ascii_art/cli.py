"""
Command-line interface for ascii_art.

Renders text as block letters with FIGlet fonts, without calling out to the
figlet or toilet programs. Three modes:

1. RENDER (default): Draw the text with one font (--font, default "epic").
   If the text names a bundled logo, the logo is printed instead.

2. LIST (--list-fonts): Print the name of every available font.

3. VIEW ALL (--view-all): Draw the text once per font, each under a
   "Font: <name>" label. Handy for picking a font.

Rendered text goes to stdout; diagnostics go to stderr through logging, so
output can be redirected to a file cleanly.

Usage examples:
    python -m ascii_art "Hello"
    python -m ascii_art "Hello" -f banner
    python -m ascii_art --list-fonts
    python -m ascii_art "Hi" --font-dir /usr/share/figlet --view-all
"""

from __future__ import annotations

# =============================================================================
# IMPORTS
# =============================================================================

import argparse  # CLI argument parsing
import logging  # Structured logging to stderr
import sys  # System exit codes
from pathlib import Path  # --font-dir handling

from .art import DEFAULT_FONT, DEFAULT_TEXT, echo, echo_all, list_fonts
from .catalog import FontCatalog, load_logo
from .errors import AsciiArtError

# =============================================================================
# LOGGING CONFIGURATION
# =============================================================================

# Configure logging to stderr so rendered text can go to stdout without interference
# Uses simple format: "LEVEL: message" for clean CLI output
logging.basicConfig(
    level=logging.INFO,
    format="%(levelname)s: %(message)s",
    stream=sys.stderr,
)
logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser for the ascii-art command."""
    parser = argparse.ArgumentParser(
        prog="ascii-art",
        description="Generate ASCII art from a string using FIGlet fonts.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""\
Examples:
  %(prog)s "Hello World"
  %(prog)s "Kitchn" -f banner
  %(prog)s --list-fonts
  %(prog)s "Test" --view-all
  %(prog)s "Test" --font-dir ./fonts -f myfont
""",
    )

    parser.add_argument(
        "text",
        nargs="?",
        default=DEFAULT_TEXT,
        help=f"Text to render, or the name of a bundled logo (default: {DEFAULT_TEXT})",
    )
    parser.add_argument(
        "-f",
        "--font",
        "--face",
        dest="font",
        default=DEFAULT_FONT,
        metavar="NAME",
        help=f"Font name (default: {DEFAULT_FONT})",
    )
    parser.add_argument(
        "--font-dir",
        type=Path,
        metavar="DIR",
        help="Directory of .flf fonts to use instead of the bundled collection",
    )
    parser.add_argument(
        "-l",
        "--list-fonts",
        "--list",
        dest="list_fonts",
        action="store_true",
        help="List available fonts and exit",
    )
    parser.add_argument(
        "-a",
        "--view-all",
        action="store_true",
        help="Render the text with every available font",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser


def cli_main(argv: list[str] | None = None) -> int:
    """
    Command-line interface entry point.

    Exit Codes:
        0   - Success
        1   - Error (the font cannot draw the text)
        130 - Interrupted (Ctrl+C)

    Args:
        argv: Arguments without the program name (default: sys.argv[1:])

    Returns:
        Integer exit code for sys.exit()
    """
    args = build_parser().parse_args(argv)

    # Enable debug logging for the whole package if --verbose flag is set
    if args.verbose:
        logging.getLogger("ascii_art").setLevel(logging.DEBUG)

    catalog = FontCatalog(args.font_dir) if args.font_dir else FontCatalog()
    logger.debug("Using font catalog %r", catalog)

    try:
        if args.list_fonts:
            list_fonts(catalog)
            return 0

        if args.view_all:
            echo_all(args.text, catalog)
            return 0

        # A hand-drawn logo wins over rendering when the text names one
        logo = load_logo(args.text)
        if logo is not None:
            logger.debug("Printing bundled logo %r", args.text)
            sys.stdout.write(logo)
            return 0

        echo(args.text, args.font, catalog)
        return 0

    except AsciiArtError as e:
        # The font has no glyph for some character of the text
        logger.error("Render error: %s", e)
        return 1
    except KeyboardInterrupt:
        logger.info("Interrupted")
        return 130  # Standard exit code for SIGINT


# =============================================================================
# SCRIPT ENTRY POINT
# =============================================================================

if __name__ == "__main__":
    sys.exit(cli_main())
