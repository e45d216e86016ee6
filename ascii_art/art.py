"""
One-call entry points: list fonts, render text, print text.

Each call resolves its font through a catalog and parses it afresh; parsed
fonts are never cached or shared between calls.
"""

from __future__ import annotations

import logging
import sys
from typing import Final, TextIO

from .catalog import FontCatalog
from .flf import parse
from .render import render

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

# Font used when the caller passes an empty font name
DEFAULT_FONT: Final[str] = "epic"

# Text used by echo_all (and the CLI) when none is given
DEFAULT_TEXT: Final[str] = "ascii-art"


def _catalog(catalog: FontCatalog | None) -> FontCatalog:
    return FontCatalog() if catalog is None else catalog


def list_names(catalog: FontCatalog | None = None) -> list[str]:
    """Return the name of every available font."""
    return _catalog(catalog).names()


def ascii_art(
    text: str,
    font_name: str = "",
    catalog: FontCatalog | None = None,
) -> str:
    """
    Render text as block letters.

    Args:
        text: Text to render (e.g., "Hello")
        font_name: Font to use; empty selects DEFAULT_FONT
        catalog: Where fonts are looked up (default: pyfiglet's collection)

    Returns:
        The rendered rows joined by newlines. An unknown font renders as "".

    Raises:
        UnsupportedCharacterError: If the font cannot draw a character

    Example:
        >>> print(ascii_art("Hi", "banner"))  # doctest: +SKIP
        #     #
        #     #  #
        #######  #
        #     #  #
        #     #  #
    """
    font_name = font_name or DEFAULT_FONT
    table = parse(_catalog(catalog).load(font_name))
    logger.debug("Rendering %r with font %r (height %d)", text, font_name, table.height)
    return render(table, text)


def echo(
    text: str,
    font_name: str = "",
    catalog: FontCatalog | None = None,
    stream: TextIO | None = None,
) -> None:
    """Render text and print it, followed by a newline."""
    out = sys.stdout if stream is None else stream
    print(ascii_art(text, font_name, catalog), file=out)


def echo_all(
    text: str = "",
    catalog: FontCatalog | None = None,
    stream: TextIO | None = None,
) -> None:
    """
    Print text rendered in every available font, each under a label.

    Stops at the first font that cannot draw the text. That font's label
    has already been written when the error propagates.

    Args:
        text: Text to render; empty selects DEFAULT_TEXT
        catalog: Where fonts are looked up
        stream: Output stream (default: sys.stdout)

    Raises:
        UnsupportedCharacterError: If a font cannot draw a character
    """
    text = text or DEFAULT_TEXT
    catalog = _catalog(catalog)
    out = sys.stdout if stream is None else stream

    for name in catalog.names():
        print(f"\nFont: {name}", file=out)
        print(ascii_art(text, name, catalog), file=out)


def list_fonts(
    catalog: FontCatalog | None = None,
    stream: TextIO | None = None,
) -> None:
    """Print every available font name, one per line."""
    out = sys.stdout if stream is None else stream
    for name in list_names(catalog):
        print(name, file=out)
