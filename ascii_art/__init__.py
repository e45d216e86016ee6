"""
FIGlet font parser and block-text renderer.

Parses ``.flf`` font files into glyph tables and composes glyphs side by
side to draw text as multi-line block letters.

Example:
    >>> from ascii_art import ascii_art
    >>> print(ascii_art("Hi", "banner"))  # doctest: +SKIP
"""

from __future__ import annotations

__version__ = "0.1.0"

from .art import DEFAULT_FONT, DEFAULT_TEXT, ascii_art, echo, echo_all, list_fonts, list_names
from .catalog import FontCatalog, load_logo
from .errors import AsciiArtError, UnsupportedCharacterError
from .flf import GlyphTable, parse
from .render import render

# =============================================================================
# PUBLIC API EXPORTS
# =============================================================================

__all__ = [
    # Data classes
    "GlyphTable",  # Parsed font: height plus one glyph per character
    "FontCatalog",  # Named collection of .flf fonts
    # Exception classes
    "AsciiArtError",  # Base exception for all errors
    "UnsupportedCharacterError",  # Text holds a character the font cannot draw
    # Core functions
    "parse",  # Font bytes -> GlyphTable
    "render",  # GlyphTable + text -> block letters
    "load_logo",  # Bundled pre-drawn banner by name
    # One-call helpers
    "ascii_art",
    "echo",
    "echo_all",
    "list_fonts",
    "list_names",
    "DEFAULT_FONT",
    "DEFAULT_TEXT",
]
