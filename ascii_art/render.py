"""Horizontal glyph composition."""

from __future__ import annotations

import logging

from .flf import Glyph, GlyphTable

logger = logging.getLogger(__name__)


def render(table: GlyphTable, text: str) -> str:
    """
    Render text as block letters using a parsed font.

    Row r of the output is row r of every character's glyph, concatenated
    left to right, with trailing spaces removed. Rows left with no visible
    content are dropped entirely rather than kept as blank lines, so the
    result never starts or ends with an empty line and has at most
    ``table.height`` lines.

    All characters are looked up before any row is assembled, so an
    unsupported character fails the whole call instead of yielding part of
    the picture. A glyph shorter than the font height (truncated font data)
    contributes nothing to the rows it is missing.

    Args:
        table: GlyphTable from flf.parse
        text: Text to draw; may be empty

    Returns:
        The rendered rows joined with "\\n", or "" when nothing is visible

    Raises:
        UnsupportedCharacterError: If the font has no glyph for a character

    Example:
        >>> print(render(table, "Hi"))  # doctest: +SKIP
        #  # #
        #### #
        #  # #
    """
    # A zero-height table draws nothing, whatever it is asked to draw
    if table.height == 0:
        return ""

    glyphs: list[Glyph] = [
        table.glyph_for(char, position) for position, char in enumerate(text)
    ]

    lines: list[str] = []
    for r in range(table.height):
        line = "".join(glyph[r] if r < len(glyph) else "" for glyph in glyphs)
        line = line.rstrip(" ")
        if line.strip():
            lines.append(line)

    logger.debug("Rendered %d characters into %d rows", len(text), len(lines))
    return "\n".join(lines)
