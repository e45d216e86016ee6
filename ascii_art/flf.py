"""
FIGlet (.flf) font definition parser.

A font file is line oriented:

    flf2a$ 6 5 16 15 11 0 24463      <- header: signature, hardblank, height, ...
    Free-form comment lines           <- preamble
     $@                               <- space glyph, one row per line,
     $@@                                 last row ends with a doubled endmark
    !@                                <- '!' glyph and every following
    !@@                                  printable character, in code order

Only the height is read from the header. Glyph boundaries are found by
looking at line endings: a row whose tail is a run of endmarks ("@@", "##"
or "$$", a single endmark for one-row fonts) closes the current glyph.
Everything before the first closing row is preamble and is discarded,
which also drops the file's own space glyph; glyph 0 is always synthesized.

Known fragility: a preamble line that happens to end in an endmark run
closes the preamble early, shifting every later glyph by one slot. This
matches the byte-for-byte behavior of the renderer the fonts were tuned
for and is deliberately not corrected here.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Final, TypeAlias

from .errors import UnsupportedCharacterError

logger = logging.getLogger(__name__)

# =============================================================================
# TYPE ALIASES
# =============================================================================

Row: TypeAlias = str  # One line of a glyph, fixed width within the glyph
Glyph: TypeAlias = tuple[Row, ...]  # All rows of one character, top to bottom

# =============================================================================
# CONSTANTS
# =============================================================================

# Every FIGlet 2 font header starts with this token ("flf2a" in practice)
HEADER_SIGNATURE: Final[str] = "flf2"

# Characters accepted as row endmarks; fonts pick one, the scan accepts any
SENTINELS: Final[tuple[str, ...]] = ("@", "#", "$")

# Glyph 0 is the space character; glyph i is chr(FIRST_CODE + i)
FIRST_CODE: Final[int] = 32

# Width of the synthesized space glyph
SPACE_WIDTH: Final[int] = 2


# =============================================================================
# DATA CLASSES
# =============================================================================


@dataclass(frozen=True, slots=True)
class GlyphTable:
    """
    Parsed font: a fixed height and one glyph per printable character.

    Attributes:
        height: Number of rows in every well-formed glyph (0 for a font
                without a header, which renders nothing)
        glyphs: Glyph per character offset; glyphs[0] is the space,
                glyphs[i] is the character with code 32 + i

    Example:
        >>> table = parse("flf2a$ 1\\n @\\nX@\\n")
        >>> table.glyphs
        (('  ',), ('X',))
    """

    height: int
    glyphs: tuple[Glyph, ...]

    def glyph_for(self, char: str, position: int = 0) -> Glyph:
        """
        Look up the glyph drawing a character.

        Args:
            char: A single character
            position: Offset of the character in the caller's text, used
                      only for the error message

        Returns:
            The glyph's rows; may hold fewer than height rows if the font
            data was truncated

        Raises:
            UnsupportedCharacterError: If the character has no glyph slot
        """
        index = ord(char) - FIRST_CODE
        if not 0 <= index < len(self.glyphs):
            raise UnsupportedCharacterError(
                char, position, self.height, last_char=self.last_char
            )
        return self.glyphs[index]

    @property
    def last_char(self) -> str:
        """Highest character the table can draw."""
        return chr(FIRST_CODE + len(self.glyphs) - 1)


# =============================================================================
# SCANNER STATES
# =============================================================================


@dataclass(frozen=True, slots=True)
class SkippingPreamble:
    """Before the first closing row; lines are consumed and dropped."""


@dataclass(slots=True)
class AccumulatingGlyph:
    """Collecting rows for the glyph at ``index``."""

    index: int
    rows: list[Row] = field(default_factory=list)


ScanState: TypeAlias = SkippingPreamble | AccumulatingGlyph


# =============================================================================
# LINE PREDICATES
# =============================================================================


def is_terminal_row(line: str, height: int) -> bool:
    """
    Check whether a line is the last row of a glyph.

    Multi-row fonts close a glyph with a doubled endmark ("@@"), one-row
    fonts with a single one. An empty line is compared as if the font had
    several rows, so it never closes a glyph.
    """
    width = 1 if height == 1 and line else 2
    if len(line) < width:
        return False
    return any(line.endswith(mark * width) for mark in SENTINELS)


def row_content(line: str, height: int, terminal: bool) -> Row:
    """Strip the endmark run from a font line."""
    if len(line) <= 1:
        return ""
    cut = 2 if terminal and height > 1 else 1
    return line[: len(line) - cut]


# =============================================================================
# PARSER
# =============================================================================


def split_lines(text: str) -> list[str]:
    """
    Split font data into lines.

    Only "\\n" separates lines and a trailing "\\r" is dropped from each one,
    so DOS line endings work but stray control characters inside a row are
    kept as row content. A final newline does not produce an empty line.
    """
    lines = text.split("\n")
    if lines and lines[-1] == "":
        lines.pop()
    return [line[:-1] if line.endswith("\r") else line for line in lines]


def _decode(raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        logger.debug("Font data is not UTF-8; decoding as Latin-1")
        return raw.decode("latin-1")


def _read_height(header: str) -> int:
    """Extract the glyph height from an ``flf2`` header line."""
    fields = header.split()
    try:
        height = int(fields[1])
    except (IndexError, ValueError):
        logger.warning("Malformed font header %r; treating height as 0", header)
        return 0
    if height < 0:
        logger.warning("Negative font height %d; treating as 0", height)
        return 0
    return height


def _scan_glyphs(lines: list[str], height: int) -> list[Glyph]:
    """
    Run the body state machine over the lines following the header.

    SkippingPreamble moves to AccumulatingGlyph(1) on the first closing row.
    AccumulatingGlyph(i) appends every line and, on a closing row, emits
    glyph i and moves to AccumulatingGlyph(i + 1).
    """
    glyphs: list[Glyph] = [(" " * SPACE_WIDTH,) * height]
    state: ScanState = SkippingPreamble()

    for line in lines:
        terminal = is_terminal_row(line, height)

        if isinstance(state, SkippingPreamble):
            if terminal:
                state = AccumulatingGlyph(index=len(glyphs))
            continue

        state.rows.append(row_content(line, height, terminal))
        if terminal:
            glyphs.append(tuple(state.rows))
            state = AccumulatingGlyph(index=state.index + 1)

    # Truncated data: keep what the last glyph managed to collect
    if isinstance(state, AccumulatingGlyph) and state.rows:
        logger.debug(
            "Font data ended inside glyph %d (%r) after %d of %d rows",
            state.index,
            chr(FIRST_CODE + state.index),
            len(state.rows),
            height,
        )
        glyphs.append(tuple(state.rows))

    return glyphs


def parse(raw: bytes | str) -> GlyphTable:
    """
    Parse FIGlet font data into a glyph table.

    Never raises on malformed data: a missing header gives a zero-height
    table that renders nothing, and truncated glyphs are kept short.

    Args:
        raw: Font file contents; bytes are decoded as UTF-8, or as
             Latin-1 when they are not valid UTF-8 (older fonts store
             their accented glyphs that way)

    Returns:
        GlyphTable built from the data
    """
    text = _decode(raw) if isinstance(raw, bytes) else raw
    lines = split_lines(text)

    height = 0
    body_start = len(lines)
    for number, line in enumerate(lines):
        if line.startswith(HEADER_SIGNATURE):
            height = _read_height(line)
            body_start = number + 1
            break
    else:
        if lines:
            logger.warning("No %r header found in font data", HEADER_SIGNATURE)

    glyphs = _scan_glyphs(lines[body_start:], height)
    logger.debug("Parsed font: height=%d, %d glyphs", height, len(glyphs))
    return GlyphTable(height=height, glyphs=tuple(glyphs))
