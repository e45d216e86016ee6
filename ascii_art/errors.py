"""Exception hierarchy for ascii_art."""

from __future__ import annotations


class AsciiArtError(Exception):
    """
    Base exception for all ascii_art errors.

    Catching this exception will catch all package-specific errors.
    Degraded input (unknown font, missing header, short glyphs) is not an
    error and never raises; only input the renderer cannot draw does.
    """


class UnsupportedCharacterError(AsciiArtError):
    """
    Raised when text contains a character the glyph table cannot draw.

    FIGlet fonts cover a contiguous run of codes starting at the space
    character, so this includes control characters and anything above the
    last glyph in the font. A zero-height table renders nothing and never
    raises.

    Attributes:
        char: The offending character
        position: Offset of the character in the rendered text
        font_height: Height of the table the lookup was made against
        last_char: Highest character the font covers, if known
    """

    def __init__(
        self,
        char: str,
        position: int,
        font_height: int,
        last_char: str | None = None,
    ) -> None:
        self.char = char
        self.position = position
        self.font_height = font_height
        self.last_char = last_char
        msg = f"Unsupported character {char!r} (code {ord(char)}) at position {position}"
        if last_char is not None:
            msg += f"; font covers ' '..{last_char!r}"
        super().__init__(msg)
