"""Hand-built FIGlet fonts for the test suite."""

from __future__ import annotations

# Scenario font: two rows, space glyph then '!' only
TWO_ROW_FONT = "flf2a$ 2 1 8 0 1\nTwo row test font\n  @\n  @@\nXX@\nYY@@\n"

# Three-row letters used by the block test font
BLOCK_GLYPHS: dict[str, list[str]] = {
    "H": ["# # ", "### ", "# # "],
    "I": ["# ", "# ", "# "],
    "-": ["   ", "## ", "   "],
    "_": ["   ", "   ", "###"],
}

# What "HI" looks like in the block font
BLOCK_HI = "# # #\n### #\n# # #"


def build_font(
    glyphs: dict[str, list[str]],
    height: int = 3,
    last: str = "~",
    comments: tuple[str, ...] = ("Block test font", "by the test suite"),
    endmark: str = "@",
) -> str:
    """
    Build FIGlet font text covering every code from the space up to ``last``.

    Characters missing from ``glyphs`` get a one-column blank glyph.
    """
    lines = [f"flf2a$ {height} {height - 1} 10 0 {len(comments)}", *comments]
    for code in range(32, ord(last) + 1):
        rows = glyphs.get(chr(code), [" "] * height)
        for i, row in enumerate(rows):
            closing = i == len(rows) - 1 and height > 1
            lines.append(row + endmark * (2 if closing else 1))
    return "\n".join(lines) + "\n"
