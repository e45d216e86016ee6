"""
Font and logo storage.

Fonts are plain FIGlet ``.flf`` files addressed by file stem. By default
they come from the collection shipped inside the pyfiglet distribution,
which is read as package data and never imported as code; any directory of
``.flf`` files can stand in for it.

Storage problems never raise here. A missing directory lists as empty and
an unknown or unreadable font loads as empty bytes, which the parser turns
into a zero-height font that renders nothing.
"""

from __future__ import annotations

import logging
import re
from importlib.resources import files
from importlib.resources.abc import Traversable
from pathlib import Path
from typing import Final

logger = logging.getLogger(__name__)

# =============================================================================
# CONSTANTS
# =============================================================================

# Package whose data files hold the default font collection
BUNDLED_FONT_PACKAGE: Final[str] = "pyfiglet.fonts"

# Only FIGlet fonts are listed; toilet's .tlf files use a different header
FONT_EXTENSION: Final[str] = ".flf"

# Security: names are joined onto a storage root, so they must not be able to
# climb out of it ("../../etc/passwd") or name hidden files. Anything else a
# file name can hold is allowed; pyfiglet ships "ripper!_" and "patorjk's_cheese"
FONT_NAME_PATTERN: Final[re.Pattern[str]] = re.compile(r"[^./\\\x00-\x1f][^/\\\x00-\x1f]*")

# Pre-drawn banners shipped with this package
LOGO_PACKAGE: Final[str] = "ascii_art"
LOGO_DIRECTORY: Final[str] = "logos"


def is_valid_name(name: str) -> bool:
    """
    Check that a font or logo name is safe to join onto a storage root.

    A name may not contain path separators or control characters and may
    not start with a dot. Listing and loading share this rule, so every
    listed font can be loaded.

    Example:
        >>> is_valid_name("epic")
        True
        >>> is_valid_name("ripper!_")
        True
        >>> is_valid_name("../evil")
        False
    """
    return bool(FONT_NAME_PATTERN.fullmatch(name))


class FontCatalog:
    """
    Named collection of FIGlet font resources.

    Args:
        root: Directory (pathlib.Path) or importlib.resources traversable
              holding ``<name>.flf`` files; None selects pyfiglet's fonts

    Example:
        >>> catalog = FontCatalog()
        >>> "epic" in catalog.names()
        True
        >>> catalog.load("epic")[:4]
        b'flf2'
    """

    def __init__(self, root: Path | Traversable | None = None) -> None:
        self.root: Path | Traversable = (
            files(BUNDLED_FONT_PACKAGE) if root is None else root
        )

    def __repr__(self) -> str:
        return f"{type(self).__name__}({str(self.root)!r})"

    def names(self) -> list[str]:
        """
        List every font in the storage root, extension stripped.

        Order follows the storage listing and is not guaranteed to be
        alphabetical; a name is listed once even if the storage repeats it.

        Returns:
            Font names, or an empty list if the root cannot be read
        """
        try:
            entries = list(self.root.iterdir())
        except OSError as e:
            logger.warning("Font directory not readable: %s (%s)", self.root, e)
            return []

        names: list[str] = []
        seen: set[str] = set()
        for entry in entries:
            if not entry.name.endswith(FONT_EXTENSION) or not entry.is_file():
                continue
            name = entry.name[: -len(FONT_EXTENSION)]
            if not is_valid_name(name):
                logger.debug("Skipping unloadable font file %r", entry.name)
                continue
            if name not in seen:
                seen.add(name)
                names.append(name)

        logger.debug("Found %d fonts in %s", len(names), self.root)
        return names

    def load(self, name: str) -> bytes:
        """
        Fetch the raw bytes of a font.

        Args:
            name: Font name without extension (e.g., "epic", "standard")

        Returns:
            File contents, or b"" if the name is invalid or not stored
        """
        if not is_valid_name(name):
            logger.warning("Invalid font name: %r", name)
            return b""

        try:
            data = self.root.joinpath(name + FONT_EXTENSION).read_bytes()
        except OSError as e:
            logger.warning("Font %r not available in %s (%s)", name, self.root, e)
            return b""

        logger.debug("Loaded font %r (%d bytes)", name, len(data))
        return data


def load_logo(name: str) -> str | None:
    """
    Fetch a pre-drawn logo shipped with the package.

    Logos are printed verbatim instead of being rendered, for text that
    has a hand-made banner.

    Args:
        name: Logo file name, usually the text the user asked to render

    Returns:
        Logo text, or None when no logo has that name
    """
    if not is_valid_name(name):
        return None

    logo = files(LOGO_PACKAGE).joinpath(LOGO_DIRECTORY).joinpath(name)
    try:
        return logo.read_text(encoding="utf-8")
    except OSError:
        return None
