"""Shared fixtures: small hand-built FIGlet fonts."""

from __future__ import annotations

from pathlib import Path

import pytest

from font_builder import BLOCK_GLYPHS, build_font


@pytest.fixture
def block_font() -> str:
    return build_font(BLOCK_GLYPHS)


@pytest.fixture
def font_dir(tmp_path: Path, block_font: str) -> Path:
    """Directory holding 'block' (full ASCII) and 'tiny' (only up to 'I')."""
    (tmp_path / "block.flf").write_text(block_font, encoding="utf-8")
    (tmp_path / "tiny.flf").write_text(build_font(BLOCK_GLYPHS, last="I"), encoding="utf-8")
    return tmp_path
