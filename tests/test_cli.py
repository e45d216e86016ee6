"""Tests for the ascii-art command line."""

from __future__ import annotations

from pathlib import Path

import pytest

from ascii_art.art import DEFAULT_FONT
from ascii_art.cli import build_parser, cli_main
from font_builder import BLOCK_HI


class TestParser:
    def test_defaults(self):
        args = build_parser().parse_args([])
        assert args.text == "ascii-art"
        assert args.font == DEFAULT_FONT
        assert args.font_dir is None
        assert not args.list_fonts
        assert not args.view_all

    def test_long_aliases(self):
        args = build_parser().parse_args(["--face", "big", "--list", "x"])
        assert args.font == "big"
        assert args.list_fonts
        assert args.text == "x"


class TestCliMain:
    def test_render(self, font_dir: Path, capsys: pytest.CaptureFixture):
        code = cli_main(["HI", "-f", "block", "--font-dir", str(font_dir)])

        assert code == 0
        assert capsys.readouterr().out == BLOCK_HI + "\n"

    def test_list_fonts(self, font_dir: Path, capsys: pytest.CaptureFixture):
        code = cli_main(["--list-fonts", "--font-dir", str(font_dir)])

        assert code == 0
        assert sorted(capsys.readouterr().out.splitlines()) == ["block", "tiny"]

    def test_view_all(self, font_dir: Path, capsys: pytest.CaptureFixture):
        code = cli_main(["HI", "--view-all", "--font-dir", str(font_dir)])
        out = capsys.readouterr().out

        assert code == 0
        assert "Font: block" in out
        assert "Font: tiny" in out

    def test_unsupported_character_exits_1(
        self, font_dir: Path, capsys: pytest.CaptureFixture
    ):
        code = cli_main(["HI\t", "-f", "block", "--font-dir", str(font_dir)])

        assert code == 1
        assert capsys.readouterr().out == ""

    def test_view_all_unsupported_character_exits_1(
        self, font_dir: Path, capsys: pytest.CaptureFixture
    ):
        code = cli_main(["H_I", "--view-all", "--font-dir", str(font_dir)])

        assert code == 1
        assert "Font: tiny" in capsys.readouterr().out

    def test_unknown_font_prints_empty_line(
        self, font_dir: Path, capsys: pytest.CaptureFixture
    ):
        code = cli_main(["HI", "-f", "missing", "--font-dir", str(font_dir)])

        assert code == 0
        assert capsys.readouterr().out == "\n"

    def test_logo_is_printed_verbatim(self, font_dir: Path, capsys: pytest.CaptureFixture):
        code = cli_main(["python", "--font-dir", str(font_dir)])
        out = capsys.readouterr().out

        assert code == 0
        assert out.splitlines()[-1] == "|_|    |___/"

    def test_verbose_flag(self, font_dir: Path, capsys: pytest.CaptureFixture):
        code = cli_main(["-v", "HI", "-f", "block", "--font-dir", str(font_dir)])

        assert code == 0
        assert capsys.readouterr().out == BLOCK_HI + "\n"
