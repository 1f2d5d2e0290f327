"""Tests for DOS character mapping."""

import pytest
from nortonguide.lib.charset import dos_char, make_dosish, make_plain, plain_char


@pytest.mark.parametrize(
    "value,expected",
    [(0xB3, "|"), (0xBA, "|"), (0xC4, "-"), (0xCD, "-"), (0xC9, "+"), (0xDA, "+"), (0xDB, "#"), (0xB0, "#")],
)
def test_plain_line_drawing(value, expected):
    """Box drawing characters become ASCII approximations."""
    assert plain_char(value) == expected


def test_plain_printable_and_not():
    """Printable ASCII stays, everything else becomes a dot."""
    assert plain_char(ord("A")) == "A"
    assert plain_char(ord(" ")) == " "
    assert plain_char(0x00) == "."
    assert plain_char(0x1F) == "."
    assert plain_char(0x7F) == "."
    assert plain_char(0x82) == "."


def test_dos_chars():
    """Tests some of the DOS glyphs."""
    assert dos_char(0x01) == "☺"
    assert dos_char(0x82) == "é"
    assert dos_char(0xC4) == "─"
    assert dos_char(0xC9) == "╔"
    assert dos_char(0xE3) == "π"
    assert dos_char(ord("A")) == "A"


def test_dos_falls_back_to_plain():
    """Bytes with no glyph of their own use the plain table."""
    assert dos_char(0x00) == "."


def test_tables_are_total():
    """Every byte maps to a single character in both tables."""
    for value in range(256):
        assert len(plain_char(value)) == 1
        assert len(dos_char(value)) == 1


def test_strings():
    """Tests converting whole strings."""
    assert make_plain("\xc9\xcd\xbb Hi") == "+-+ Hi"
    assert make_dosish("\xc9\xcd\xbb Hi") == "╔═╗ Hi"
