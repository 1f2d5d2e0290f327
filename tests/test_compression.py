"""Tests for run-length expansion of guide text."""

import logging

import pytest
from nortonguide.lib.compression import rle_clean, rle_expand


@pytest.mark.parametrize("text", ["", "plain text", "^Bbold^B", "\xc9\xcd\xbb", "\xfe\x01"])
def test_expand_without_markers_is_unchanged(text):
    """Strings with no RLE marker come back as they went in."""
    assert rle_expand(text) == text


def test_expand_run_of_spaces():
    """A marker and a count become that many spaces."""
    assert rle_expand("a\xff\x03b") == "a   b"
    assert rle_expand("\xff\x0a") == " " * 10


def test_expand_zero_count():
    """A count of zero takes the marker and count away entirely."""
    assert rle_expand("a\xff\x00b") == "ab"


def test_expand_doubled_marker(caplog):
    """A marker used as a count is a single space, and is worth a warning."""
    with caplog.at_level(logging.WARNING, logger="nortonguide.lib.compression"):
        assert rle_expand("a\xff\xffb") == "a b"
    assert [record.levelno for record in caplog.records] == [logging.WARNING]
    assert "Doubled RLE marker" in caplog.records[0].getMessage()


def test_expand_single_run_is_not_a_warning(caplog):
    """Ordinary runs expand quietly."""
    with caplog.at_level(logging.WARNING, logger="nortonguide.lib.compression"):
        assert rle_expand("a\xff\x03b") == "a   b"
    assert caplog.records == []


def test_expand_trailing_marker():
    """A marker with nothing after it is left alone."""
    assert rle_expand("ab\xff") == "ab\xff"
    assert rle_expand("\xff") == "\xff"


def test_expand_several_runs():
    """Tests more than one run in a line."""
    assert rle_expand("\xff\x02x\xff\x01y\xff") == "  x y\xff"


def test_expand_is_idempotent_on_expanded_text():
    """Expanded text has no markers left in it, so expanding again changes nothing."""
    once = rle_expand("a\xff\x04b")
    assert rle_expand(once) == once


def test_clean():
    """Cleaning swaps markers for single spaces without expanding."""
    assert rle_clean("a\xff\x04b") == "a \x04b"
