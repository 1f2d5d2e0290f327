"""Tests for the command line tool."""

import json
from nortonguide.__main__ import main


def test_dump_json(example_guide_path, capsys):
    """The default output is the guide as JSON."""
    assert main([example_guide_path]) == 0
    parsed = json.loads(capsys.readouterr().out)
    assert parsed["header"]["title"] == "Expert Guide"
    assert "entries" not in parsed


def test_dump_json_with_entries(example_guide_path, capsys):
    """Tests including the entries in the JSON."""
    assert main([example_guide_path, "--entries"]) == 0
    parsed = json.loads(capsys.readouterr().out)
    assert len(parsed["entries"]) == 3


def test_dump_text(example_guide_path, capsys):
    """Tests printing the text of every entry."""
    assert main([example_guide_path, "--text", "plain"]) == 0
    out = capsys.readouterr().out
    assert "Introduction" in out
    assert "Line with     gap" in out
    assert "See also: Closing words" in out
    assert "Expert Guide » Getting going" in out


def test_missing_file(tmp_path, capsys):
    """A missing file is reported and fails."""
    assert main([str(tmp_path / "missing.ng")]) == 1
    assert "Error" in capsys.readouterr().err


def test_non_guide(write_guide, capsys):
    """A non-guide fails unless asked to be lenient."""
    path = write_guide(b"not a guide")
    assert main([path]) == 1
    assert main([path, "--lenient"]) == 0
