"""End-to-end tests for reading a variety of guides."""

import pytest
from guide_builder import LONG, SHORT, encrypt, entry, example_guide, header, menu, see_also, word
from nortonguide.lib.guide import Guide
from nortonguide.lib.render import to_html, to_plain_text, to_terminal_text


def guide_variants():
    """Guides shaped in the different ways found in the wild."""
    return {
        "example": example_guide(),
        "expert-help-no-menus": header(magic=b"EH", menu_count=0) + entry(LONG, ["Only entry"]),
        "menus-after-entries": (
            header(menu_count=2)
            + entry(SHORT, ["a", "b"])
            + menu("One", [("x", 0)])
            + entry(LONG, ["c"], see_also_block=see_also([("y", 0)]))
            + menu("Two", [("z", 0), ("w", 0)])
            + entry(LONG, ["d"])
        ),
        "trailing-junk": example_guide() + encrypt(word(0x4242)) + b"\xff" * 30,
        "rle-and-markup": header(menu_count=0)
        + entry(LONG, ["^A1E\xff\x08^A1E\xff\xff^B\xc9\xcd\xbb^B\xff"] * 5),
        "oversized-see-also": header(menu_count=0)
        + entry(LONG, ["text"], see_also_block=see_also([(str(i), 0) for i in range(20)], stored_count=60)),
    }


@pytest.mark.parametrize("name", sorted(guide_variants()))
def test_read_guide(name, write_guide):
    """Test that each guide can be opened, walked and rendered without errors."""
    guide = Guide(write_guide(guide_variants()[name], f"{name}.ng")).open()

    try:
        assert guide.is_guide
        assert len(guide.menus) <= guide.menu_count

        entries = list(guide.entries())
        assert len(entries) > 0

        for entry_ in entries:
            assert len(entry_.lines) == entry_.line_count
            for line in entry_.lines:
                to_plain_text(line)
                to_terminal_text(line)
                to_html(line)
            if entry_.is_short:
                for offset in entry_.line_offsets:
                    guide.is_entry_at(offset)
    except Exception as e:
        pytest.fail(f"Failed to read {name}: {type(e).__name__}: {e}")


def test_menus_found_between_entries(write_guide):
    """Menus are found wherever they sit among the early entries."""
    guide = Guide(write_guide(guide_variants()["menus-after-entries"])).open()

    assert [menu_.title for menu_ in guide.menus] == ["One", "Two"]
    assert [entry_.lines for entry_ in guide.entries()] == [["d"]]
