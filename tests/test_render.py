"""Tests for rendering guide lines."""

from nortonguide.lib.render import to_html, to_plain_text, to_terminal_text

ESC = "\x1b["


def test_plain_text_strips_markup():
    """Tests that plain text loses the formatting but keeps the text."""
    assert to_plain_text("^Bbold^B and ^A1Fcolour^A1F") == "bold and colour"


def test_plain_text_cleans_characters():
    """Box drawing and explicit characters are made plain."""
    assert to_plain_text("\xc9\xcd\xbb ^CC4 ^^") == "+-+ - ^"


def test_terminal_colour():
    """The low nibble is the foreground, the high nibble the background."""
    assert to_terminal_text("^A1Fx") == f"{ESC}1;37;44mx{ESC}0m"
    assert to_terminal_text("^A40x^A40y") == f"{ESC}0;30;41mx{ESC}0my{ESC}0m"


def test_terminal_modes():
    """Tests bold, reverse and underline for a terminal."""
    assert to_terminal_text("^Bb^B") == f"{ESC}1mb{ESC}0m{ESC}0m"
    assert to_terminal_text("^Rr") == f"{ESC}7mr{ESC}0m"
    assert to_terminal_text("^Uu^N") == f"{ESC}4mu{ESC}0m{ESC}0m"


def test_terminal_keeps_dos_glyphs():
    """Terminal text keeps the DOS look."""
    assert to_terminal_text("\xc4") == f"─{ESC}0m"


def test_html_escapes_text():
    """Text is escaped for HTML."""
    assert to_html("a < b & c") == "a &lt; b &amp; c"


def test_html_spans():
    """Tests the spans that carry the formatting."""
    assert to_html("^Bb^B ^Uu^U ^Rr^R") == (
        '<span class="ngb">b</span> <span class="ngu">u</span> <span class="ngr">r</span>'
    )
    assert to_html("^A1Fx^A1Fy") == '<span class="fg15 bg1">x</span>y'


def test_html_closes_open_spans():
    """Anything left open at the end of the line is closed."""
    assert to_html("^A1F^Bx") == '<span class="fg15 bg1"><span class="ngb">x</span></span>'


def test_html_graph_text():
    """Box drawing is kept or approximated on request."""
    assert to_html("\xc4") == "─"
    assert to_html("\xc4", graph_text=False) == "-"
