"""Turn lines of guide text into plain text, terminal text or HTML."""

from html import escape
from typing import List
from .charset import make_dosish, make_plain
from .markup import MarkupHandler, parse_line

# Foreground and background SGR parameters for the 16 DOS colours.
FG_MAP = [
    "0;30", "0;34", "0;32", "0;36", "0;31", "0;35", "0;33", "0;37",
    "1;30", "1;34", "1;32", "1;36", "1;31", "1;35", "1;33", "1;37",
]  # fmt: skip
BG_MAP = [
    "40", "44", "42", "46", "41", "45", "43", "47",
    "40", "44", "42", "46", "41", "45", "43", "47",
]  # fmt: skip


def _esc(code: str) -> str:
    return "\x1b[" + code


class PlainTextHandler(MarkupHandler):
    """Collects the text of a line, dropping all formatting."""

    def __init__(self):
        self.parts: List[str] = []

    def text(self, run: str):
        self.parts.append(make_plain(run))

    def char_value(self, value: int):
        self.parts.append(make_plain(chr(value)))

    def result(self) -> str:
        return "".join(self.parts)


class TerminalTextHandler(PlainTextHandler):
    """Renders a line with ANSI escape sequences for the formatting."""

    def text(self, run: str):
        self.parts.append(make_dosish(run))

    def char_value(self, value: int):
        self.parts.append(make_dosish(chr(value)))

    def colour(self, attr: int):
        self.parts.append(_esc(f"{FG_MAP[attr & 0xF]};{BG_MAP[(attr >> 4) & 0xF]}m"))

    def normal(self):
        self.parts.append(_esc("0m"))

    def bold(self):
        self.parts.append(_esc("1m"))

    def reverse(self):
        self.parts.append(_esc("7m"))

    def underline(self):
        self.parts.append(_esc("4m"))

    def result(self) -> str:
        return super().result() + _esc("0m")


class HTMLHandler(PlainTextHandler):
    """
    Renders a line as HTML, with each attribute held in a ``span``.

    Colour attributes use the classes ``fgN`` and ``bgN``; bold, reverse and
    underline use ``ngb``, ``ngr`` and ``ngu``. Anything still open at the
    end of the line is closed.
    """

    def __init__(self, graph_text: bool = True):
        super().__init__()
        self.graph_text = graph_text
        self.open_spans = 0

    def _convert(self, text: str) -> str:
        return escape(make_dosish(text) if self.graph_text else make_plain(text))

    def _open(self, classes: str):
        self.parts.append(f'<span class="{classes}">')
        self.open_spans += 1

    def _close(self):
        if self.open_spans:
            self.parts.append("</span>")
            self.open_spans -= 1

    def text(self, run: str):
        self.parts.append(self._convert(run))

    def char_value(self, value: int):
        self.parts.append(self._convert(chr(value)))

    def colour(self, attr: int):
        self._open(f"fg{attr & 0xF} bg{(attr >> 4) & 0xF}")

    def normal(self):
        while self.open_spans:
            self._close()

    def bold(self):
        self._open("ngb")

    def unbold(self):
        self._close()

    def reverse(self):
        self._open("ngr")

    def unreverse(self):
        self._close()

    def underline(self):
        self._open("ngu")

    def ununderline(self):
        self._close()

    def result(self) -> str:
        self.normal()
        return super().result()


def to_plain_text(line: str) -> str:
    """Strips the markup from a line of guide text."""
    return parse_line(line, PlainTextHandler()).result()


def to_terminal_text(line: str) -> str:
    """Renders a line of guide text for an ANSI terminal."""
    return parse_line(line, TerminalTextHandler()).result()


def to_html(line: str, graph_text: bool = True) -> str:
    """
    Renders a line of guide text as HTML.

    With ``graph_text`` the DOS box drawing characters are kept as their
    Unicode equivalents, otherwise they're approximated in ASCII.
    """
    return parse_line(line, HTMLHandler(graph_text=graph_text)).result()
