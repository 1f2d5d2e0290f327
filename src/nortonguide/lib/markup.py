"""Parser for the control codes embedded in the text of guide entries.

Lines of guide text carry ``^``-prefixed codes that switch display
attributes on and off or drop in a literal character:

    ^Axx   colour attribute xx (hex); the same attribute again turns it off
    ^B     bold on/off
    ^Cxx   the character with value xx (hex)
    ^N     back to normal
    ^R     reverse video on/off
    ^U     underline on/off
    ^^     a literal ^

The parser walks a line once and reports what it finds to a
``MarkupHandler``; renderers subclass that and override what they need.
"""

from enum import Enum
from typing import Optional

CTRL_CHAR = "^"

HEX_DIGITS = "0123456789abcdefABCDEF"


class Mode(Enum):
    """
    The display mode in effect. Guides were written for hardware with a
    single attribute per character, so modes don't stack.
    """

    NORMAL = 0
    BOLD = 1
    UNDERLINE = 2
    REVERSE = 3
    ATTR = 4


class MarkupHandler:
    """
    Receives the events found while parsing a line.

    Every method does nothing by default, except that the "un" methods fall
    back to ``normal()`` so a handler only interested in switching things
    off wholesale needs to override just that.
    """

    def text(self, run: str):
        pass

    def colour(self, attr: int):
        pass

    def normal(self):
        pass

    def bold(self):
        pass

    def unbold(self):
        self.normal()

    def reverse(self):
        pass

    def unreverse(self):
        self.normal()

    def underline(self):
        pass

    def ununderline(self):
        self.normal()

    def char_value(self, value: int):
        pass


def _hex_value(line: str, start: int) -> Optional[int]:
    """The two digit hex value at ``start``, or None if there isn't one."""
    digits = line[start : start + 2]
    if len(digits) != 2 or any(digit not in HEX_DIGITS for digit in digits):
        return None
    return int(digits, 16)


def parse_line(line: str, handler: MarkupHandler) -> MarkupHandler:
    """
    Parses a line of guide text, reporting to ``handler``.

    Text between control codes is reported as it's found, and any text after
    the last one is reported at the end. A caret that isn't followed by a
    code it understands is just text.
    """
    mode = Mode.NORMAL
    last_attr = -1
    run_start = 0
    i = line.find(CTRL_CHAR)

    def flush(end: int):
        if end > run_start:
            handler.text(line[run_start:end])

    while i != -1:
        code = line[i + 1 : i + 2].upper()
        consumed = 0

        if code == "A":
            attr = _hex_value(line, i + 2)
            if attr is not None:
                flush(i)
                if mode == Mode.ATTR and attr == last_attr:
                    handler.normal()
                    mode = Mode.NORMAL
                else:
                    last_attr = attr
                    handler.colour(attr)
                    mode = Mode.ATTR
                consumed = 4

        elif code == "C":
            value = _hex_value(line, i + 2)
            if value is not None:
                flush(i)
                handler.char_value(value)
                consumed = 4

        elif code in ("B", "R", "U"):
            flush(i)
            target, switch_on, switch_off = {
                "B": (Mode.BOLD, handler.bold, handler.unbold),
                "R": (Mode.REVERSE, handler.reverse, handler.unreverse),
                "U": (Mode.UNDERLINE, handler.underline, handler.ununderline),
            }[code]
            if mode == target:
                switch_off()
                mode = Mode.NORMAL
            else:
                switch_on()
                mode = target
            consumed = 2

        elif code == "N":
            flush(i)
            handler.normal()
            mode = Mode.NORMAL
            consumed = 2

        elif code == CTRL_CHAR:
            flush(i)
            handler.text(CTRL_CHAR)
            consumed = 2

        if consumed:
            run_start = i + consumed
            i = line.find(CTRL_CHAR, run_start)
        else:
            # Not a code; the caret stays part of the text run.
            i = line.find(CTRL_CHAR, i + 1)

    flush(len(line))
    return handler
