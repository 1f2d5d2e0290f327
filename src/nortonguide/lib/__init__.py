"""
nortonguide.lib - Core library components

Internal modules for decoding guide structures and rendering guide text.
"""

from .guide import Guide, GuideHeader, open_guide
from .cursor import ByteCursor
from .compression import rle_expand, rle_clean
from .markup import MarkupHandler, parse_line
from .render import to_plain_text, to_terminal_text, to_html
from .exceptions import NGError, NotAGuideError, MalformedStructureError, GuideReadError

__all__ = [
    "Guide",
    "GuideHeader",
    "open_guide",
    "ByteCursor",
    "rle_expand",
    "rle_clean",
    "MarkupHandler",
    "parse_line",
    "to_plain_text",
    "to_terminal_text",
    "to_html",
    "NGError",
    "NotAGuideError",
    "MalformedStructureError",
    "GuideReadError",
]
