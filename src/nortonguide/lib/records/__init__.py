"""
nortonguide.lib.records - Record decoders

Decoders for the menus, entries and see-also blocks held in the body of a
guide.
"""

from .base import Record, EntryType, MAX_PROMPT_LEN, MAX_LINE_LEN
from .menu import Menu, MenuOption, decode_menu
from .see_also import SeeAlso, SeeAlsoOption, MAX_SEE_ALSO, decode_see_also
from .entry import Entry, EntryBase, ShortEntry, LongEntry, decode_entry, skip_entry

__all__ = [
    "Record",
    "EntryType",
    "MAX_PROMPT_LEN",
    "MAX_LINE_LEN",
    "MAX_SEE_ALSO",
    "Menu",
    "MenuOption",
    "SeeAlso",
    "SeeAlsoOption",
    "Entry",
    "EntryBase",
    "ShortEntry",
    "LongEntry",
    "decode_menu",
    "decode_see_also",
    "decode_entry",
    "skip_entry",
]
