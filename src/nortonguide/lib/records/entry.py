"""Decoder for the short and long entries that make up a guide's content."""

from pydantic import Field
from typing import List, Literal, Optional, Union
from ..compression import rle_expand
from ..cursor import ByteCursor
from ..exceptions import MalformedStructureError
from .base import Record, EntryType, MAX_LINE_LEN, normalise_index, normalise_offset
from .see_also import SeeAlso, decode_see_also

# Bytes of fixed entry header that follow the size field.
ENTRY_HEADER_TAIL = 22


class EntryBase(Record):
    """
    Fields common to short and long entries.

    From the guide body:
    unsigned short Type          0 = short, 1 = long
    unsigned short Size          byte size of the entry after its header
    unsigned short LineCount
    unsigned short HasSeeAlso
    unsigned short ParentLine    0xFFFF if none
    long Parent                  -1 if none
    unsigned short ParentMenu    0xFFFF if none
    unsigned short ParentPrompt  0xFFFF if none
    long Previous                -1 if none
    long Next                    -1 if none
    """

    type: EntryType
    size: int = Field(..., description="Byte size of the entry after its fixed header")
    line_count: int
    has_see_also: bool
    parent_line: int = Field(..., description="Line in the parent entry, or -1")
    parent: int = Field(..., description="Offset of the parent entry, or 0")
    parent_menu: int = Field(..., description="Index of the parent menu, or -1")
    parent_prompt: int = Field(..., description="Index of the prompt in the parent menu, or -1")
    previous: int = Field(..., description="Offset of the previous entry, or 0")
    next: int = Field(..., description="Offset of the next entry, or 0")
    lines: List[str] = []

    @property
    def is_short(self) -> bool:
        return self.type == EntryType.SHORT

    @property
    def is_long(self) -> bool:
        return self.type == EntryType.LONG

    @property
    def has_parent(self) -> bool:
        return self.parent != 0

    @property
    def has_previous(self) -> bool:
        return self.previous != 0

    @property
    def has_next(self) -> bool:
        return self.next != 0

    @property
    def has_parent_menu(self) -> bool:
        return self.parent_menu != -1

    @property
    def has_parent_prompt(self) -> bool:
        return self.parent_prompt != -1


class ShortEntry(EntryBase):
    """
    A menu-like entry where each line can jump to another entry.

    After the common header:
    struct
    {
        unsigned short Unknown
        long Offset              entry the line jumps to
    }
    LINEOFFSET[LineCount]
    STRINGZ Lines[LineCount]     at most 1024 bytes each
    """

    type: Literal[EntryType.SHORT] = EntryType.SHORT
    line_offsets: List[int] = []


class LongEntry(EntryBase):
    """
    A prose entry, optionally followed by a see-also block.

    After the common header:
    STRINGZ Lines[LineCount]     at most 1024 bytes each
    SEEALSO SeeAlso              only if HasSeeAlso
    """

    type: Literal[EntryType.LONG] = EntryType.LONG
    see_also: Optional[SeeAlso] = None


Entry = Union[ShortEntry, LongEntry]


def _read_lines(cursor: ByteCursor, line_count: int) -> List[str]:
    return [rle_expand(cursor.read_nul_terminated_string(MAX_LINE_LEN)) for _ in range(line_count)]


def decode_entry(cursor: ByteCursor) -> Entry:
    """
    Decodes the entry that starts at the current position, tag included.
    """
    offset = cursor.position
    entry_type = cursor.read_word()
    header = {
        "offset": offset,
        "size": cursor.read_word(),
        "line_count": cursor.read_word(),
        "has_see_also": cursor.read_word() > 0,
        "parent_line": normalise_index(cursor.read_word()),
        "parent": normalise_offset(cursor.read_long()),
        "parent_menu": normalise_index(cursor.read_word()),
        "parent_prompt": normalise_index(cursor.read_word()),
        "previous": normalise_offset(cursor.read_long()),
        "next": normalise_offset(cursor.read_long()),
    }
    line_count = header["line_count"]

    if entry_type == EntryType.SHORT:
        line_offsets = []
        for _ in range(line_count):
            cursor.skip(2)
            line_offsets.append(cursor.read_long())
        return ShortEntry(**header, line_offsets=line_offsets, lines=_read_lines(cursor, line_count))

    if entry_type == EntryType.LONG:
        lines = _read_lines(cursor, line_count)
        see_also = decode_see_also(cursor) if header["has_see_also"] else None
        return LongEntry(**header, lines=lines, see_also=see_also)

    raise MalformedStructureError(f"Unknown entry type {entry_type} at offset {offset}")


def skip_entry(cursor: ByteCursor) -> None:
    """
    Skips an entry without decoding it, with the cursor sat just after the
    entry's tag.
    """
    size = cursor.read_word()
    cursor.skip(ENTRY_HEADER_TAIL + size)
