"""Main Norton Guide reader class."""

import logging
import os
from pydantic import BaseModel, Field, model_serializer
from typing import Any, Dict, Iterator, List, Optional
from .cursor import ByteCursor
from .exceptions import GuideReadError, MalformedStructureError, NGError, NotAGuideError
from .records import EntryType, Entry, Menu, decode_entry, decode_menu, skip_entry

logger = logging.getLogger(__name__)

TITLE_LEN = 40
CREDIT_LEN = 66
CREDIT_LINES = 5

# Known magic values and the tools that wrote them.
MAGIC: Dict[str, str] = {
    "EH": "Expert Help",
    "NG": "Norton Guide",
}


class GuideHeader(BaseModel):
    """
    A guide starts with a header, the only structure at a fixed place. None of
    it is encrypted.

    char Magic[2]                "NG" or "EH"
    char Unknown[4]
    unsigned short MenuCount
    char Title[40]
    char Credits[5][66]
    """

    magic: str = Field(..., description="Two character code identifying the compiler used")
    menu_count: int = 0
    title: str = ""
    credits: List[str] = []


class Guide(BaseModel):
    """
    The main class for reading a Norton Guide or Expert Help file.

    The whole file is loaded into memory by ``open()``; the header and the
    menus are decoded there and then. Entries are only decoded when asked
    for, by offset, as a guide can hold thousands of them.

    Everything is read through a single cursor, so one Guide shouldn't be
    shared between readers without some locking around it.
    """

    filepath: str
    data: bytes = Field(default=b"", repr=False)
    header: Optional[GuideHeader] = None
    menus: List[Menu] = []
    first_entry: int = Field(default=0, description="Offset of the first entry after the menus")
    cursor: Any = Field(default=None, repr=False)

    def __init__(self, filepath: str, **data):
        super().__init__(filepath=str(filepath), **data)
        self.menus = []

    @model_serializer
    def serialize_model(self):
        """Custom serializer to leave out the raw file data and the cursor"""
        return {
            "filepath": self.filepath,
            "type": self.type,
            "type_description": self.type_description,
            "size": self.size,
            "header": self.header.model_dump() if self.header else None,
            "menus": [menu.model_dump() for menu in self.menus],
            "first_entry": self.first_entry,
        }

    def open(self, strict: bool = True) -> "Guide":
        """
        Loads the guide and decodes its header and menus.

        If ``strict`` is false a file that doesn't look like a guide is
        still opened, and ``is_guide`` reports False.
        """
        with open(self.filepath, "rb") as f:
            expected = os.fstat(f.fileno()).st_size
            self.data = f.read()

        if len(self.data) != expected:
            raise GuideReadError(f"Read {len(self.data)} of {expected} bytes from {self.filepath}")
        logger.debug("Loaded %d bytes from %s", len(self.data), self.filepath)

        self.cursor = ByteCursor(self.data)
        self.menus = []
        self.header = self._parse_header()

        if self.is_guide:
            if self.has_menus:
                self._parse_menus()
        elif strict:
            raise NotAGuideError(f"{self.filepath} is not a Norton Guide or Expert Help file")
        else:
            logger.debug("%s has unknown magic %r; opened anyway", self.filepath, self.header.magic)

        self.first_entry = self.cursor.position
        return self

    def _parse_header(self) -> GuideHeader:
        """
        Parses the guide header.

        The magic is really a word, but the valid values read as the strings
        NG and EH, so it's read as a string. Nothing past it is read unless
        it's recognised.
        """
        cursor = self.cursor
        magic = cursor.read_fixed_string(2, decrypt=False)
        if magic not in MAGIC:
            return GuideHeader(magic=magic)

        cursor.skip(4)
        menu_count = cursor.read_word(decrypt=False)
        title = cursor.read_fixed_string(TITLE_LEN, decrypt=False)
        credits = [cursor.read_fixed_string(CREDIT_LEN, decrypt=False) for _ in range(CREDIT_LINES)]

        logger.debug("%s guide %r with %d menus", MAGIC[magic], title, menu_count)
        return GuideHeader(magic=magic, menu_count=menu_count, title=title, credits=credits)

    def _parse_menus(self):
        """
        Scans forward from the header collecting menus.

        Menus are mixed in with the first entries of a guide, so entries are
        skipped over until all the menus the header promised have been found.
        Anything that isn't an entry or a menu ends the scan, as does running
        out of guide.
        """
        cursor = self.cursor
        while len(self.menus) < self.menu_count and cursor.remaining >= 2:
            tag = cursor.read_word()
            if tag in (EntryType.SHORT, EntryType.LONG):
                skip_entry(cursor)
            elif tag == EntryType.MENU:
                menu = decode_menu(cursor)
                logger.debug("Found menu %r with %d prompts", menu.title, menu.prompt_count)
                self.menus.append(menu)
            else:
                logger.warning(
                    "Unknown record type %d at offset %d; found %d of %d menus",
                    tag,
                    cursor.position - 2,
                    len(self.menus),
                    self.menu_count,
                )
                break

    @property
    def _reader(self) -> ByteCursor:
        if self.cursor is None:
            raise NGError(f"{self.filepath} has not been opened")
        return self.cursor

    @property
    def is_guide(self) -> bool:
        return self.header is not None and self.header.magic in MAGIC

    @property
    def type(self) -> str:
        return self.header.magic if self.is_guide else "??"

    @property
    def type_description(self) -> str:
        return MAGIC[self.header.magic] if self.is_guide else "Unknown"

    @property
    def title(self) -> str:
        return self.header.title if self.header else ""

    @property
    def credits(self) -> List[str]:
        return self.header.credits if self.header else []

    @property
    def menu_count(self) -> int:
        return self.header.menu_count if self.header else 0

    @property
    def has_menus(self) -> bool:
        return self.menu_count > 0

    @property
    def filename(self) -> str:
        return self.filepath

    @property
    def size(self) -> int:
        return len(self.data)

    @property
    def position(self) -> int:
        return self._reader.position

    def go_first(self) -> "Guide":
        self._reader.seek(self.first_entry)
        return self

    def goto_entry(self, offset: int) -> "Guide":
        if offset < 0:
            raise MalformedStructureError(f"Entry offset {offset} is before the start of the guide")
        self._reader.seek(offset)
        return self

    def load_entry(self, offset: Optional[int] = None) -> Entry:
        """
        Decodes the entry at ``offset``, or at the current position.

        The position is the same afterwards as it was before; use
        ``next_entry()`` to move on.
        """
        with self._reader.saved_position():
            if offset is not None:
                self.goto_entry(offset)
            return decode_entry(self._reader)

    def next_entry(self) -> "Guide":
        """Skips past the entry at the current position."""
        cursor = self._reader
        cursor.skip(2)
        skip_entry(cursor)
        return self

    def current_entry_type(self) -> Optional[int]:
        """The tag at the current position, or None at the end of the guide."""
        cursor = self._reader
        with cursor.saved_position():
            if cursor.remaining < 2:
                return None
            return cursor.read_word()

    def looking_at_short(self) -> bool:
        return self.current_entry_type() == EntryType.SHORT

    def looking_at_long(self) -> bool:
        return self.current_entry_type() == EntryType.LONG

    def eof(self) -> bool:
        """
        Does it look like we're at the end of the guide?

        Anything other than a short or long entry counts as the end, so that
        junk on the end of a broken guide doesn't get decoded.
        """
        if self._reader.at_end:
            return True
        return not self.looking_at_short() and not self.looking_at_long()

    def is_entry_at(self, offset: int) -> bool:
        """Is there an entry at ``offset``? Used to check short entry links."""
        with self._reader.saved_position():
            self.goto_entry(offset)
            return not self.eof()

    def entries(self) -> Iterator[Entry]:
        """
        Yields each entry in turn, starting from the first.

        Only the offset of the next entry is remembered between steps, and
        the guide's own position is left alone.
        """
        next_offset = self.first_entry
        while True:
            with self._reader.saved_position():
                self.goto_entry(next_offset)
                if self.eof():
                    return
                entry = self.load_entry()
                self.next_entry()
                next_offset = self.position
            yield entry

    def menu_path(self, entry: Entry) -> List[str]:
        """The titles of the menu and prompt that lead to ``entry``, if known."""
        path = []
        if entry.has_parent_menu and entry.parent_menu < len(self.menus):
            menu = self.menus[entry.parent_menu]
            path.append(menu.title)
            if entry.has_parent_prompt and entry.parent_prompt < menu.prompt_count:
                path.append(menu.prompts[entry.parent_prompt])
        return path


def open_guide(filepath: str, strict: bool = True) -> Guide:
    """Opens the guide at ``filepath``."""
    return Guide(filepath).open(strict=strict)
