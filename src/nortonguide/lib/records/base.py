"""Base class and shared constants for guide record decoders."""

from enum import IntEnum
from pydantic import BaseModel, Field

# Longest menu title, menu prompt or see-also prompt.
MAX_PROMPT_LEN = 128

# Longest line of entry text.
MAX_LINE_LEN = 1024

# Raw values that mean "there's no link here".
NO_OFFSET = 0xFFFFFFFF
NO_INDEX = 0xFFFF


class EntryType(IntEnum):
    """The tag that starts each record after the guide header."""

    SHORT = 0
    LONG = 1
    MENU = 2


class Record(BaseModel):
    """
    Base class for all records decoded from the body of a guide.
    """

    offset: int = Field(..., description="Byte offset of the record within the guide")


def normalise_offset(value: int) -> int:
    """A 32-bit link of all ones means no link; that's reported as 0."""
    return 0 if value == NO_OFFSET else value


def normalise_index(value: int) -> int:
    """A 16-bit index of all ones means no link; that's reported as -1."""
    return -1 if value == NO_INDEX else value
