"""Decoder for the menu records at the start of a guide."""

from pydantic import BaseModel, Field
from typing import List
from ..compression import rle_expand
from ..cursor import ByteCursor
from ..exceptions import MalformedStructureError
from .base import Record, MAX_PROMPT_LEN


class MenuOption(BaseModel):
    """A single prompt on a menu and the entry it leads to."""

    prompt: str
    offset: int = Field(..., description="Offset of the entry the prompt jumps to")


class Menu(Record):
    """
    A named group of prompts, each linking to an entry.

    On disk, after the 2-byte MENU tag:
    unsigned short Size             byte size of the menu section (unused)
    unsigned short PromptCount      number of prompts, plus one
    char Unknown[20]
    long Offsets[PromptCount - 1]   entry offset for each prompt
    char Unknown[PromptCount * 8]
    STRINGZ Title                   at most 128 bytes
    STRINGZ Prompts[PromptCount - 1]
    char Unknown
    """

    title: str
    options: List[MenuOption] = []

    @property
    def prompt_count(self) -> int:
        return len(self.options)

    @property
    def prompts(self) -> List[str]:
        return [option.prompt for option in self.options]

    @property
    def offsets(self) -> List[int]:
        return [option.offset for option in self.options]


def decode_menu(cursor: ByteCursor) -> Menu:
    """
    Decodes a menu, with the cursor sat just after the menu's tag.

    Leaves the cursor on the tag of whatever follows the menu.
    """
    # The tag has already been consumed.
    offset = cursor.position - 2

    cursor.read_word()  # section size
    prompt_count = cursor.read_word() - 1
    if prompt_count < 0:
        raise MalformedStructureError(f"Menu at offset {offset} has a prompt count of {prompt_count}")

    cursor.skip(20)
    offsets = [cursor.read_long() for _ in range(prompt_count)]
    cursor.skip((prompt_count + 1) * 8)

    title = rle_expand(cursor.read_nul_terminated_string(MAX_PROMPT_LEN))
    prompts = [rle_expand(cursor.read_nul_terminated_string(MAX_PROMPT_LEN)) for _ in range(prompt_count)]

    cursor.skip()

    return Menu(
        offset=offset,
        title=title,
        options=[MenuOption(prompt=prompt, offset=link) for prompt, link in zip(prompts, offsets)],
    )
