"""Decoder for the see-also block that can follow a long entry."""

import logging
from pydantic import BaseModel, Field
from typing import List
from ..compression import rle_expand
from ..cursor import ByteCursor
from .base import Record, MAX_PROMPT_LEN

logger = logging.getLogger(__name__)

# The limit published in the Expert Help Compiler manual. Nothing here needs
# it, but it stops a corrupt count from reading half the file as prompts.
MAX_SEE_ALSO = 20


class SeeAlsoOption(BaseModel):
    """A single see-also prompt and the entry it leads to."""

    prompt: str
    offset: int = Field(..., description="Offset of the entry the prompt jumps to")


class SeeAlso(Record):
    """
    A bounded list of related-entry links attached to a long entry.

    unsigned short Count        number of see-also items (at most 20 honoured)
    long Offsets[Count]
    STRINGZ Prompts[Count]      at most 128 bytes each
    """

    options: List[SeeAlsoOption] = []

    @property
    def prompts(self) -> List[str]:
        return [option.prompt for option in self.options]

    @property
    def offsets(self) -> List[int]:
        return [option.offset for option in self.options]


def decode_see_also(cursor: ByteCursor) -> SeeAlso:
    """Decodes a see-also block at the current position."""
    offset = cursor.position
    stored_count = cursor.read_word()
    count = min(stored_count, MAX_SEE_ALSO)
    if count != stored_count:
        logger.warning("See-also at offset %d claims %d items; only reading %d", offset, stored_count, count)

    offsets = [cursor.read_long() for _ in range(count)]
    prompts = [rle_expand(cursor.read_nul_terminated_string(MAX_PROMPT_LEN)) for _ in range(count)]

    return SeeAlso(
        offset=offset,
        options=[SeeAlsoOption(prompt=prompt, offset=link) for prompt, link in zip(prompts, offsets)],
    )
