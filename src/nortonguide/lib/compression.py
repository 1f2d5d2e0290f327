"""Run-length decompression for Norton Guide text."""

import logging

logger = logging.getLogger(__name__)

# Character that says we're about to RLE something.
RLE_MARKER = "\xff"


def rle_expand(text: str) -> str:
    """
    Expands the runs of spaces in a decoded guide string.

    A marker (0xFF) followed by a count byte stands for that many spaces.
    A marker in the last position has no count byte and is kept as-is.

    A count that is itself a marker is odd: it turns up in some guides and
    looks right on screen when rendered as a single space, so that is what
    it becomes.
    """
    if RLE_MARKER not in text:
        return text

    output = []
    length = len(text)
    i = 0

    while i < length:
        char = text[i]
        if char == RLE_MARKER and i < length - 1:
            count = text[i + 1]
            if count == RLE_MARKER:
                logger.warning("Doubled RLE marker at position %d; treating it as a single space", i)
                output.append(" ")
            else:
                output.append(" " * ord(count))
            i += 2
        else:
            output.append(char)
            i += 1

    return "".join(output)


def rle_clean(text: str) -> str:
    """Replaces RLE markers with single spaces, without expanding the runs."""
    return text.replace(RLE_MARKER, " ")
