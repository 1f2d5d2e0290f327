"""Position-tracking reader over the bytes of a guide."""

from contextlib import contextmanager
from typing import Iterator
from .exceptions import MalformedStructureError
import struct

# Everything after the guide header is XORed with this.
DECRYPT_KEY = 0x1A

# Guide text is a DOS code page; keep bytes 1:1 as characters.
ENCODING = "latin-1"


def decrypt_byte(byte: int) -> int:
    """Decrypt (or, equally, encrypt) a single byte of guide data."""
    return byte ^ DECRYPT_KEY


_DECRYPT_TABLE = bytes(decrypt_byte(byte) for byte in range(256))


def decrypt_bytes(data: bytes) -> bytes:
    """Decrypt a run of guide data, byte by byte."""
    return data.translate(_DECRYPT_TABLE)


class ByteCursor:
    """
    Wraps the bytes of a guide so that we can track where we are in them,
    move around them, read from them and decrypt what we read.

    The buffer is borrowed, never copied or modified; the only state the
    cursor owns is its offset. Every read advances the offset by exactly
    the width of the value read.
    """

    __slots__ = ("_data", "_offset")

    def __init__(self, data: bytes, offset: int = 0):
        self._data = data
        self._offset = offset

    @property
    def position(self) -> int:
        return self._offset

    @property
    def size(self) -> int:
        return len(self._data)

    @property
    def remaining(self) -> int:
        return max(len(self._data) - self._offset, 0)

    @property
    def at_end(self) -> bool:
        """At or past the end of the buffer?"""
        return self._offset >= len(self._data)

    def seek(self, offset: int) -> "ByteCursor":
        if offset < 0:
            raise ValueError(f"Can't seek to negative offset {offset}")
        self._offset = offset
        return self

    def skip(self, count: int = 1) -> "ByteCursor":
        self._offset += count
        return self

    @contextmanager
    def saved_position(self) -> Iterator["ByteCursor"]:
        """
        Perform some work without changing position.

        The offset on entry is put back on exit, including when the body
        of the ``with`` raises.
        """
        saved = self._offset
        try:
            yield self
        finally:
            self._offset = saved

    def _take(self, count: int) -> bytes:
        if self._offset + count > len(self._data):
            raise MalformedStructureError(
                f"Read of {count} bytes at offset {self._offset} runs past the end of the guide ({len(self._data)} bytes)"
            )
        chunk = self._data[self._offset : self._offset + count]
        self._offset += count
        return chunk

    def read_byte(self, decrypt: bool = True) -> int:
        byte = self._take(1)[0]
        return decrypt_byte(byte) if decrypt else byte

    def read_word(self, decrypt: bool = True) -> int:
        """Read an unsigned little-endian 16-bit value."""
        raw = self._take(2)
        if decrypt:
            raw = decrypt_bytes(raw)
        return struct.unpack("<H", raw)[0]

    def read_long(self, decrypt: bool = True) -> int:
        """Read an unsigned little-endian 32-bit value."""
        raw = self._take(4)
        if decrypt:
            raw = decrypt_bytes(raw)
        return struct.unpack("<L", raw)[0]

    def read_fixed_string(self, length: int, decrypt: bool = True) -> str:
        """
        Read a string held in a field of a fixed width.

        The whole field is consumed. The string ends at the first NUL in the
        field; anything after it is padding. A field that runs off the end of
        the buffer reads as if the missing bytes were NULs.
        """
        raw = self._data[self._offset : self._offset + length]
        self._offset += length
        if decrypt:
            raw = decrypt_bytes(raw)
        end_of_string = raw.find(b"\x00")
        if end_of_string != -1:
            raw = raw[:end_of_string]
        return raw.decode(ENCODING)

    def read_nul_terminated_string(self, max_length: int, decrypt: bool = True) -> str:
        """
        Read a NUL-terminated string of at most ``max_length`` bytes.

        Guides don't record string lengths, only a maximum width, so the
        cursor ends up just past the terminating NUL of what was read.
        """
        start = self._offset
        text = self.read_fixed_string(max_length, decrypt)
        self._offset = start + len(text) + 1
        return text
