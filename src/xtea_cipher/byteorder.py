"""Byte order used to map 4 raw bytes to and from a 32-bit cipher word.

The order is a parameter of the buffer and stream adapters, not of the
cipher itself, so one key can be used under either convention.
"""

from __future__ import annotations

import struct
from enum import Enum

from xtea_cipher.core import MASK, WORD_SIZE

KEY_SIZE = 4 * WORD_SIZE

_WORD_STRUCTS = {
    ">": struct.Struct(">I"),
    "<": struct.Struct("<I"),
}

_KEY_STRUCTS = {
    ">": struct.Struct(">4I"),
    "<": struct.Struct("<4I"),
}

# Names accepted by ByteOrder.coerce, lower-cased.
_ALIASES = {
    "big": ">",
    "be": ">",
    ">": ">",
    "little": "<",
    "le": "<",
    "<": "<",
}


class ByteOrder(Enum):
    """Word byte order, valued by its ``struct`` format prefix."""
    BIG = ">"
    LITTLE = "<"

    @classmethod
    def coerce(cls, value: ByteOrder | str) -> ByteOrder:
        """Accept a ByteOrder or a name such as ``"big"``, ``"le"``."""
        if isinstance(value, ByteOrder):
            return value
        if isinstance(value, str):
            prefix = _ALIASES.get(value.lower())
            if prefix is not None:
                return cls(prefix)
        raise ValueError(f"Unknown byte order: {value!r}")

    def decode_word(self, data: bytes) -> int:
        if len(data) != WORD_SIZE:
            raise ValueError(f"A word is {WORD_SIZE} bytes, got {len(data)}")
        return _WORD_STRUCTS[self.value].unpack(data)[0]

    def encode_word(self, word: int) -> bytes:
        if not 0 <= word <= MASK:
            raise ValueError(f"Word out of 32-bit range: {word:#x}")
        return _WORD_STRUCTS[self.value].pack(word)

    def decode_key(self, data: bytes) -> tuple[int, int, int, int]:
        """Split 16 raw key bytes into four 32-bit words."""
        if len(data) != KEY_SIZE:
            raise ValueError(f"An XTEA key is {KEY_SIZE} bytes, got {len(data)}")
        return _KEY_STRUCTS[self.value].unpack(data)


BE = ByteOrder.BIG
LE = ByteOrder.LITTLE
