"""Pure-Python XTEA block cipher with buffer and stream adapters."""

from __future__ import annotations

from xtea_cipher.buffer import (
    cipher_buffer,
    decipher_buffer,
    decipher_bytes,
    encipher_buffer,
    encipher_bytes,
)
from xtea_cipher.byteorder import BE, LE, ByteOrder
from xtea_cipher.cipher import XTEA, generate_key
from xtea_cipher.core import DEFAULT_ROUNDS, DELTA, decipher_block, encipher_block
from xtea_cipher.errors import CipherIOError, IOFailureKind, TruncatedInputError
from xtea_cipher.stream import Direction, cipher_stream, decipher_stream, encipher_stream
from xtea_cipher.utils.crypto import CryptoRandom

__all__ = [
    "BE",
    "LE",
    "ByteOrder",
    "CipherIOError",
    "CryptoRandom",
    "DEFAULT_ROUNDS",
    "DELTA",
    "Direction",
    "IOFailureKind",
    "TruncatedInputError",
    "XTEA",
    "cipher_buffer",
    "cipher_stream",
    "decipher_block",
    "decipher_buffer",
    "decipher_bytes",
    "decipher_stream",
    "encipher_block",
    "encipher_buffer",
    "encipher_bytes",
    "encipher_stream",
    "generate_key",
]
