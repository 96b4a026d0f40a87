"""Shared test fixtures."""

import io

import pytest

from xtea_cipher import XTEA
from xtea_cipher.utils.crypto import CryptoRandom

SAMPLE_KEY = (0x1380C5B5, 0x28037DF9, 0x26E314A2, 0xC57684E4)


@pytest.fixture
def rng():
    """Provide a seeded CryptoRandom for deterministic tests."""
    return CryptoRandom(seed=42)


@pytest.fixture
def xtea():
    """Provide a cipher with the sample key and default rounds."""
    return XTEA(SAMPLE_KEY)


class TrickleReader:
    """Readable that hands out at most ``step`` bytes per read."""

    def __init__(self, data: bytes, step: int = 1):
        self._buf = io.BytesIO(data)
        self._step = step

    def read(self, size: int) -> bytes:
        return self._buf.read(min(size, self._step))


class TrickleWriter:
    """Writable that accepts at most ``step`` bytes per write."""

    def __init__(self, step: int = 3):
        self.data = bytearray()
        self._step = step

    def write(self, data) -> int:
        chunk = bytes(data[:self._step])
        self.data += chunk
        return len(chunk)


class FailingReader:
    """Readable that raises after ``limit`` bytes."""

    def __init__(self, data: bytes, limit: int):
        self._buf = io.BytesIO(data)
        self._remaining = limit

    def read(self, size: int) -> bytes:
        if self._remaining <= 0:
            raise OSError("device unplugged")
        chunk = self._buf.read(min(size, self._remaining))
        self._remaining -= len(chunk)
        return chunk


class FailingWriter:
    """Writable that raises once ``limit`` bytes have been written."""

    def __init__(self, limit: int):
        self.data = bytearray()
        self._limit = limit

    def write(self, data) -> int:
        if len(self.data) + len(data) > self._limit:
            raise OSError("disk full")
        self.data += data
        return len(data)
