"""Apply the cipher to in-memory buffers.

A thin specialisation of :mod:`xtea_cipher.stream`: the input and output
buffers are wrapped in cursors and handed to the stream adapter, so both
layers share one block loop.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from xtea_cipher.byteorder import ByteOrder
from xtea_cipher.core import BLOCK_SIZE
from xtea_cipher.stream import Direction, cipher_stream

if TYPE_CHECKING:
    from collections.abc import Buffer

    from xtea_cipher.cipher import XTEA


class _BufferReader:
    """Read cursor over a byte view."""

    def __init__(self, view: memoryview):
        self._view = view
        self._pos = 0

    def read(self, size: int) -> bytes:
        data = self._view[self._pos:self._pos + size].tobytes()
        self._pos += len(data)
        return data


class _BufferWriter:
    """Write cursor over a writable byte view."""

    def __init__(self, view: memoryview):
        self._view = view
        self._pos = 0

    def write(self, data: bytes) -> int:
        end = self._pos + len(data)
        self._view[self._pos:end] = data
        self._pos = end
        return len(data)


def cipher_buffer(
    cipher: XTEA,
    input: Buffer,
    output: Buffer,
    order: ByteOrder | str,
    direction: Direction | str,
) -> None:
    """Encipher or decipher ``input`` into ``output``.

    Both buffers must have the same size in bytes, a multiple of the 8-byte
    block size. ``output`` must be writable and may be ``input`` itself.
    Nothing is written if a precondition fails.
    """
    direction = Direction(direction)
    in_view = memoryview(input).cast("B")
    out_view = memoryview(output).cast("B")
    if out_view.readonly:
        raise TypeError("Output buffer is read-only")
    if in_view.nbytes != out_view.nbytes:
        raise ValueError(
            f"Input and output buffers must be the same length: {in_view.nbytes} != {out_view.nbytes}"
        )
    if in_view.nbytes % BLOCK_SIZE:
        raise ValueError(
            f"Buffer length must be a multiple of {BLOCK_SIZE} bytes, got {in_view.nbytes}"
        )

    cipher_stream(cipher, _BufferReader(in_view), _BufferWriter(out_view), order, direction)


def encipher_buffer(cipher: XTEA, input: Buffer, output: Buffer, order: ByteOrder | str = ByteOrder.BIG) -> None:
    cipher_buffer(cipher, input, output, order, Direction.ENCIPHER)


def decipher_buffer(cipher: XTEA, input: Buffer, output: Buffer, order: ByteOrder | str = ByteOrder.BIG) -> None:
    cipher_buffer(cipher, input, output, order, Direction.DECIPHER)


def encipher_bytes(cipher: XTEA, data: Buffer, order: ByteOrder | str = ByteOrder.BIG) -> bytes:
    """Encipher ``data`` into a new bytes object of the same length."""
    output = bytearray(memoryview(data).nbytes)
    cipher_buffer(cipher, data, output, order, Direction.ENCIPHER)
    return bytes(output)


def decipher_bytes(cipher: XTEA, data: Buffer, order: ByteOrder | str = ByteOrder.BIG) -> bytes:
    """Decipher ``data`` into a new bytes object of the same length."""
    output = bytearray(memoryview(data).nbytes)
    cipher_buffer(cipher, data, output, order, Direction.DECIPHER)
    return bytes(output)
