"""Apply the cipher to binary streams, one 64-bit block at a time.

Blocks are read as two consecutive 32-bit words. Failing to read the first
word of a block, for any reason, ends the stream cleanly; running out
between the two words is a truncated stream and raises
:class:`~xtea_cipher.errors.TruncatedInputError`. Blocks are transformed
independently, with no chaining.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import TYPE_CHECKING, BinaryIO

from xtea_cipher.byteorder import ByteOrder
from xtea_cipher.core import BLOCK_SIZE, WORD_SIZE
from xtea_cipher.errors import CipherIOError, IOFailureKind, TruncatedInputError

if TYPE_CHECKING:
    from xtea_cipher.cipher import XTEA

logger = logging.getLogger(__name__)


class Direction(Enum):
    ENCIPHER = "encipher"
    DECIPHER = "decipher"


def _read_exact(source: BinaryIO, size: int, direction: Direction, index: int) -> bytes:
    """Read up to ``size`` bytes, retrying short reads until end of input."""
    data = b""
    while len(data) < size:
        try:
            chunk = source.read(size - len(data))
        except OSError as exc:
            raise CipherIOError(
                f"Failed to read block {index} while trying to {direction.value}: {exc}",
                IOFailureKind.SOURCE,
            ) from exc
        if not chunk:
            break
        data += chunk
    return data


def _write_all(sink: BinaryIO, data: bytes, direction: Direction, index: int) -> None:
    """Write all of ``data``, retrying short writes."""
    offset = 0
    while offset < len(data):
        try:
            written = sink.write(data[offset:])
        except OSError as exc:
            raise CipherIOError(
                f"Failed to write block {index} while trying to {direction.value}: {exc}",
                IOFailureKind.SINK,
            ) from exc
        # None is a non-blocking raw writer that took nothing.
        if written is None or written <= 0:
            raise CipherIOError(
                f"Sink accepted no bytes for block {index} while trying to {direction.value}",
                IOFailureKind.SINK,
            )
        offset += written


def cipher_stream(
    cipher: XTEA,
    source: BinaryIO,
    sink: BinaryIO,
    order: ByteOrder | str,
    direction: Direction | str,
) -> None:
    """Encipher or decipher ``source`` into ``sink`` block by block.

    Args:
        cipher: The XTEA instance holding key and round count.
        source: Binary readable object exposing ``read(n)``.
        sink: Binary writable object exposing ``write(b)``.
        order: Byte order of each 32-bit word, in and out.
        direction: Whether to encipher or decipher, as a Direction or
            its value (``"encipher"``, ``"decipher"``).

    A failed read of the first word of a block, whether end of input or a
    source error, ends the stream without raising.

    Raises:
        ValueError: ``direction`` or ``order`` is not recognised.
        TruncatedInputError: The source ended in the middle of a block.
            Every block before it has already been written to the sink.
        CipherIOError: Reading the second word of a block or writing the
            sink failed.

    The source and sink are neither flushed nor closed.
    """
    order = ByteOrder.coerce(order)
    direction = Direction(direction)
    transform = cipher.encipher if direction is Direction.ENCIPHER else cipher.decipher

    index = 0
    while True:
        # Any failure on the first word of a block ends the stream.
        try:
            first = _read_exact(source, WORD_SIZE, direction, index)
        except CipherIOError as exc:
            logger.warning(f"Stopping at block {index}: {exc.__cause__}")
            break
        if len(first) < WORD_SIZE:
            if first:
                logger.warning(
                    f"Discarding {len(first)} trailing byte(s) after block {index}: "
                    f"shorter than one word"
                )
            break
        second = _read_exact(source, WORD_SIZE, direction, index)
        if len(second) < WORD_SIZE:
            raise TruncatedInputError(
                f"Input ended inside block {index} while trying to {direction.value}: "
                f"got {WORD_SIZE + len(second)} of {BLOCK_SIZE} bytes"
            )

        v0, v1 = transform((order.decode_word(first), order.decode_word(second)))
        _write_all(sink, order.encode_word(v0) + order.encode_word(v1), direction, index)
        index += 1

    logger.debug(f"{direction.value}: {index} block(s) processed, {order.name.lower()}-endian words")


def encipher_stream(cipher: XTEA, source: BinaryIO, sink: BinaryIO, order: ByteOrder | str = ByteOrder.BIG) -> None:
    cipher_stream(cipher, source, sink, order, Direction.ENCIPHER)


def decipher_stream(cipher: XTEA, source: BinaryIO, sink: BinaryIO, order: ByteOrder | str = ByteOrder.BIG) -> None:
    cipher_stream(cipher, source, sink, order, Direction.DECIPHER)
