"""The XTEA cipher instance.

See <https://en.wikipedia.org/wiki/XTEA> for the algorithm. An :class:`XTEA`
holds only the key and the round count, never any per-call state, so one
instance can be shared freely between threads.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, BinaryIO

from xtea_cipher import buffer, stream
from xtea_cipher.byteorder import ByteOrder
from xtea_cipher.core import DEFAULT_ROUNDS, MASK, decipher_block, encipher_block
from xtea_cipher.utils.crypto import CryptoRandom

if TYPE_CHECKING:
    from collections.abc import Buffer


def generate_key(rng: CryptoRandom | None = None) -> tuple[int, int, int, int]:
    """Return a fresh random 128-bit key as four 32-bit words."""
    return (rng or CryptoRandom()).get_key()


@dataclass(frozen=True)
class XTEA:
    """XTEA key and round count.

    ``rounds`` counts full Feistel rounds (one loop iteration each) and must
    be even. The published cipher uses 32; only change it if you know why.
    """

    key: tuple[int, int, int, int] = field(repr=False)
    rounds: int = DEFAULT_ROUNDS

    def __post_init__(self):
        key = tuple(self.key)
        if len(key) != 4:
            raise ValueError(f"XTEA key must be 4 words, got {len(key)}")
        for word in key:
            if isinstance(word, bool) or not isinstance(word, int) or not 0 <= word <= MASK:
                raise ValueError(f"XTEA key word out of 32-bit range: {word!r}")
        rounds = self.rounds
        if isinstance(rounds, bool) or not isinstance(rounds, int) or not 0 <= rounds <= MASK:
            raise ValueError(f"rounds must be an unsigned 32-bit int, got {rounds!r}")
        if rounds & 1:
            raise ValueError(f"rounds must be divisible by 2, got {rounds}")
        object.__setattr__(self, "key", key)

    @classmethod
    def from_bytes(
        cls,
        key: bytes,
        order: ByteOrder | str = ByteOrder.BIG,
        rounds: int = DEFAULT_ROUNDS,
    ) -> XTEA:
        """Build a cipher from 16 raw key bytes."""
        return cls(ByteOrder.coerce(order).decode_key(bytes(key)), rounds)

    # -- single blocks -----------------------------------------------------

    def encipher(self, block: Sequence[int]) -> tuple[int, int]:
        """Encipher one ``(v0, v1)`` block.

        Prefer the buffer or stream methods for real data.
        """
        return encipher_block(self.key, self.rounds, block)

    def decipher(self, block: Sequence[int]) -> tuple[int, int]:
        """Decipher one ``(v0, v1)`` block."""
        return decipher_block(self.key, self.rounds, block)

    # -- buffers -----------------------------------------------------------

    def encipher_buffer(self, input: Buffer, output: Buffer, order: ByteOrder | str = ByteOrder.BIG) -> None:
        """Encipher ``input`` into the writable ``output`` buffer.

        Raises:
            ValueError: The lengths differ or are not a multiple of 8.
        """
        buffer.encipher_buffer(self, input, output, order)

    def decipher_buffer(self, input: Buffer, output: Buffer, order: ByteOrder | str = ByteOrder.BIG) -> None:
        buffer.decipher_buffer(self, input, output, order)

    def encipher_bytes(self, data: Buffer, order: ByteOrder | str = ByteOrder.BIG) -> bytes:
        return buffer.encipher_bytes(self, data, order)

    def decipher_bytes(self, data: Buffer, order: ByteOrder | str = ByteOrder.BIG) -> bytes:
        return buffer.decipher_bytes(self, data, order)

    # -- streams -----------------------------------------------------------

    def encipher_stream(self, source: BinaryIO, sink: BinaryIO, order: ByteOrder | str = ByteOrder.BIG) -> None:
        """Encipher ``source`` into ``sink``.

        The source length must be a multiple of 8 bytes. On error the sink
        keeps every block written before the failure.
        """
        stream.encipher_stream(self, source, sink, order)

    def decipher_stream(self, source: BinaryIO, sink: BinaryIO, order: ByteOrder | str = ByteOrder.BIG) -> None:
        stream.decipher_stream(self, source, sink, order)
