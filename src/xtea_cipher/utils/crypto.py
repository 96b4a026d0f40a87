"""Random source for key material and test blocks."""

import random
import secrets


class CryptoRandom:
    """Random number generator for keys and blocks.

    Uses `secrets` for production (cryptographically secure),
    `random.Random(seed)` for deterministic testing.
    """

    def __init__(self, seed: int | None = None):
        self._seeded = seed is not None
        if self._seeded:
            self._rng = random.Random(seed)
        else:
            self._rng = None

    def get_uint32(self) -> int:
        if self._seeded:
            return self._rng.getrandbits(32)
        return secrets.randbits(32)

    def get_key(self) -> tuple[int, int, int, int]:
        """Return four random 32-bit key words."""
        return (self.get_uint32(), self.get_uint32(), self.get_uint32(), self.get_uint32())

    def get_block(self) -> tuple[int, int]:
        return self.get_uint32(), self.get_uint32()

    def get_bytes(self, size: int) -> bytes:
        if self._seeded:
            return self._rng.randbytes(size)
        return secrets.token_bytes(size)
