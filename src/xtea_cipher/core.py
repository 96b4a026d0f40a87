"""XTEA round core: one 64-bit block through the Feistel network.

Both functions are pure and work on plain ints. Every update is masked to
32 bits, so additions and subtractions wrap exactly like ``uint32_t``.
"""

from __future__ import annotations

from collections.abc import Sequence

DELTA = 0x9E3779B9
MASK = 0xFFFFFFFF
DEFAULT_ROUNDS = 32

# Sizes in bytes.
WORD_SIZE = 4
BLOCK_SIZE = 2 * WORD_SIZE


def encipher_block(key: Sequence[int], rounds: int, block: Sequence[int]) -> tuple[int, int]:
    """Encipher a 64-bit block.

    Args:
        key: Four 32-bit key words.
        rounds: Number of full Feistel rounds (one per loop iteration).
        block: The two 32-bit halves ``(v0, v1)`` of the plaintext.

    Returns:
        Tuple of two 32-bit ciphertext halves.
    """
    v0, v1 = block[0] & MASK, block[1] & MASK
    sum_val = 0
    for _ in range(rounds):
        v0 = (v0 + ((((v1 << 4) ^ (v1 >> 5)) + v1) ^ (sum_val + key[sum_val & 3]))) & MASK
        sum_val = (sum_val + DELTA) & MASK
        v1 = (v1 + ((((v0 << 4) ^ (v0 >> 5)) + v0) ^ (sum_val + key[(sum_val >> 11) & 3]))) & MASK
    return v0, v1


def decipher_block(key: Sequence[int], rounds: int, block: Sequence[int]) -> tuple[int, int]:
    """Decipher a 64-bit block.

    Inverse of :func:`encipher_block` for the same key and round count.
    """
    v0, v1 = block[0] & MASK, block[1] & MASK
    sum_val = (DELTA * rounds) & MASK
    for _ in range(rounds):
        v1 = (v1 - ((((v0 << 4) ^ (v0 >> 5)) + v0) ^ (sum_val + key[(sum_val >> 11) & 3]))) & MASK
        sum_val = (sum_val - DELTA) & MASK
        v0 = (v0 - ((((v1 << 4) ^ (v1 >> 5)) + v1) ^ (sum_val + key[sum_val & 3]))) & MASK
    return v0, v1
