"""Exceptions raised while streaming data through the cipher.

Caller misuse (odd round counts, misaligned buffers) raises the built-in
``ValueError``/``TypeError``; only I/O failures get their own types.
"""

from __future__ import annotations

from enum import Enum


class IOFailureKind(Enum):
    UNEXPECTED_EOF = "unexpected end of input"
    SOURCE = "source error"
    SINK = "sink error"


class CipherIOError(OSError):
    """An I/O failure that interrupted a cipher stream.

    The underlying exception, if any, is available as ``__cause__``.
    """

    def __init__(self, message: str, kind: IOFailureKind):
        super().__init__(message)
        self.kind = kind


class TruncatedInputError(CipherIOError):
    """The source ended between the two words of a block."""

    def __init__(self, message: str):
        super().__init__(message, IOFailureKind.UNEXPECTED_EOF)
