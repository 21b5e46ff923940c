"""Compression methods offered in hello messages."""

from __future__ import annotations

import enum
from collections.abc import Sequence

from .errors import BufferTooSmallError, PacketInvalidLengthError


class CompressionMethod(enum.IntEnum):
    NULL = 0


DEFAULT_COMPRESSION_METHODS: tuple[CompressionMethod, ...] = (CompressionMethod.NULL,)


def decode_compression_methods(buf: bytes) -> list[CompressionMethod]:
    """Decode a length-prefixed list, skipping unknown methods."""
    if len(buf) < 1:
        raise PacketInvalidLengthError()
    count = buf[0]
    if len(buf) < count + 1:
        raise BufferTooSmallError()
    known = {m.value for m in CompressionMethod}
    return [CompressionMethod(b) for b in buf[1 : count + 1] if b in known]


def encode_compression_methods(methods: Sequence[CompressionMethod]) -> bytes:
    """Encode methods with a count prefix, in reverse order."""
    return bytes([len(methods)]) + bytes(int(m) for m in reversed(methods))