"""Reassembly of fragmented and out-of-order handshake messages."""

from __future__ import annotations

from dataclasses import dataclass, replace

from .alert import ContentType
from .errors import BufferTooSmallError
from .handshake_header import HANDSHAKE_HEADER_LENGTH, HandshakeHeader

RECORD_LAYER_HEADER_SIZE = 13


@dataclass
class _Fragment:
    header: HandshakeHeader
    data: bytes


class FragmentBuffer:
    """Collects handshake fragments and yields whole messages in sequence."""

    def __init__(self) -> None:
        self._cache: dict[int, list[_Fragment]] = {}
        self._current_sequence = 0

    def push(self, buf: bytes) -> bool:
        """Store a handshake record; return False if ``buf`` is not one."""
        if len(buf) < RECORD_LAYER_HEADER_SIZE:
            raise BufferTooSmallError()
        if buf[0] != ContentType.HANDSHAKE:
            return False

        header = HandshakeHeader.unmarshal(buf[RECORD_LAYER_HEADER_SIZE:])
        data = bytes(buf[RECORD_LAYER_HEADER_SIZE + HANDSHAKE_HEADER_LENGTH :])
        self._cache.setdefault(header.message_sequence, []).append(
            _Fragment(header, data)
        )
        return True

    def _assemble(self, fragments: list[_Fragment]) -> bytes | None:
        pieces: list[bytes] = []
        target = 0
        while True:
            fragment = next(
                (f for f in fragments if f.header.fragment_offset == target), None
            )
            if fragment is None:
                return None
            pieces.append(fragment.data)
            end = fragment.header.fragment_offset + fragment.header.fragment_length
            if end == fragment.header.length:
                return b"".join(pieces)
            if end == target:
                return None
            target = end

    def pop(self) -> bytes | None:
        """Return the next complete message with a rebuilt header, or None."""
        fragments = self._cache.get(self._current_sequence)
        if fragments is None:
            return None
        message = self._assemble(fragments)
        if message is None:
            return None

        first = fragments[0].header
        header = replace(first, fragment_offset=0, fragment_length=first.length)

        del self._cache[self._current_sequence]
        self._current_sequence = (self._current_sequence + 1) & 0xFFFF
        return header.marshal() + message