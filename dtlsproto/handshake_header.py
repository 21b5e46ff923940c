"""Handshake message types and the DTLS handshake header."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .errors import BufferTooSmallError

HANDSHAKE_HEADER_LENGTH = 12

_UINT24_MASK = 0xFFFFFF


class HandshakeType(enum.IntEnum):
    HELLO_REQUEST = 0
    CLIENT_HELLO = 1
    SERVER_HELLO = 2
    HELLO_VERIFY_REQUEST = 3
    CERTIFICATE = 11
    SERVER_KEY_EXCHANGE = 12
    CERTIFICATE_REQUEST = 13
    SERVER_HELLO_DONE = 14
    CERTIFICATE_VERIFY = 15
    CLIENT_KEY_EXCHANGE = 16
    FINISHED = 20

    def __str__(self) -> str:
        if self is HandshakeType.CERTIFICATE:
            return "TypeCertificate"
        return self.name.title().replace("_", "")


def _uint24(data: bytes, offset: int) -> int:
    return int.from_bytes(data[offset : offset + 3], "big")


@dataclass
class HandshakeHeader:
    """The 12-byte header in front of every handshake fragment."""

    handshake_type: int = HandshakeType.HELLO_REQUEST
    length: int = 0
    message_sequence: int = 0
    fragment_offset: int = 0
    fragment_length: int = 0

    def marshal(self) -> bytes:
        return b"".join(
            (
                bytes([int(self.handshake_type) & 0xFF]),
                (self.length & _UINT24_MASK).to_bytes(3, "big"),
                (self.message_sequence & 0xFFFF).to_bytes(2, "big"),
                (self.fragment_offset & _UINT24_MASK).to_bytes(3, "big"),
                (self.fragment_length & _UINT24_MASK).to_bytes(3, "big"),
            )
        )

    @classmethod
    def unmarshal(cls, data: bytes) -> "HandshakeHeader":
        if len(data) < HANDSHAKE_HEADER_LENGTH:
            raise BufferTooSmallError()
        try:
            handshake_type: int = HandshakeType(data[0])
        except ValueError:
            handshake_type = data[0]
        return cls(
            handshake_type=handshake_type,
            length=_uint24(data, 1),
            message_sequence=int.from_bytes(data[4:6], "big"),
            fragment_offset=_uint24(data, 6),
            fragment_length=_uint24(data, 9),
        )