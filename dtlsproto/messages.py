"""Application data and change-cipher-spec record contents."""

from __future__ import annotations

from dataclasses import dataclass

from .alert import ContentType
from .errors import InvalidCipherSpecError


@dataclass
class ApplicationData:
    """Opaque application payload carried by the record layer."""

    data: bytes = b""

    @property
    def content_type(self) -> ContentType:
        return ContentType.APPLICATION_DATA

    def marshal(self) -> bytes:
        return bytes(self.data)

    @classmethod
    def unmarshal(cls, data: bytes) -> "ApplicationData":
        return cls(bytes(data))


@dataclass(frozen=True)
class ChangeCipherSpec:
    """Signals a switch to the newly negotiated cipher state."""

    @property
    def content_type(self) -> ContentType:
        return ContentType.CHANGE_CIPHER_SPEC

    def marshal(self) -> bytes:
        return b"\x01"

    @classmethod
    def unmarshal(cls, data: bytes) -> "ChangeCipherSpec":
        if bytes(data) != b"\x01":
            raise InvalidCipherSpecError()
        return cls()