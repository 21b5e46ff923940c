"""Record content types and the alert message."""

from __future__ import annotations

import enum
from dataclasses import dataclass

from .errors import BufferTooSmallError


class ContentType(enum.IntEnum):
    """Content types carried by the record layer."""

    CHANGE_CIPHER_SPEC = 20
    ALERT = 21
    HANDSHAKE = 22
    APPLICATION_DATA = 23


class AlertLevel(enum.IntEnum):
    WARNING = 1
    FATAL = 2

    def __str__(self) -> str:
        return "LevelWarning" if self is AlertLevel.WARNING else "LevelFatal"


class AlertDescription(enum.IntEnum):
    CLOSE_NOTIFY = 0
    UNEXPECTED_MESSAGE = 10
    BAD_RECORD_MAC = 20
    DECRYPTION_FAILED = 21
    RECORD_OVERFLOW = 22
    DECOMPRESSION_FAILURE = 30
    HANDSHAKE_FAILURE = 40
    NO_CERTIFICATE = 41
    BAD_CERTIFICATE = 42
    UNSUPPORTED_CERTIFICATE = 43
    CERTIFICATE_REVOKED = 44
    CERTIFICATE_EXPIRED = 45
    CERTIFICATE_UNKNOWN = 46
    ILLEGAL_PARAMETER = 47
    UNKNOWN_CA = 48
    ACCESS_DENIED = 49
    DECODE_ERROR = 50
    DECRYPT_ERROR = 51
    EXPORT_RESTRICTION = 60
    PROTOCOL_VERSION = 70
    INSUFFICIENT_SECURITY = 71
    INTERNAL_ERROR = 80
    USER_CANCELED = 90
    NO_RENEGOTIATION = 100
    UNSUPPORTED_EXTENSION = 110

    def __str__(self) -> str:
        if self is AlertDescription.UNKNOWN_CA:
            return "UnknownCA"
        return self.name.title().replace("_", "")


def _level_label(level: int) -> str:
    return str(level) if isinstance(level, AlertLevel) else "Invalid alert level"


def _description_label(description: int) -> str:
    if isinstance(description, AlertDescription):
        return str(description)
    return "Invalid alert description"


def _coerce(enum_cls, value: int):
    try:
        return enum_cls(value)
    except ValueError:
        return value


@dataclass
class Alert:
    """An alert message: a severity level and a description."""

    level: int
    description: int

    @property
    def content_type(self) -> ContentType:
        return ContentType.ALERT

    def marshal(self) -> bytes:
        return bytes([int(self.level), int(self.description)])

    @classmethod
    def unmarshal(cls, data: bytes) -> "Alert":
        if len(data) != 2:
            raise BufferTooSmallError()
        return cls(_coerce(AlertLevel, data[0]), _coerce(AlertDescription, data[1]))

    def __str__(self) -> str:
        return (
            f"Alert {_level_label(self.level)}: "
            f"{_description_label(self.description)}"
        )