"""Exceptions raised while encoding, decoding and running DTLS."""

from __future__ import annotations


class DTLSError(Exception):
    """Base class of every error raised by this package."""

    default_message = "dtls: error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.default_message)


class ConnClosedError(DTLSError):
    default_message = "dtls: conn is closed"


class BufferTooSmallError(DTLSError):
    default_message = "dtls: buffer is too small"


class PacketInvalidLengthError(DTLSError):
    default_message = "dtls: packet is too short"


class LengthMismatchError(DTLSError):
    default_message = "dtls: data length and declared length do not match"


class InvalidCipherSpecError(DTLSError):
    default_message = "dtls: cipher spec invalid"


class InvalidExtensionTypeError(DTLSError):
    default_message = "dtls: invalid extension type"


class NoAvailableCipherSuitesError(DTLSError):
    default_message = (
        "dtls: Connection can not be created, no CipherSuites satisfy this Config"
    )


class NotEnoughRoomForNonceError(DTLSError):
    default_message = "dtls: Buffer not long enough to contain nonce"


class UnableToMarshalFragmentedError(DTLSError):
    default_message = "dtls: unable to marshal fragmented handshakes"