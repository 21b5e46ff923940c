"""Hello extensions: supported groups, point formats, signature algorithms, SRTP."""

from __future__ import annotations

import enum
import struct
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Union

from .errors import BufferTooSmallError, InvalidExtensionTypeError, LengthMismatchError

_GROUPS_HEADER_SIZE = 6
_POINT_FORMATS_HEADER_SIZE = 5
_SIGNATURE_ALGORITHMS_HEADER_SIZE = 6
_USE_SRTP_HEADER_SIZE = 6


class ExtensionType(enum.IntEnum):
    SUPPORTED_ELLIPTIC_CURVES = 10
    SUPPORTED_POINT_FORMATS = 11
    SUPPORTED_SIGNATURE_ALGORITHMS = 13
    USE_SRTP = 14


class NamedCurve(enum.IntEnum):
    P256 = 0x0017
    P384 = 0x0018
    X25519 = 0x001D


class EllipticCurvePointFormat(enum.IntEnum):
    UNCOMPRESSED = 0


class HashAlgorithm(enum.IntEnum):
    MD5 = 1
    SHA1 = 2
    SHA224 = 3
    SHA256 = 4
    SHA384 = 5
    SHA512 = 6


class SignatureAlgorithm(enum.IntEnum):
    RSA = 1
    ECDSA = 3


class SRTPProtectionProfile(enum.IntEnum):
    SRTP_AES128_CM_HMAC_SHA1_80 = 0x0001
    SRTP_AES128_CM_HMAC_SHA1_32 = 0x0002


@dataclass(frozen=True)
class SignatureHashAlgorithm:
    """A hash and signature algorithm pair."""

    hash: int
    signature: int


def _u16(data: bytes, offset: int) -> int:
    return int.from_bytes(data[offset : offset + 2], "big")


def _check_header(data: bytes, header_size: int, expected: ExtensionType) -> None:
    if len(data) <= header_size:
        raise BufferTooSmallError()
    if _u16(data, 0) != expected:
        raise InvalidExtensionTypeError()


@dataclass
class SupportedEllipticCurves:
    """The supported_groups extension."""

    elliptic_curves: list[int] = field(default_factory=list)

    @property
    def extension_type(self) -> ExtensionType:
        return ExtensionType.SUPPORTED_ELLIPTIC_CURVES

    def marshal(self) -> bytes:
        count = len(self.elliptic_curves)
        out = struct.pack(">HHH", self.extension_type, 2 + count * 2, count * 2)
        return out + b"".join(int(c).to_bytes(2, "big") for c in self.elliptic_curves)

    @classmethod
    def unmarshal(cls, data: bytes) -> "SupportedEllipticCurves":
        _check_header(data, _GROUPS_HEADER_SIZE, ExtensionType.SUPPORTED_ELLIPTIC_CURVES)
        group_count = _u16(data, 4) // 2
        if _GROUPS_HEADER_SIZE + group_count * 2 > len(data):
            raise LengthMismatchError()
        known = {c.value for c in NamedCurve}
        ids = (
            _u16(data, _GROUPS_HEADER_SIZE + i * 2) for i in range(group_count)
        )
        return cls([NamedCurve(v) for v in ids if v in known])


@dataclass
class SupportedPointFormats:
    """The ec_point_formats extension."""

    point_formats: list[int] = field(default_factory=list)

    @property
    def extension_type(self) -> ExtensionType:
        return ExtensionType.SUPPORTED_POINT_FORMATS

    def marshal(self) -> bytes:
        count = len(self.point_formats)
        out = struct.pack(">HHB", self.extension_type, 1 + count, count)
        return out + bytes(int(p) for p in self.point_formats)

    @classmethod
    def unmarshal(cls, data: bytes) -> "SupportedPointFormats":
        _check_header(
            data, _POINT_FORMATS_HEADER_SIZE, ExtensionType.SUPPORTED_POINT_FORMATS
        )
        count = data[4]
        if _POINT_FORMATS_HEADER_SIZE + count > len(data):
            raise LengthMismatchError()
        known = {p.value for p in EllipticCurvePointFormat}
        raw = data[_POINT_FORMATS_HEADER_SIZE : _POINT_FORMATS_HEADER_SIZE + count]
        return cls([EllipticCurvePointFormat(p) for p in raw if p in known])


@dataclass
class SupportedSignatureAlgorithms:
    """The signature_algorithms extension."""

    signature_hash_algorithms: list[SignatureHashAlgorithm] = field(
        default_factory=list
    )

    @property
    def extension_type(self) -> ExtensionType:
        return ExtensionType.SUPPORTED_SIGNATURE_ALGORITHMS

    def marshal(self) -> bytes:
        count = len(self.signature_hash_algorithms)
        out = struct.pack(">HHH", self.extension_type, 2 + count * 2, count * 2)
        return out + b"".join(
            bytes([int(a.hash) & 0xFF, int(a.signature) & 0xFF])
            for a in self.signature_hash_algorithms
        )

    @classmethod
    def unmarshal(cls, data: bytes) -> "SupportedSignatureAlgorithms":
        _check_header(
            data,
            _SIGNATURE_ALGORITHMS_HEADER_SIZE,
            ExtensionType.SUPPORTED_SIGNATURE_ALGORITHMS,
        )
        count = _u16(data, 4) // 2
        if _SIGNATURE_ALGORITHMS_HEADER_SIZE + count * 2 > len(data):
            raise LengthMismatchError()
        known_hashes = {h.value for h in HashAlgorithm}
        known_signatures = {s.value for s in SignatureAlgorithm}
        body = data[
            _SIGNATURE_ALGORITHMS_HEADER_SIZE : _SIGNATURE_ALGORITHMS_HEADER_SIZE
            + count * 2
        ]
        pairs = zip(body[0::2], body[1::2])
        return cls(
            [
                SignatureHashAlgorithm(HashAlgorithm(h), SignatureAlgorithm(s))
                for h, s in pairs
                if h in known_hashes and s in known_signatures
            ]
        )


@dataclass
class UseSRTP:
    """The use_srtp extension, with an empty MKI."""

    protection_profiles: list[int] = field(default_factory=list)

    @property
    def extension_type(self) -> ExtensionType:
        return ExtensionType.USE_SRTP

    def marshal(self) -> bytes:
        count = len(self.protection_profiles)
        out = struct.pack(">HHH", self.extension_type, 2 + count * 2 + 1, count * 2)
        profiles = b"".join(int(p).to_bytes(2, "big") for p in self.protection_profiles)
        return out + profiles + b"\x00"

    @classmethod
    def unmarshal(cls, data: bytes) -> "UseSRTP":
        _check_header(data, _USE_SRTP_HEADER_SIZE, ExtensionType.USE_SRTP)
        count = _u16(data, 4) // 2
        if _GROUPS_HEADER_SIZE + count * 2 > len(data):
            raise LengthMismatchError()
        known = {p.value for p in SRTPProtectionProfile}
        ids = (_u16(data, _USE_SRTP_HEADER_SIZE + i * 2) for i in range(count))
        return cls([SRTPProtectionProfile(v) for v in ids if v in known])


Extension = Union[
    SupportedEllipticCurves, SupportedPointFormats, SupportedSignatureAlgorithms, UseSRTP
]

_DECODERS = {
    ExtensionType.SUPPORTED_ELLIPTIC_CURVES: SupportedEllipticCurves,
    ExtensionType.USE_SRTP: UseSRTP,
}


def decode_extensions(buf: bytes) -> list[Extension]:
    """Decode a length-prefixed extension block, skipping unhandled types."""
    if len(buf) < 2:
        raise BufferTooSmallError()
    if len(buf) - 2 != _u16(buf, 0):
        raise LengthMismatchError()

    extensions: list[Extension] = []
    offset = 2
    while offset < len(buf):
        if len(buf) < offset + 2:
            raise BufferTooSmallError()
        decoder = _DECODERS.get(_u16(buf, offset))
        if decoder is not None:
            extensions.append(decoder.unmarshal(buf[offset:]))
        if len(buf) < offset + 4:
            raise BufferTooSmallError()
        offset += 4 + _u16(buf, offset + 2)
    return extensions


def encode_extensions(extensions: Sequence[Extension]) -> bytes:
    """Encode extensions behind a two-byte total length."""
    body = b"".join(e.marshal() for e in extensions)
    return (len(body) & 0xFFFF).to_bytes(2, "big") + body