"""Supported cipher suites and their wire encoding."""

from __future__ import annotations

import enum
import hashlib
from collections.abc import Callable, Sequence
from dataclasses import dataclass

from .errors import (
    BufferTooSmallError,
    DTLSError,
    NoAvailableCipherSuitesError,
    PacketInvalidLengthError,
)


class CipherSuiteID(enum.IntEnum):
    TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256 = 0xC02B
    TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256 = 0xC02F
    TLS_ECDHE_ECDSA_WITH_AES_256_CBC_SHA = 0xC00A
    TLS_ECDHE_RSA_WITH_AES_256_CBC_SHA = 0x0035


class ClientCertificateType(enum.IntEnum):
    RSA_SIGN = 1
    ECDSA_SIGN = 64


class EllipticCurveType(enum.IntEnum):
    NAMED_CURVE = 0x03


@dataclass(frozen=True)
class CipherSuite:
    """A combination of key agreement, cipher and MAC."""

    id: CipherSuiteID
    certificate_type: ClientCertificateType
    mac_length: int
    key_length: int
    iv_length: int
    is_psk: bool = False

    @property
    def name(self) -> str:
        return self.id.name

    @property
    def hash_func(self) -> Callable[..., "hashlib._Hash"]:
        return hashlib.sha256

    def __str__(self) -> str:
        return self.name


_GCM_LENGTHS = {"mac_length": 0, "key_length": 16, "iv_length": 4}
_CBC_LENGTHS = {"mac_length": 20, "key_length": 32, "iv_length": 16}

_SUITES: dict[int, CipherSuite] = {
    suite.id: suite
    for suite in (
        CipherSuite(
            CipherSuiteID.TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256,
            ClientCertificateType.ECDSA_SIGN,
            **_GCM_LENGTHS,
        ),
        CipherSuite(
            CipherSuiteID.TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256,
            ClientCertificateType.RSA_SIGN,
            **_GCM_LENGTHS,
        ),
        CipherSuite(
            CipherSuiteID.TLS_ECDHE_ECDSA_WITH_AES_256_CBC_SHA,
            ClientCertificateType.ECDSA_SIGN,
            **_CBC_LENGTHS,
        ),
        CipherSuite(
            CipherSuiteID.TLS_ECDHE_RSA_WITH_AES_256_CBC_SHA,
            ClientCertificateType.RSA_SIGN,
            **_CBC_LENGTHS,
        ),
    )
}


def cipher_suite_for_id(suite_id: int) -> CipherSuite | None:
    """Return the suite with this id, or None if it is not supported."""
    return _SUITES.get(int(suite_id))


def default_cipher_suites() -> list[CipherSuite]:
    """Supported suites in order of preference."""
    return [
        _SUITES[CipherSuiteID.TLS_ECDHE_RSA_WITH_AES_256_CBC_SHA],
        _SUITES[CipherSuiteID.TLS_ECDHE_ECDSA_WITH_AES_256_CBC_SHA],
        _SUITES[CipherSuiteID.TLS_ECDHE_RSA_WITH_AES_128_GCM_SHA256],
        _SUITES[CipherSuiteID.TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256],
    ]


def decode_cipher_suites(buf: bytes) -> list[CipherSuite]:
    """Decode a length-prefixed list of suite ids, skipping unknown ones."""
    if len(buf) < 2:
        raise PacketInvalidLengthError()
    count = int.from_bytes(buf[0:2], "big") // 2
    if len(buf) < count * 2 + 2:
        raise BufferTooSmallError()
    ids = (int.from_bytes(buf[2 + i * 2 : 4 + i * 2], "big") for i in range(count))
    return [suite for suite in map(cipher_suite_for_id, ids) if suite is not None]


def encode_cipher_suites(suites: Sequence[CipherSuite]) -> bytes:
    """Encode suites behind a byte-length prefix, in reverse order."""
    header = ((len(suites) * 2) & 0xFFFF).to_bytes(2, "big")
    return header + b"".join(int(s.id).to_bytes(2, "big") for s in reversed(suites))


def parse_cipher_suites(
    user_selected: Sequence[int],
    exclude_psk: bool,
    exclude_non_psk: bool,
) -> list[CipherSuite]:
    """Resolve the configured suites, or the defaults, and filter them."""
    if user_selected:
        suites = []
        for suite_id in user_selected:
            suite = cipher_suite_for_id(suite_id)
            if suite is None:
                raise DTLSError(f"CipherSuite with id({int(suite_id)}) is not valid")
            suites.append(suite)
    else:
        suites = default_cipher_suites()

    kept = [
        s
        for s in suites
        if not ((exclude_psk and s.is_psk) or (exclude_non_psk and not s.is_psk))
    ]
    if not kept:
        raise NoAvailableCipherSuitesError()
    return kept