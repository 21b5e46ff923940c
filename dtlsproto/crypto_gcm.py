"""AES-GCM protection of DTLS records."""

from __future__ import annotations

import os

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers.aead import AESGCM

from .alert import ContentType
from .errors import BufferTooSmallError, DTLSError, NotEnoughRoomForNonceError
from .fragment_buffer import RECORD_LAYER_HEADER_SIZE

GCM_TAG_LENGTH = 16
_IMPLICIT_NONCE_LENGTH = 4
_EXPLICIT_NONCE_LENGTH = 8


def _additional_data(header: bytes, payload_length: int) -> bytes:
    """Build the 13-byte AEAD additional data from a record header.

    The layout is epoch and 48-bit sequence number, content type,
    protocol version and the plaintext length.
    """
    return header[3:11] + header[0:3] + (payload_length & 0xFFFF).to_bytes(2, "big")


def _make_aead(key: bytes) -> AESGCM:
    try:
        return AESGCM(bytes(key))
    except ValueError as exc:
        raise DTLSError(f"crypto/aes: invalid key size {len(key)}") from exc


class GcmCipher:
    """Encrypts outbound and decrypts inbound records with AES-GCM."""

    def __init__(
        self,
        local_key: bytes,
        local_write_iv: bytes,
        remote_key: bytes,
        remote_write_iv: bytes,
    ) -> None:
        if (
            len(local_write_iv) < _IMPLICIT_NONCE_LENGTH
            or len(remote_write_iv) < _IMPLICIT_NONCE_LENGTH
        ):
            raise BufferTooSmallError()
        self._local = _make_aead(local_key)
        self._remote = _make_aead(remote_key)
        self._local_iv = bytes(local_write_iv[:_IMPLICIT_NONCE_LENGTH])
        self._remote_iv = bytes(remote_write_iv[:_IMPLICIT_NONCE_LENGTH])

    def encrypt(self, raw: bytes) -> bytes:
        """Encrypt a marshalled record; the length field is updated."""
        if len(raw) < RECORD_LAYER_HEADER_SIZE:
            raise BufferTooSmallError()
        header = bytes(raw[:RECORD_LAYER_HEADER_SIZE])
        payload = bytes(raw[RECORD_LAYER_HEADER_SIZE:])

        explicit_nonce = os.urandom(_EXPLICIT_NONCE_LENGTH)
        nonce = self._local_iv + explicit_nonce
        sealed = self._local.encrypt(
            nonce, payload, _additional_data(header, len(payload))
        )

        body = explicit_nonce + sealed
        length = (len(body) & 0xFFFF).to_bytes(2, "big")
        return header[: RECORD_LAYER_HEADER_SIZE - 2] + length + body

    def decrypt(self, raw: bytes) -> bytes:
        """Decrypt a protected record and return header plus plaintext.

        Change-cipher-spec records are returned untouched.
        """
        if len(raw) < RECORD_LAYER_HEADER_SIZE:
            raise BufferTooSmallError()
        raw = bytes(raw)
        header = raw[:RECORD_LAYER_HEADER_SIZE]
        if header[0] == ContentType.CHANGE_CIPHER_SPEC:
            return raw
        if len(raw) <= RECORD_LAYER_HEADER_SIZE + _EXPLICIT_NONCE_LENGTH:
            raise NotEnoughRoomForNonceError()

        body_start = RECORD_LAYER_HEADER_SIZE + _EXPLICIT_NONCE_LENGTH
        nonce = self._remote_iv + raw[RECORD_LAYER_HEADER_SIZE:body_start]
        sealed = raw[body_start:]
        additional = _additional_data(header, len(sealed) - GCM_TAG_LENGTH)
        try:
            plaintext = self._remote.decrypt(nonce, sealed, additional)
        except InvalidTag as exc:
            raise DTLSError("decryptPacket: cipher: message authentication failed") from exc
        return header + plaintext