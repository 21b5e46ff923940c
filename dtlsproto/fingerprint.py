"""Certificate fingerprints in colon-separated hexadecimal form."""

from __future__ import annotations

import hashlib

_HASHES = {
    "md5": hashlib.md5,
    "sha1": hashlib.sha1,
    "sha224": hashlib.sha224,
    "sha256": hashlib.sha256,
    "sha384": hashlib.sha384,
    "sha512": hashlib.sha512,
}


def fingerprint(certificate_der: bytes, hash_name: str) -> str:
    """Hash a DER certificate and format the digest as ``aa:bb:...``.

    ``hash_name`` may be written as ``sha-256``, ``SHA256`` and so on.
    """
    key = hash_name.lower().replace("-", "").replace("_", "")
    try:
        hasher = _HASHES[key]
    except KeyError:
        raise ValueError(f"unsupported hash algorithm: {hash_name}") from None
    return ":".join(f"{b:02x}" for b in hasher(certificate_der).digest())