"""DTLS 1.2 message encoding, fragment reassembly, extensions, cipher suites and AES-GCM."""

__version__ = "0.1.0"

__all__ = [
    "alert",
    "cipher_suite",
    "compression",
    "crypto_gcm",
    "errors",
    "extensions",
    "fingerprint",
    "flight",
    "fragment_buffer",
    "handshake_cache",
    "handshake_header",
    "messages",
]