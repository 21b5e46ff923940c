# dtlsproto

Building blocks for DTLS 1.2: encoding and decoding of alert,
application-data and change-cipher-spec record contents, the handshake
header, reassembly of fragmented and out-of-order handshake messages, a
cache of handshake messages for computing verify data, flight tracking,
TLS hello extensions, the supported cipher suites, AES-GCM protection of
records and certificate fingerprints.

## Installation

From a checkout of the project:

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## What is inside

| Module | Contents |
| --- | --- |
| `dtlsproto.errors` | `DTLSError` and its subclasses, such as `BufferTooSmallError`, `LengthMismatchError`, `InvalidCipherSpecError` and `NotEnoughRoomForNonceError` |
| `dtlsproto.alert` | `ContentType`, `AlertLevel`, `AlertDescription`, `Alert` |
| `dtlsproto.messages` | `ApplicationData`, `ChangeCipherSpec` |
| `dtlsproto.compression` | `CompressionMethod`, `decode_compression_methods`, `encode_compression_methods` |
| `dtlsproto.handshake_header` | `HandshakeType`, `HandshakeHeader` |
| `dtlsproto.handshake_cache` | `HandshakeCache`, `HandshakeCacheItem`, `PullRule` |
| `dtlsproto.flight` | `Flight`, `FlightState` |
| `dtlsproto.fingerprint` | `fingerprint` for DER-encoded certificates |
| `dtlsproto.extensions` | `SupportedEllipticCurves`, `SupportedPointFormats`, `SupportedSignatureAlgorithms`, `UseSRTP`, the enums they use (`ExtensionType`, `NamedCurve`, `HashAlgorithm`, `SignatureAlgorithm`, `SRTPProtectionProfile`, ...), `decode_extensions`, `encode_extensions` |
| `dtlsproto.fragment_buffer` | `FragmentBuffer` for out-of-order handshake fragments |
| `dtlsproto.crypto_gcm` | `GcmCipher`, AES-GCM encryption and decryption of marshalled records |
| `dtlsproto.cipher_suite` | `CipherSuiteID`, `CipherSuite`, `ClientCertificateType`, `EllipticCurveType`, `cipher_suite_for_id`, `default_cipher_suites`, `decode_cipher_suites`, `encode_cipher_suites`, `parse_cipher_suites` |

Malformed input is reported by raising a subclass of
`dtlsproto.errors.DTLSError`.

## Examples

Alerts:

```python
from dtlsproto.alert import Alert, AlertLevel, AlertDescription

alert = Alert.unmarshal(b"\x02\x0a")
assert alert.level is AlertLevel.FATAL
assert alert.description is AlertDescription.UNEXPECTED_MESSAGE
assert alert.marshal() == b"\x02\x0a"
print(alert)  # Alert LevelFatal: UnexpectedMessage
```

Reassembling a fragmented handshake message:

```python
from dtlsproto.fragment_buffer import FragmentBuffer

buffer = FragmentBuffer()
for record in received_records:      # raw DTLS records, in any order
    buffer.push(record)              # False for records that are not handshakes
message = buffer.pop()               # None until every fragment has arrived
```

`pop` returns the whole message behind a rebuilt 12-byte handshake header
and hands out messages in order of their message sequence.

Collecting handshake messages for verify data:

```python
from dtlsproto.handshake_cache import HandshakeCache, PullRule
from dtlsproto.handshake_header import HandshakeType

cache = HandshakeCache()
cache.push(b"\x01...", 0, HandshakeType.CLIENT_HELLO, True)
transcript = cache.pull_and_merge(PullRule(HandshakeType.CLIENT_HELLO, True))
```

Hello extensions:

```python
from dtlsproto.extensions import NamedCurve, SupportedEllipticCurves

assert SupportedEllipticCurves([NamedCurve.X25519]).marshal() == (
    b"\x00\x0a\x00\x04\x00\x02\x00\x1d"
)
```

Choosing cipher suites:

```python
from dtlsproto.cipher_suite import CipherSuiteID, parse_cipher_suites

suites = parse_cipher_suites(
    [CipherSuiteID.TLS_ECDHE_ECDSA_WITH_AES_128_GCM_SHA256], True, False
)
```

Protecting records with AES-GCM (keys and IVs come from the key schedule):

```python
from dtlsproto.crypto_gcm import GcmCipher

cipher = GcmCipher(local_key, local_iv, remote_key, remote_iv)
protected = cipher.encrypt(record)   # record: 13-byte header plus payload
plain = peer_cipher.decrypt(protected)
```

Certificate fingerprints:

```python
from dtlsproto.fingerprint import fingerprint

print(fingerprint(certificate_der, "sha-256"))  # "ab:cd:..."
```

## What this package does not do

It is a toolkit, not a DTLS endpoint. It does not open sockets, run a
client or server handshake, or offer a connection object to read from and
write to. It has no encoder for the record-layer header itself and no
encoders for handshake message bodies such as ClientHello, ServerHello or
Finished. Key derivation (the PRF, master secret and verify data), ECDHE
key exchange, signing and verification of key exchanges, and AES-CBC record
protection are not included; `CipherSuite` describes each suite's key,
IV and MAC lengths, but only `GcmCipher` performs record encryption.