import pytest

from dtlsproto.crypto_gcm import GcmCipher
from dtlsproto.errors import BufferTooSmallError, DTLSError, NotEnoughRoomForNonceError

CLIENT_KEY = bytes(range(16))
CLIENT_IV = bytes([0xA0, 0xA1, 0xA2, 0xA3])
SERVER_KEY = bytes(range(16, 32))
SERVER_IV = bytes([0xB0, 0xB1, 0xB2, 0xB3])


def _record(content_type, payload, epoch=1, seq=5):
    return (
        bytes([content_type, 0xFE, 0xFD])
        + epoch.to_bytes(2, "big")
        + seq.to_bytes(6, "big")
        + len(payload).to_bytes(2, "big")
        + payload
    )


@pytest.fixture
def pair():
    client = GcmCipher(CLIENT_KEY, CLIENT_IV, SERVER_KEY, SERVER_IV)
    server = GcmCipher(SERVER_KEY, SERVER_IV, CLIENT_KEY, CLIENT_IV)
    return client, server


def test_round_trip(pair):
    client, server = pair
    raw = _record(23, b"Hello World")
    encrypted = client.encrypt(raw)
    decrypted = server.decrypt(encrypted)
    assert decrypted[13:] == b"Hello World"
    assert decrypted[:11] == raw[:11]


def test_encrypt_keeps_header_and_updates_length(pair):
    client, _ = pair
    raw = _record(23, b"data")
    encrypted = client.encrypt(raw)
    assert encrypted[:11] == raw[:11]
    assert int.from_bytes(encrypted[11:13], "big") == len(encrypted) - 13
    assert len(encrypted) > len(raw)


def test_explicit_nonce_differs_between_records(pair):
    client, server = pair
    raw = _record(23, b"same")
    first = client.encrypt(raw)
    second = client.encrypt(raw)
    assert len(first) == len(second) == len(raw) + 8 + 16
    assert first[13:21] != second[13:21]
    assert server.decrypt(first)[13:] == b"same"
    assert server.decrypt(second)[13:] == b"same"


def test_wrong_direction_fails(pair):
    client, _ = pair
    encrypted = client.encrypt(_record(23, b"payload"))
    with pytest.raises(DTLSError):
        client.decrypt(encrypted)


def test_tampered_ciphertext_fails(pair):
    client, server = pair
    encrypted = bytearray(client.encrypt(_record(23, b"payload")))
    encrypted[-1] ^= 0x01
    with pytest.raises(DTLSError):
        server.decrypt(bytes(encrypted))


def test_sequence_number_is_authenticated(pair):
    client, server = pair
    encrypted = bytearray(client.encrypt(_record(23, b"payload", seq=5)))
    encrypted[10] ^= 0x01
    with pytest.raises(DTLSError):
        server.decrypt(bytes(encrypted))


def test_change_cipher_spec_passes_through(pair):
    _, server = pair
    raw = _record(20, b"\x01")
    assert server.decrypt(raw) == raw


def test_too_short_for_nonce(pair):
    _, server = pair
    with pytest.raises(NotEnoughRoomForNonceError):
        server.decrypt(_record(23, b"\x00" * 8))


def test_too_short_for_header(pair):
    _, server = pair
    with pytest.raises(BufferTooSmallError):
        server.decrypt(b"\x17\xfe\xfd")


def test_invalid_key_size():
    with pytest.raises(DTLSError):
        GcmCipher(b"\x00" * 5, CLIENT_IV, SERVER_KEY, SERVER_IV)