import pytest

from dtlsproto.errors import BufferTooSmallError
from dtlsproto.handshake_header import HANDSHAKE_HEADER_LENGTH, HandshakeHeader, HandshakeType

CLIENT_HELLO_HEADER = bytes(
    [0x01, 0x00, 0x00, 0x29, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x29]
)


def test_unmarshal_client_hello_header():
    header = HandshakeHeader.unmarshal(CLIENT_HELLO_HEADER)
    assert header == HandshakeHeader(
        handshake_type=HandshakeType.CLIENT_HELLO,
        length=0x29,
        message_sequence=0,
        fragment_offset=0,
        fragment_length=0x29,
    )


def test_marshal_certificate_header():
    header = HandshakeHeader(HandshakeType.CERTIFICATE, 0x0F, 0, 0x05, 0x05)
    assert header.marshal() == bytes(
        [0x0B, 0x00, 0x00, 0x0F, 0x00, 0x00, 0x00, 0x00, 0x05, 0x00, 0x00, 0x05]
    )


def test_round_trip():
    header = HandshakeHeader(HandshakeType.FINISHED, 300, 7, 12, 200)
    raw = header.marshal()
    assert len(raw) == HANDSHAKE_HEADER_LENGTH
    assert HandshakeHeader.unmarshal(raw) == header


def test_unmarshal_ignores_trailing_bytes():
    assert HandshakeHeader.unmarshal(CLIENT_HELLO_HEADER + b"\xff\xff").marshal() == CLIENT_HELLO_HEADER


def test_too_small():
    with pytest.raises(BufferTooSmallError):
        HandshakeHeader.unmarshal(CLIENT_HELLO_HEADER[:-1])


def test_unknown_type_kept_as_int():
    raw = bytes([0x63]) + CLIENT_HELLO_HEADER[1:]
    header = HandshakeHeader.unmarshal(raw)
    assert header.handshake_type == 0x63
    assert not isinstance(header.handshake_type, HandshakeType)
    assert header.marshal() == raw


@pytest.mark.parametrize(
    "type_byte, label",
    [
        (0x0B, "TypeCertificate"),
        (0x01, "ClientHello"),
        (0x03, "HelloVerifyRequest"),
    ],
)
def test_type_labels(type_byte, label):
    header = HandshakeHeader.unmarshal(bytes([type_byte]) + CLIENT_HELLO_HEADER[1:])
    assert str(header.handshake_type) == label