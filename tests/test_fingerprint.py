import hashlib

import pytest

from dtlsproto.fingerprint import fingerprint


def test_sha256_of_empty_input():
    assert fingerprint(b"", "sha-256") == (
        "e3:b0:c4:42:98:fc:1c:14:9a:fb:f4:c8:99:6f:b9:24:"
        "27:ae:41:e4:64:9b:93:4c:a4:95:99:1b:78:52:b8:55"
    )


@pytest.mark.parametrize(
    "name, size", [("md5", 16), ("sha-1", 20), ("sha-256", 32), ("sha-512", 64)]
)
def test_group_count_matches_digest_size(name, size):
    groups = fingerprint(b"certificate", name).split(":")
    assert len(groups) == size
    assert all(len(g) == 2 for g in groups)


def test_matches_plain_digest():
    data = b"\x30\x82\x01\x0a"
    assert fingerprint(data, "sha-384").replace(":", "") == hashlib.sha384(data).hexdigest()


def test_name_spellings_agree():
    assert fingerprint(b"abc", "SHA-256") == fingerprint(b"abc", "sha256")


def test_unknown_hash():
    with pytest.raises(ValueError):
        fingerprint(b"abc", "whirlpool")