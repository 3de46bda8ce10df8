import string

import pytest

from minichain.hashing import sha3_hex

EMPTY_DIGEST = "a7ffc6f8bf1ed76651c14756a061d662f580ff4de43b49fa82d80a4b80f8434a"
ABC_DIGEST = "3a985da74fe225b2045c172d6bd390bd855f086e3e9d525b46bfe24511431532"


def test_empty_input_digest():
    assert sha3_hex(b"") == EMPTY_DIGEST


def test_abc_digest():
    assert sha3_hex(b"abc") == ABC_DIGEST


@pytest.mark.parametrize("payload", [b"", b"x", b"Genesis Block", bytes(range(256))])
def test_digest_is_64_lowercase_hex_chars(payload):
    digest = sha3_hex(payload)
    assert len(digest) == 64
    assert set(digest) <= set(string.hexdigits.lower())


def test_digest_is_deterministic():
    assert [sha3_hex(b"abc") for _ in range(3)] == [ABC_DIGEST] * 3
    assert [sha3_hex(b"") for _ in range(3)] == [EMPTY_DIGEST] * 3


def test_different_inputs_give_different_digests():
    assert sha3_hex(b"Send 1 BTC to Ivan") != sha3_hex(b"Send 2 more BTC to Ivan")
    assert sha3_hex(b"a") != sha3_hex(b"b")