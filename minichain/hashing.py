"""Hashing helpers used for block headers and proof of work."""

import hashlib

__all__ = ["sha3_hex"]


def sha3_hex(data: bytes) -> str:
    """Return the SHA3-256 digest of ``data`` as a lower-case hex string."""
    return hashlib.sha3_256(data).hexdigest()