"""Hashcash-style proof of work over a block's contents."""

from __future__ import annotations

from typing import Protocol

from minichain.hashing import sha3_hex

__all__ = ["DEFAULT_TARGET_BITS", "MAX_NONCE", "ProofOfWork"]

DEFAULT_TARGET_BITS = 24
MAX_NONCE = 2**63 - 1

_I64_MASK = (1 << 64) - 1


class _Minable(Protocol):
    prev_block_hash: str
    data: str
    timestamp: int
    nonce: int


def _hex64(value: int) -> str:
    """Format a 64-bit signed integer as ``0x``-prefixed hex, negatives in two's complement."""
    return f"0x{value & _I64_MASK:x}"


class ProofOfWork:
    """Searches for, and checks, a nonce whose hash falls below a target."""

    def __init__(self, block: _Minable, target_bits: int = DEFAULT_TARGET_BITS) -> None:
        if not 0 <= target_bits <= 256:
            raise ValueError(f"target_bits must be between 0 and 256, got {target_bits}")
        self.block = block
        self.target_bits = target_bits
        self.target = 1 << (256 - target_bits)

    def prepare_data(self, nonce: int) -> bytes:
        """Return the bytes hashed for the given nonce."""
        return b"".join(
            (
                self.block.prev_block_hash.encode(),
                self.block.data.encode(),
                _hex64(self.block.timestamp).encode(),
                _hex64(self.target_bits).encode(),
                _hex64(nonce).encode(),
            )
        )

    def _hash_for(self, nonce: int) -> str:
        return sha3_hex(self.prepare_data(nonce))

    def run(self) -> tuple[int, str]:
        """Mine the block, returning the first nonce that meets the target and its hash."""
        digest = ""
        nonce = 0
        print(f"Mining the block containing {self.block.data}")
        while nonce < MAX_NONCE:
            digest = self._hash_for(nonce)
            print(f"\r{digest}", end="")
            if int(digest, 16) < self.target:
                break
            nonce += 1
        print("\n")
        return nonce, digest

    def validate(self) -> bool:
        """Check that the block's stored nonce meets the target."""
        return int(self._hash_for(self.block.nonce), 16) < self.target