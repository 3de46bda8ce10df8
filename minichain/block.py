"""Blocks: header hashing, mining and binary serialisation."""

from __future__ import annotations

import dataclasses
import time
from dataclasses import dataclass

import msgpack

from minichain.hashing import sha3_hex
from minichain.proofofwork import DEFAULT_TARGET_BITS, ProofOfWork

__all__ = ["GENESIS_DATA", "Block", "header_hash", "unmined_block"]

GENESIS_DATA = "Genesis Block"

_FIELD_TYPES = (int, str, str, str, int)


def header_hash(prev_block_hash: str, data: str, timestamp: int) -> str:
    """Hash the previous hash, data and little-endian 64-bit timestamp."""
    headers = b"".join(
        (
            prev_block_hash.encode(),
            data.encode(),
            timestamp.to_bytes(8, "little", signed=True),
        )
    )
    return sha3_hex(headers)


@dataclass(frozen=True)
class Block:
    """A single block in the chain."""

    timestamp: int
    data: str
    prev_block_hash: str
    hash: str
    nonce: int = 0

    @classmethod
    def create(
        cls, data: str, prev_block_hash: str, target_bits: int = DEFAULT_TARGET_BITS
    ) -> Block:
        """Build a block stamped with the current time and mine it."""
        draft = cls(
            timestamp=time.time_ns(),
            data=data,
            prev_block_hash=prev_block_hash,
            hash="",
            nonce=0,
        )
        nonce, digest = ProofOfWork(draft, target_bits).run()
        return dataclasses.replace(draft, hash=digest, nonce=nonce)

    @classmethod
    def genesis(cls, target_bits: int = DEFAULT_TARGET_BITS) -> Block:
        """Build and mine the first block of a chain."""
        return cls.create(GENESIS_DATA, "", target_bits)

    def to_bytes(self) -> bytes:
        """Serialise the block as a MessagePack array of its fields."""
        return msgpack.packb(
            [self.timestamp, self.data, self.prev_block_hash, self.hash, self.nonce],
            use_bin_type=True,
        )

    @classmethod
    def from_bytes(cls, payload: bytes) -> Block:
        """Deserialise a block written by :meth:`to_bytes`."""
        try:
            fields = msgpack.unpackb(payload, raw=False)
        except (msgpack.UnpackException, ValueError, TypeError) as exc:
            raise ValueError(f"cannot decode block: {exc}") from exc
        if not isinstance(fields, list) or len(fields) != len(_FIELD_TYPES):
            raise ValueError("cannot decode block: expected an array of 5 fields")
        for value, expected in zip(fields, _FIELD_TYPES):
            if isinstance(value, bool) or not isinstance(value, expected):
                raise ValueError(f"cannot decode block: bad field value {value!r}")
        return cls(*fields)


def unmined_block(data: str, prev_block_hash: str) -> Block:
    """Build a block hashed from its header alone, without proof of work."""
    timestamp = time.time_ns()
    return Block(
        timestamp=timestamp,
        data=data,
        prev_block_hash=prev_block_hash,
        hash=header_hash(prev_block_hash, data, timestamp),
    )