"""An in-memory block chain and a small demonstration command."""

from __future__ import annotations

import argparse
from collections.abc import Iterator, Sequence

from minichain.block import GENESIS_DATA, Block, unmined_block
from minichain.proofofwork import DEFAULT_TARGET_BITS, ProofOfWork

__all__ = ["BlockChain", "format_block", "main"]


class BlockChain:
    """Blocks held in memory, oldest first.

    With ``target_bits`` of ``None`` blocks are hashed from their header only,
    without proof of work.
    """

    def __init__(self, target_bits: int | None = DEFAULT_TARGET_BITS) -> None:
        self.target_bits = target_bits
        self.blocks: list[Block] = [self._make_block(GENESIS_DATA, "")]

    def _make_block(self, data: str, prev_block_hash: str) -> Block:
        if self.target_bits is None:
            return unmined_block(data, prev_block_hash)
        return Block.create(data, prev_block_hash, self.target_bits)

    def add_block(self, data: str) -> Block:
        """Append a new block linked to the current last block and return it."""
        block = self._make_block(data, self.blocks[-1].hash)
        self.blocks.append(block)
        return block

    def __iter__(self) -> Iterator[Block]:
        return iter(self.blocks)

    def __len__(self) -> int:
        return len(self.blocks)


def format_block(block: Block) -> str:
    """Render a block's previous hash, data and hash, one per line."""
    return "\n".join(
        (
            f"Prev. hash: {block.prev_block_hash}",
            f"Data: {block.data}",
            f"Hash: {block.hash}",
        )
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Build a small chain, add two blocks and print every block."""
    parser = argparse.ArgumentParser(
        prog="minichain-demo", description="Build a small block chain and print it."
    )
    parser.add_argument(
        "--target-bits",
        type=int,
        default=DEFAULT_TARGET_BITS,
        help="difficulty of the proof of work (default: %(default)s)",
    )
    parser.add_argument(
        "--no-pow", action="store_true", help="hash block headers without proof of work"
    )
    args = parser.parse_args(argv)
    if not 0 <= args.target_bits <= 256:
        parser.error("--target-bits must be between 0 and 256")

    target_bits = None if args.no_pow else args.target_bits
    chain = BlockChain(target_bits)
    chain.add_block("Send 1 BTC to Ivan")
    chain.add_block("Send 2 more BTC to Ivan")

    for block in chain:
        print(format_block(block))
        if target_bits is None:
            print()
        else:
            valid = ProofOfWork(block, target_bits).validate()
            print(f"PoW: {str(valid).lower()}\n")
    return 0