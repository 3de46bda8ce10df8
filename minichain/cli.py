"""Command line interface for the persistent block chain."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence

from minichain.chain import format_block
from minichain.proofofwork import DEFAULT_TARGET_BITS, ProofOfWork
from minichain.store import ChainError, PersistentBlockChain

__all__ = ["DEFAULT_DB_PATH", "build_parser", "main"]

DEFAULT_DB_PATH = "blockchain_db"


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with the addblock and printchain commands."""
    parser = argparse.ArgumentParser(
        prog="minichain", description="Store and inspect a block chain on disk."
    )
    parser.add_argument(
        "--db",
        default=DEFAULT_DB_PATH,
        help="path of the chain database (default: %(default)s)",
    )
    parser.add_argument(
        "--target-bits",
        type=int,
        default=DEFAULT_TARGET_BITS,
        help="difficulty of the proof of work (default: %(default)s)",
    )
    commands = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    add = commands.add_parser(
        "addblock",
        help="Adds a block to the blockchain (use `addblock --help` for more info)",
    )
    add.add_argument(
        "-d", "--data", required=True, help="adds a block to the blockchain"
    )

    commands.add_parser("printchain", help="Prints all the blocks of the blockchain")
    return parser


def _print_chain(chain: PersistentBlockChain) -> None:
    for block in chain:
        print(format_block(block))
        valid = ProofOfWork(block, chain.target_bits).validate()
        print(f"PoW: {str(valid).lower()}\n")


def main(argv: Sequence[str] | None = None) -> int:
    """Run one command against the chain database and return an exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if not 0 <= args.target_bits <= 256:
        parser.error("--target-bits must be between 0 and 256")

    try:
        with PersistentBlockChain(args.db, args.target_bits) as chain:
            if args.command == "addblock":
                chain.add_block(args.data)
            else:
                _print_chain(chain)
    except ChainError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())