"""A block chain persisted in an SQLite key-value table."""

from __future__ import annotations

import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from os import PathLike
from pathlib import Path
from types import TracebackType

from minichain.block import Block
from minichain.proofofwork import DEFAULT_TARGET_BITS

__all__ = ["LAST_HASH_KEY", "ChainError", "PersistentBlockChain"]

LAST_HASH_KEY = b"last_hash"

_SCHEMA = "CREATE TABLE IF NOT EXISTS kv (key BLOB PRIMARY KEY, value BLOB NOT NULL)"


class ChainError(Exception):
    """Raised when the stored chain cannot be read or written."""


class PersistentBlockChain:
    """Blocks stored on disk, keyed by hash, with the newest hash as the tip.

    Iterating walks from the tip back to the genesis block.
    """

    def __init__(
        self, path: str | PathLike[str], target_bits: int = DEFAULT_TARGET_BITS
    ) -> None:
        self.path = Path(path)
        self.target_bits = target_bits
        self._closed = False
        try:
            self._conn = sqlite3.connect(self.path, isolation_level=None)
            self._conn.execute(_SCHEMA)
        except sqlite3.Error as exc:
            raise ChainError(f"cannot open {self.path}: {exc}") from exc
        try:
            self.tip = self._load_or_create_tip()
        except BaseException:
            self.close()
            raise

    def _connection(self) -> sqlite3.Connection:
        if self._closed:
            raise ChainError("blockchain is closed")
        return self._conn

    @contextmanager
    def _transaction(self) -> Iterator[sqlite3.Connection]:
        conn = self._connection()
        try:
            conn.execute("BEGIN IMMEDIATE")
        except sqlite3.Error as exc:
            raise ChainError(f"cannot start a transaction: {exc}") from exc
        try:
            yield conn
        except BaseException as exc:
            conn.execute("ROLLBACK")
            if isinstance(exc, sqlite3.Error):
                raise ChainError(f"transaction failed: {exc}") from exc
            raise
        else:
            try:
                conn.execute("COMMIT")
            except sqlite3.Error as exc:
                raise ChainError(f"cannot commit: {exc}") from exc

    @staticmethod
    def _get(conn: sqlite3.Connection, key: bytes) -> bytes | None:
        row = conn.execute("SELECT value FROM kv WHERE key = ?", (key,)).fetchone()
        return None if row is None else bytes(row[0])

    def _read(self, key: bytes) -> bytes | None:
        try:
            return self._get(self._connection(), key)
        except sqlite3.Error as exc:
            raise ChainError(f"cannot read from {self.path}: {exc}") from exc

    @staticmethod
    def _put_block(conn: sqlite3.Connection, block: Block) -> None:
        key = block.hash.encode()
        conn.execute(
            "INSERT OR REPLACE INTO kv (key, value) VALUES (?, ?)",
            (key, block.to_bytes()),
        )
        conn.execute(
            "INSERT OR REPLACE INTO kv (key, value) VALUES (?, ?)",
            (LAST_HASH_KEY, key),
        )

    @staticmethod
    def _decode_hash(raw: bytes) -> str:
        try:
            return raw.decode()
        except UnicodeDecodeError as exc:
            raise ChainError(f"stored hash is not valid text: {exc}") from exc

    def _load_or_create_tip(self) -> str:
        with self._transaction() as conn:
            raw = self._get(conn, LAST_HASH_KEY)
            if raw is not None:
                return self._decode_hash(raw)
            print("No existing blockchain found. Creating a new one...")
            genesis = Block.genesis(self.target_bits)
            self._put_block(conn, genesis)
            return genesis.hash

    def add_block(self, data: str) -> Block:
        """Mine a block on top of the stored last hash, store it and return it."""
        raw = self._read(LAST_HASH_KEY)
        if raw is None:
            raise ChainError("Last hash not found")
        last_hash = self._decode_hash(raw)
        block = Block.create(data, last_hash, self.target_bits)
        with self._transaction() as conn:
            self._put_block(conn, block)
        self.tip = block.hash
        return block

    def __iter__(self) -> Iterator[Block]:
        current = self.tip
        while True:
            raw = self._read(current.encode())
            if raw is None:
                return
            try:
                block = Block.from_bytes(raw)
            except ValueError as exc:
                raise ChainError(f"corrupt block {current}: {exc}") from exc
            yield block
            current = block.prev_block_hash

    def close(self) -> None:
        """Close the underlying database; further use raises ChainError."""
        if not self._closed:
            self._closed = True
            self._conn.close()

    def __enter__(self) -> PersistentBlockChain:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()