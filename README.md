# minichain

A small blockchain built around three ideas:

- **Blocks** linked by hash: every block records the hash of the one before it.
- **Proof of work**: a block's hash is the SHA3-256 digest of its previous
  hash, data, timestamp, difficulty and a nonce, and mining searches for the
  first nonce whose digest falls below a target of `2 ** (256 - target_bits)`.
- **Persistence**: the chain can be kept in an SQLite file, with each block
  stored under its hash and the hash of the newest block (the tip) stored
  under the key `last_hash`.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Command line

Two commands are installed.

### `minichain-demo`

Builds a chain in memory, adds the blocks "Send 1 BTC to Ivan" and
"Send 2 more BTC to Ivan" on top of the genesis block, and prints each block's
previous hash, data and hash, followed by whether its proof of work validates:

```
minichain-demo
minichain-demo --target-bits 8
minichain-demo --no-pow
```

- `--target-bits N` sets the difficulty (0 to 256, default 24).
- `--no-pow` hashes each block from its header alone, without mining, and
  leaves out the proof-of-work line.

### `minichain`

Works on a chain stored on disk. When the database holds no chain yet, the
command prints "No existing blockchain found. Creating a new one..." and mines
a genesis block first.

```
minichain addblock --data "Send 1 BTC to Ivan"
minichain printchain
```

- `addblock -d/--data TEXT` mines a block holding `TEXT` on top of the tip and
  stores it.
- `printchain` walks the chain from the newest block back to the genesis
  block, printing each block's previous hash, data, hash and whether its
  proof of work validates.
- `--db PATH` (before the command) chooses the database file; the default is
  `blockchain_db` in the current directory.
- `--target-bits N` (before the command) sets the difficulty, 0 to 256,
  default 24. It is used both for mining and for checking blocks in
  `printchain`, so use the same value a chain was built with.

Database errors are reported on standard error and the command exits with
status 1.

Mining at the default difficulty of 24 target bits can take a while. While
mining, the current candidate hash is printed on one continuously rewritten
line.

## Library use

```python
from minichain.chain import BlockChain, format_block
from minichain.proofofwork import ProofOfWork

chain = BlockChain(target_bits=8)   # low difficulty for quick experiments
chain.add_block("Send 1 BTC to Ivan")

for block in chain:                 # oldest first
    print(format_block(block))
    print(ProofOfWork(block, 8).validate())
```

`BlockChain(target_bits=None)` builds blocks with `minichain.block.unmined_block`,
whose hash is `header_hash(prev_block_hash, data, timestamp)` and whose nonce
is 0, with no mining.

A chain kept on disk is used as a context manager:

```python
from minichain.store import PersistentBlockChain

with PersistentBlockChain("blockchain_db", target_bits=8) as chain:
    chain.add_block("Send 2 more BTC to Ivan")
    for block in chain:             # newest first
        print(block.data)
```

Problems reading or writing the database, and use after `close()`, raise
`minichain.store.ChainError`.

`Block` is a frozen dataclass with `timestamp` (nanoseconds since the epoch),
`data`, `prev_block_hash`, `hash` and `nonce`. `Block.create(data,
prev_block_hash, target_bits)` mines a new block and `Block.genesis(target_bits)`
mines one holding "Genesis Block". Blocks serialize to and from MessagePack
bytes with `Block.to_bytes()` and `Block.from_bytes()`; the latter raises
`ValueError` for malformed input. `minichain.hashing.sha3_hex` gives the hex
SHA3-256 digest used throughout.

## What it does not do

minichain is a single-user, local chain. It has no network layer, so there
are no peers, no block propagation and no consensus between nodes. Block data
is free text: there are no transactions, addresses, wallets or balances, and
nothing checks a whole chain's links beyond following them.