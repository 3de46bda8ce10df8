import pytest

from minichain.block import header_hash
from minichain.chain import BlockChain, format_block, main
from minichain.proofofwork import ProofOfWork


@pytest.fixture
def small_chain():
    chain = BlockChain(target_bits=4)
    chain.add_block("Send 1 BTC to Ivan")
    chain.add_block("Send 2 more BTC to Ivan")
    return chain


def test_new_chain_holds_genesis_only():
    chain = BlockChain(target_bits=4)
    assert len(chain) == 1
    genesis = chain.blocks[0]
    assert genesis.data == "Genesis Block"
    assert genesis.prev_block_hash == ""


def test_add_block_grows_and_links(small_chain):
    assert len(small_chain) == 3
    blocks = list(small_chain)
    assert [b.data for b in blocks] == [
        "Genesis Block",
        "Send 1 BTC to Ivan",
        "Send 2 more BTC to Ivan",
    ]
    for prev, current in zip(blocks, blocks[1:]):
        assert current.prev_block_hash == prev.hash


def test_add_block_returns_last_block(small_chain):
    block = small_chain.add_block("third")
    assert small_chain.blocks[-1] == block
    assert block.prev_block_hash == small_chain.blocks[-2].hash


def test_every_mined_block_validates(small_chain):
    assert all(ProofOfWork(block, 4).validate() for block in small_chain)


def test_chain_without_proof_of_work():
    chain = BlockChain(target_bits=None)
    block = chain.add_block("plain")
    assert block.nonce == 0
    assert block.hash == header_hash(block.prev_block_hash, "plain", block.timestamp)
    assert block.prev_block_hash == chain.blocks[0].hash


def test_format_block(small_chain):
    block = small_chain.blocks[1]
    assert format_block(block).splitlines() == [
        f"Prev. hash: {block.prev_block_hash}",
        "Data: Send 1 BTC to Ivan",
        f"Hash: {block.hash}",
    ]


def test_main_prints_chain_with_pow(capsys):
    assert main(["--target-bits", "4"]) == 0
    out = capsys.readouterr().out
    assert "Data: Genesis Block" in out
    assert "Data: Send 1 BTC to Ivan" in out
    assert "Data: Send 2 more BTC to Ivan" in out
    assert out.count("PoW: true") == 3


def test_main_without_pow(capsys):
    assert main(["--no-pow"]) == 0
    out = capsys.readouterr().out
    assert out.count("Data: ") == 3
    assert "PoW:" not in out


def test_main_rejects_bad_target_bits():
    with pytest.raises(SystemExit) as excinfo:
        main(["--target-bits", "300"])
    assert excinfo.value.code == 2