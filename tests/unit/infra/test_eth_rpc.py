"""Tests for EthRPCClient — block and head decoding over the JSON-RPC transport."""

from unittest.mock import AsyncMock

import pytest

from blocktrail.exceptions import TransientFetchError
from blocktrail.infra.blockchain.evm.rpc_client import EthRPCClient


@pytest.fixture()
def transport():
    return AsyncMock()


@pytest.fixture()
def rpc(transport):
    return EthRPCClient(transport=transport, max_attempts=1)


def _block(*txs):
    return {"number": "0x6", "hash": "0xblock", "transactions": list(txs)}


def _tx(tx_hash: str, from_addr: str = "0xAAA", to_addr: str | None = "0xBBB", value: str = "0x0"):
    return {"hash": tx_hash, "from": from_addr, "to": to_addr, "value": value, "gas": "0x5208", "nonce": "0x1"}


class TestLatestHeight:
    async def test_parses_hex(self, rpc, transport):
        transport.call.return_value = "0x10d4f"

        assert await rpc.latest_height() == 68943
        transport.call.assert_awaited_once_with("eth_blockNumber", [])

    async def test_invalid_result_is_transient(self, rpc, transport):
        transport.call.return_value = None

        with pytest.raises(TransientFetchError):
            await rpc.latest_height()


class TestBlockTransactions:
    async def test_returns_transactions_in_order(self, rpc, transport):
        transport.call.return_value = _block(_tx("0x1", value="0xde0b6b3a7640000"), _tx("0x2", to_addr=None))

        txs = await rpc.block_transactions(6)

        assert [tx.hash for tx in txs] == ["0x1", "0x2"]
        assert txs[0].value == 10**18
        assert txs[0].extra["gas"] == "0x5208"
        assert txs[1].to_addr is None
        transport.call.assert_awaited_once_with("eth_getBlockByNumber", ["0x6", True])

    async def test_empty_block(self, rpc, transport):
        transport.call.return_value = _block()

        assert await rpc.block_transactions(6) == []

    async def test_null_block_is_transient(self, rpc, transport):
        transport.call.return_value = None

        with pytest.raises(TransientFetchError, match="Block 6 not available"):
            await rpc.block_transactions(6)

    async def test_malformed_transaction_is_transient(self, rpc, transport):
        transport.call.return_value = _block({"from": "0xaaa"})

        with pytest.raises(TransientFetchError, match="Malformed transaction"):
            await rpc.block_transactions(6)

    async def test_bad_value_is_transient(self, rpc, transport):
        transport.call.return_value = _block(_tx("0x1", value="0xnothex"))

        with pytest.raises(TransientFetchError):
            await rpc.block_transactions(6)


class TestRetries:
    async def test_retries_before_surfacing(self, transport):
        """A transient failure is retried inside the client up to max_attempts."""
        rpc = EthRPCClient(transport=transport, max_attempts=2)
        transport.call.side_effect = [TransientFetchError("timed out"), "0x2a"]

        assert await rpc.latest_height() == 42
        assert transport.call.await_count == 2

    async def test_gives_up_with_original_error(self, transport):
        rpc = EthRPCClient(transport=transport, max_attempts=2)
        transport.call.side_effect = TransientFetchError("RPC error (eth_blockNumber): down")

        with pytest.raises(TransientFetchError, match="down"):
            await rpc.latest_height()
        assert transport.call.await_count == 2

    def test_rejects_zero_attempts(self, transport):
        with pytest.raises(ValueError):
            EthRPCClient(transport=transport, max_attempts=0)
