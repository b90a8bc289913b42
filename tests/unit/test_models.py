"""Tests for Transaction decoding and address normalization."""

import pytest
from pydantic import ValidationError

from blocktrail.domain.address import normalize_address
from blocktrail.domain.models.transaction import Transaction, parse_quantity


def _rpc_tx(**overrides) -> dict:
    raw = {
        "blockHash": "0xblockhash",
        "blockNumber": "0x98967f",
        "from": "0x23A50Cc8fa9B1B57732010AA24F592Cfe8aaB47A",
        "gas": "0x5208",
        "gasPrice": "0x4a817c800",
        "hash": "0xabc123",
        "input": "0x",
        "nonce": "0x7",
        "to": "0x00000000219ab540356cBB839Cbe05303d7705Fa",
        "transactionIndex": "0x2",
        "value": "0xde0b6b3a7640000",
        "type": "0x2",
        "accessList": [],
        "chainId": "0x1",
        "v": "0x1",
        "r": "0xr",
        "s": "0xs",
        "yParity": "0x1",
    }
    raw.update(overrides)
    return raw


class TestParseQuantity:
    def test_hex(self):
        assert parse_quantity("0x1a") == 26
        assert parse_quantity("0X0") == 0

    def test_decimal_string_and_int(self):
        assert parse_quantity("1000") == 1000
        assert parse_quantity(42) == 42

    def test_rejects_garbage(self):
        with pytest.raises(ValueError):
            parse_quantity("0xzz")
        with pytest.raises(TypeError):
            parse_quantity(None)
        with pytest.raises(TypeError):
            parse_quantity(True)


class TestNormalizeAddress:
    def test_lowercases(self):
        assert normalize_address("0xABCdef") == "0xabcdef"

    def test_whitespace_is_significant(self):
        assert normalize_address(" 0xAbC ") == " 0xabc "
        assert normalize_address(" 0xabc ") != normalize_address("0xabc")

    def test_none_and_empty(self):
        assert normalize_address(None) == ""
        assert normalize_address("") == ""


class TestTransactionFromRpc:
    def test_typed_fields(self):
        tx = Transaction.from_rpc(_rpc_tx())
        assert tx.hash == "0xabc123"
        assert tx.from_addr == "0x23A50Cc8fa9B1B57732010AA24F592Cfe8aaB47A"
        assert tx.to_addr == "0x00000000219ab540356cBB839Cbe05303d7705Fa"
        assert tx.value == 10**18
        assert tx.block_number == 9999999
        assert tx.transaction_index == 2

    def test_auxiliary_fields_carried_opaquely(self):
        tx = Transaction.from_rpc(_rpc_tx())
        assert tx.extra["gas"] == "0x5208"
        assert tx.extra["nonce"] == "0x7"
        assert tx.extra["accessList"] == []
        assert "from" not in tx.extra
        assert "value" not in tx.extra

    def test_contract_creation_has_no_recipient(self):
        tx = Transaction.from_rpc(_rpc_tx(to=None))
        assert tx.to_addr is None

    def test_missing_hash_raises(self):
        raw = _rpc_tx()
        del raw["hash"]
        with pytest.raises(KeyError):
            Transaction.from_rpc(raw)

    def test_non_dict_raises(self):
        with pytest.raises(TypeError):
            Transaction.from_rpc("0xabc123")  # type: ignore[arg-type]

    def test_to_rpc_restores_wire_names(self):
        raw = _rpc_tx()
        data = Transaction.from_rpc(raw).to_rpc()
        assert data["from"] == raw["from"]
        assert data["to"] == raw["to"]
        assert data["value"] == raw["value"]
        assert data["blockNumber"] == raw["blockNumber"]
        assert data["transactionIndex"] == raw["transactionIndex"]
        assert data["gasPrice"] == raw["gasPrice"]

    def test_immutable(self):
        tx = Transaction.from_rpc(_rpc_tx())
        with pytest.raises(ValidationError):
            tx.hash = "0xother"

    def test_extra_is_read_only(self):
        tx = Transaction.from_rpc(_rpc_tx())
        with pytest.raises(TypeError):
            tx.extra["gas"] = "0x0"
        assert tx.extra["gas"] == "0x5208"

    def test_extra_detached_from_input(self):
        payload = {"gas": "0x5208"}
        tx = Transaction(hash="0x1", from_addr="0xaaa", extra=payload)
        payload["gas"] = "0x0"
        assert tx.extra["gas"] == "0x5208"
