import pytest

from blocktrail.domain.models.transaction import Transaction
from blocktrail.store.memory import MemoryTransactionStore


def _make_tx(tx_hash: str, from_addr: str, to_addr: str | None, value: int = 0, **extra) -> Transaction:
    return Transaction(hash=tx_hash, from_addr=from_addr, to_addr=to_addr, value=value, extra=extra)


@pytest.fixture()
def make_tx():
    return _make_tx


@pytest.fixture()
def store() -> MemoryTransactionStore:
    return MemoryTransactionStore()
