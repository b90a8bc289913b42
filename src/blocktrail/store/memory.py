"""In-memory transaction store guarded by a reader/writer lock."""

import logging
from collections.abc import Sequence

from blocktrail.domain.address import normalize_address
from blocktrail.domain.models.transaction import Transaction
from blocktrail.store.base import TransactionStore
from blocktrail.store.rwlock import ReadWriteLock

logger = logging.getLogger(__name__)


class MemoryTransactionStore(TransactionStore):
    """Process-lifetime store. Nothing is persisted; a restart starts from scratch.

    Subscribed addresses are exactly the keys of the history map, so a
    subscription and its (possibly empty) history are created together.
    """

    def __init__(self, start_height: int = 0) -> None:
        if start_height < 0:
            raise ValueError("start_height must be non-negative")
        self._lock = ReadWriteLock()
        self._height = start_height
        self._history: dict[str, list[Transaction]] = {}

    def current_height(self) -> int:
        with self._lock.read_locked():
            return self._height

    def subscribe(self, address: str) -> bool:
        key = normalize_address(address)
        with self._lock.write_locked():
            if key in self._history:
                return False
            self._history[key] = []
        logger.info("Subscribed address %s", key)
        return True

    def commit_block(self, height: int, txs: Sequence[Transaction]) -> int:
        appended = 0
        with self._lock.write_locked():
            for tx in txs:
                sender = normalize_address(tx.from_addr)
                recipient = normalize_address(tx.to_addr)
                if sender in self._history:
                    logger.debug("New outgoing transaction %s for %s", tx.hash, sender)
                    self._history[sender].append(tx)
                    appended += 1
                if recipient in self._history:
                    logger.debug("New incoming transaction %s for %s", tx.hash, recipient)
                    self._history[recipient].append(tx)
                    appended += 1
            self._height = height
        return appended

    def transactions(self, address: str) -> list[Transaction]:
        key = normalize_address(address)
        with self._lock.read_locked():
            return list(self._history.get(key, ()))

    def is_subscribed(self, address: str) -> bool:
        key = normalize_address(address)
        with self._lock.read_locked():
            return key in self._history

    def subscriptions(self) -> list[str]:
        with self._lock.read_locked():
            return sorted(self._history)
