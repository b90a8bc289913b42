from blocktrail.store.base import TransactionStore
from blocktrail.store.memory import MemoryTransactionStore
from blocktrail.store.rwlock import ReadWriteLock

__all__ = [
    "MemoryTransactionStore",
    "ReadWriteLock",
    "TransactionStore",
]
