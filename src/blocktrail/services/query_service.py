"""Read and subscribe access to the store for the serving layer."""

from blocktrail.domain.models.transaction import Transaction
from blocktrail.store.base import TransactionStore


class QueryService:
    """Pass-through over the store. Never touches the network."""

    def __init__(self, store: TransactionStore) -> None:
        self._store = store

    def current_height(self) -> int:
        """Last parsed block."""
        return self._store.current_height()

    def subscribe(self, address: str) -> bool:
        """Add an address to the observer. False if already subscribed."""
        return self._store.subscribe(address)

    def transactions(self, address: str) -> list[Transaction]:
        """Inbound and outbound transactions for an address."""
        return self._store.transactions(address)

    def subscriptions(self) -> list[str]:
        return self._store.subscriptions()
