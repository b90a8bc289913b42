"""Abstract base for the address-indexed transaction store."""

from abc import ABC, abstractmethod
from collections.abc import Sequence

from blocktrail.domain.models.transaction import Transaction


class TransactionStore(ABC):
    """Per-address transaction history plus the last committed block height."""

    @abstractmethod
    def current_height(self) -> int:
        """Last block whose transactions have been committed."""

    @abstractmethod
    def subscribe(self, address: str) -> bool:
        """Start tracking an address. Returns False if it was already tracked."""

    @abstractmethod
    def commit_block(self, height: int, txs: Sequence[Transaction]) -> int:
        """Atomically record a block's matching transactions and advance the height.

        Returns the number of history entries appended.
        """

    @abstractmethod
    def transactions(self, address: str) -> list[Transaction]:
        """History for an address, oldest first. Empty if not subscribed."""

    @abstractmethod
    def is_subscribed(self, address: str) -> bool: ...

    @abstractmethod
    def subscriptions(self) -> list[str]: ...
