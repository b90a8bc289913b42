"""Abstract chain source consumed by the sync engine."""

from abc import ABC, abstractmethod

from blocktrail.domain.models.transaction import Transaction


class ChainSource(ABC):
    """Read-only view of a chain node.

    Both calls are idempotent. Every failure, whatever its cause, is raised as
    TransientFetchError.
    """

    @abstractmethod
    async def latest_height(self) -> int:
        """Current chain head height."""

    @abstractmethod
    async def block_transactions(self, height: int) -> list[Transaction]:
        """Transactions of the block at `height`, in block order."""
