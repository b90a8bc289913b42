"""Sync engine — advances the store one block at a time behind the chain head.

States:
    AWAIT_HEAD     fetch the head height; idle if nothing new, else CATCH_UP
    CATCH_UP       fetch and commit current+1 until the target is reached
    ERROR_BACKOFF  wait a fixed delay after any fetch failure, then AWAIT_HEAD

The store height is the only progress marker. A failed block is retried from the
same height, so no block is skipped or committed twice.
"""

import asyncio
import logging
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Any, TypeVar

from blocktrail.domain.enums import SyncState
from blocktrail.exceptions import TransientFetchError
from blocktrail.infra.blockchain.base import ChainSource
from blocktrail.store.base import TransactionStore

logger = logging.getLogger(__name__)

T = TypeVar("T")


@dataclass(frozen=True)
class SyncPolicy:
    backoff_delay: float = 1.0
    poll_interval: float = 1.0
    fetch_timeout: float = 30.0

    def __post_init__(self) -> None:
        for name in ("backoff_delay", "poll_interval", "fetch_timeout"):
            if getattr(self, name) <= 0:
                raise ValueError(f"{name} must be positive")


@dataclass(frozen=True)
class SyncStatus:
    state: SyncState
    current_height: int
    target_height: int | None
    consecutive_errors: int
    last_error: str | None
    blocks_committed: int


class SyncEngine:
    def __init__(
        self,
        store: TransactionStore,
        chain: ChainSource,
        policy: SyncPolicy | None = None,
    ) -> None:
        self._store = store
        self._chain = chain
        self._policy = policy or SyncPolicy()
        self._state = SyncState.AWAIT_HEAD
        self._target: int | None = None
        self._consecutive_errors = 0
        self._last_error: str | None = None
        self._blocks_committed = 0
        self._stop_event = asyncio.Event()

    @property
    def state(self) -> SyncState:
        return self._state

    @property
    def policy(self) -> SyncPolicy:
        return self._policy

    def status(self) -> SyncStatus:
        return SyncStatus(
            state=self._state,
            current_height=self._store.current_height(),
            target_height=self._target,
            consecutive_errors=self._consecutive_errors,
            last_error=self._last_error,
            blocks_committed=self._blocks_committed,
        )

    def stop(self) -> None:
        """Request shutdown; interrupts any idle or backoff wait."""
        self._stop_event.set()

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    async def run(self) -> None:
        logger.info(
            "Sync engine started at height %d (poll=%.1fs, backoff=%.1fs)",
            self._store.current_height(),
            self._policy.poll_interval,
            self._policy.backoff_delay,
        )
        while not self._stop_event.is_set():
            await self.step()
        logger.info("Sync engine stopped at height %d", self._store.current_height())

    async def step(self) -> SyncState:
        """Run the current state's work once and return the next state."""
        if self._state is SyncState.AWAIT_HEAD:
            self._state = await self._await_head()
        elif self._state is SyncState.CATCH_UP:
            self._state = await self._catch_up()
        else:
            self._state = await self._error_backoff()
        return self._state

    async def _await_head(self) -> SyncState:
        try:
            head = await self._fetch("head height", self._chain.latest_height)
        except TransientFetchError as e:
            self._record_error(e)
            return SyncState.ERROR_BACKOFF

        self._target = head
        current = self._store.current_height()
        if head <= current:
            self._consecutive_errors = 0
            await self._wait(self._policy.poll_interval)
            return SyncState.AWAIT_HEAD

        logger.debug("Chain head %d, local height %d", head, current)
        return SyncState.CATCH_UP

    async def _catch_up(self) -> SyncState:
        assert self._target is not None
        while not self._stop_event.is_set():
            height = self._store.current_height()
            if height >= self._target:
                return SyncState.AWAIT_HEAD

            next_height = height + 1
            try:
                txs = await self._fetch(f"block {next_height}", self._chain.block_transactions, next_height)
            except TransientFetchError as e:
                self._record_error(e)
                return SyncState.ERROR_BACKOFF

            self._store.commit_block(next_height, txs)
            self._blocks_committed += 1
            self._consecutive_errors = 0
            logger.info("Parsed block %d, transactions count %d", next_height, len(txs))
        return SyncState.AWAIT_HEAD

    async def _error_backoff(self) -> SyncState:
        await self._wait(self._policy.backoff_delay)
        return SyncState.AWAIT_HEAD

    async def _fetch(self, what: str, fn: Callable[..., Awaitable[T]], *args: Any) -> T:
        """Await a chain source call under the fetch timeout. Every failure is transient."""
        try:
            return await asyncio.wait_for(fn(*args), timeout=self._policy.fetch_timeout)
        except TransientFetchError:
            raise
        except asyncio.TimeoutError as e:
            raise TransientFetchError(
                f"Timed out fetching {what} after {self._policy.fetch_timeout}s"
            ) from e
        except Exception as e:
            raise TransientFetchError(f"Failed fetching {what}: {e}") from e

    def _record_error(self, error: TransientFetchError) -> None:
        self._consecutive_errors += 1
        self._last_error = str(error)
        logger.warning(
            "Last RPC call error %s, will back off %.1fs (consecutive errors: %d)",
            error,
            self._policy.backoff_delay,
            self._consecutive_errors,
        )

    async def _wait(self, delay: float) -> None:
        try:
            await asyncio.wait_for(self._stop_event.wait(), timeout=delay)
        except asyncio.TimeoutError:
            pass
