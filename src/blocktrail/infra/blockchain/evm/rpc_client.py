"""Ethereum JSON-RPC client — head height via eth_blockNumber, blocks via eth_getBlockByNumber."""

import logging
from typing import Any

from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

from blocktrail.domain.models.transaction import Transaction
from blocktrail.exceptions import TransientFetchError
from blocktrail.infra.blockchain.base import ChainSource
from blocktrail.infra.http.rpc_transport import RPCTransport

logger = logging.getLogger(__name__)


class EthRPCClient(ChainSource):
    """Minimal Ethereum JSON-RPC chain source."""

    def __init__(self, transport: RPCTransport, max_attempts: int = 3) -> None:
        if max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        self._transport = transport
        # Bound per instance so the attempt count follows configuration
        self._call = retry(
            retry=retry_if_exception_type(TransientFetchError),
            stop=stop_after_attempt(max_attempts),
            wait=wait_exponential(multiplier=0.5, min=0.5, max=5),
            reraise=True,
        )(self._call_once)

    async def _call_once(self, method: str, params: list) -> Any:
        return await self._transport.call(method, params)

    async def latest_height(self) -> int:
        result = await self._call("eth_blockNumber", [])
        try:
            return int(result, 16)
        except (TypeError, ValueError) as e:
            raise TransientFetchError(f"Invalid eth_blockNumber result: {result!r}") from e

    async def block_transactions(self, height: int) -> list[Transaction]:
        """Fetch a block with full transaction objects.

        A null result means the node does not have the block yet; that is retried
        like any other failure.
        """
        result: Any = await self._call("eth_getBlockByNumber", [hex(height), True])
        if result is None:
            raise TransientFetchError(f"Block {height} not available")
        if not isinstance(result, dict):
            raise TransientFetchError(f"Invalid block payload for {height}: {result!r}")

        raw_txs = result.get("transactions") or []
        try:
            return [Transaction.from_rpc(raw) for raw in raw_txs]
        except (KeyError, TypeError, ValueError) as e:
            raise TransientFetchError(f"Malformed transaction in block {height}: {e}") from e
