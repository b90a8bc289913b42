"""JSON-RPC 2.0 over HTTP POST, paced to a fixed request rate."""

import asyncio
import itertools
import logging
import time
from typing import Any

import httpx

from blocktrail.exceptions import TransientFetchError

logger = logging.getLogger(__name__)


class RPCTransport:
    """Sends JSON-RPC requests to one node and returns their `result`.

    Requests are spaced at least 1/rate_per_second apart. Transport failures,
    non-2xx responses, undecodable bodies and JSON-RPC `error` members all raise
    TransientFetchError.
    """

    def __init__(
        self,
        url: str,
        rate_per_second: float = 5.0,
        timeout: float = 30.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        if not url.strip():
            raise ValueError("url must be non-empty")
        if rate_per_second <= 0:
            raise ValueError("rate_per_second must be positive")
        self._url = url
        self._min_interval = 1.0 / rate_per_second
        self._next_slot = 0.0
        self._pace_lock = asyncio.Lock()
        self._ids = itertools.count(1)
        self._client = client or httpx.AsyncClient(timeout=timeout)

    @property
    def url(self) -> str:
        return self._url

    async def _pace(self) -> None:
        async with self._pace_lock:
            delay = self._next_slot - time.monotonic()
            if delay > 0:
                await asyncio.sleep(delay)
            self._next_slot = time.monotonic() + self._min_interval

    async def call(self, method: str, params: list) -> Any:
        request_id = next(self._ids)
        payload = {"jsonrpc": "2.0", "id": request_id, "method": method, "params": params}

        await self._pace()
        try:
            resp = await self._client.post(self._url, json=payload)
            resp.raise_for_status()
            data = resp.json()
        except httpx.HTTPError as e:
            raise TransientFetchError(f"RPC transport error ({method}): {e}") from e
        except ValueError as e:
            raise TransientFetchError(f"RPC returned undecodable body ({method}): {e}") from e

        if not isinstance(data, dict):
            raise TransientFetchError(f"RPC returned unexpected payload ({method}): {data!r}")

        error = data.get("error")
        if error:
            if isinstance(error, dict):
                msg = f"{error.get('message', error)} (code={error.get('code')})"
            else:
                msg = str(error)
            raise TransientFetchError(f"RPC error ({method}): {msg}")

        logger.debug("RPC %s id=%d ok", method, request_id)
        return data.get("result")

    async def close(self) -> None:
        await self._client.aclose()

    async def __aenter__(self) -> "RPCTransport":
        return self

    async def __aexit__(self, *args: object) -> None:
        await self.close()
