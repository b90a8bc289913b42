"""End-to-end sync against a real Ethereum node.

Usage:
    PYTHONPATH=src python scripts/e2e_sync.py [ADDRESS] [BLOCKS]

Starts the store a few blocks behind the chain head, subscribes one address,
syncs up to the head that was current at start, then prints the address history.
"""

import asyncio
import logging
import sys

logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)-5s %(name)s - %(message)s")
logger = logging.getLogger("e2e_sync")

logging.getLogger("httpx").setLevel(logging.WARNING)
logging.getLogger("httpcore").setLevel(logging.WARNING)

# Beacon deposit contract - receives transactions in most blocks
DEFAULT_ADDRESS = "0x00000000219ab540356cBB839Cbe05303d7705Fa"
DEFAULT_BLOCKS = 5


def separator(title: str) -> None:
    print(f"\n{'=' * 60}")
    print(f"  {title}")
    print(f"{'=' * 60}\n")


async def main(address: str, blocks: int) -> None:
    from blocktrail.config import settings
    from blocktrail.infra.blockchain.evm.rpc_client import EthRPCClient
    from blocktrail.infra.http.rpc_transport import RPCTransport
    from blocktrail.services.query_service import QueryService
    from blocktrail.store.memory import MemoryTransactionStore
    from blocktrail.sync.engine import SyncEngine, SyncPolicy

    separator("E2E Sync - blocktrail")
    print(f"RPC:      {settings.rpc_url}")
    print(f"Address:  {address}")
    print(f"Blocks:   {blocks}")

    async with RPCTransport(
        settings.rpc_url, rate_per_second=settings.rpc_rate_per_second, timeout=settings.rpc_timeout
    ) as transport:
        chain = EthRPCClient(transport, max_attempts=settings.rpc_max_attempts)
        head = await chain.latest_height()

        store = MemoryTransactionStore(start_height=max(head - blocks, 0))
        service = QueryService(store)
        service.subscribe(address)

        engine = SyncEngine(store, chain, SyncPolicy(
            backoff_delay=settings.backoff_delay,
            poll_interval=settings.poll_interval,
            fetch_timeout=settings.fetch_timeout,
        ))
        task = asyncio.create_task(engine.run())
        while service.current_height() < head:
            await asyncio.sleep(0.5)
        engine.stop()
        await task

    separator("Result")
    txs = service.transactions(address)
    print(f"Synced to block {service.current_height()}, {len(txs)} transactions for {address}")
    for tx in txs:
        print(f"  block={tx.block_number} hash={tx.hash} from={tx.from_addr} value={tx.value}")


if __name__ == "__main__":
    addr = sys.argv[1] if len(sys.argv) > 1 else DEFAULT_ADDRESS
    count = int(sys.argv[2]) if len(sys.argv) > 2 else DEFAULT_BLOCKS
    asyncio.run(main(addr, count))
