from dependency_injector import containers, providers

from blocktrail.config import Settings
from blocktrail.infra.blockchain.evm.rpc_client import EthRPCClient
from blocktrail.infra.http.rpc_transport import RPCTransport
from blocktrail.services.query_service import QueryService
from blocktrail.store.memory import MemoryTransactionStore
from blocktrail.sync.engine import SyncEngine, SyncPolicy


class Container(containers.DeclarativeContainer):
    wiring_config = containers.WiringConfiguration(modules=["blocktrail.api.deps"])

    settings = providers.Singleton(Settings)

    store = providers.Singleton(
        MemoryTransactionStore,
        start_height=settings.provided.start_height,
    )

    rpc_transport = providers.Singleton(
        RPCTransport,
        url=settings.provided.rpc_url,
        rate_per_second=settings.provided.rpc_rate_per_second,
        timeout=settings.provided.rpc_timeout,
    )

    chain_source = providers.Singleton(
        EthRPCClient,
        transport=rpc_transport,
        max_attempts=settings.provided.rpc_max_attempts,
    )

    sync_policy = providers.Singleton(
        SyncPolicy,
        backoff_delay=settings.provided.backoff_delay,
        poll_interval=settings.provided.poll_interval,
        fetch_timeout=settings.provided.fetch_timeout,
    )

    sync_engine = providers.Singleton(
        SyncEngine,
        store=store,
        chain=chain_source,
        policy=sync_policy,
    )

    query_service = providers.Singleton(QueryService, store=store)
