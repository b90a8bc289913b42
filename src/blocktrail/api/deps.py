from dependency_injector.wiring import Provide, inject
from fastapi import Depends

from blocktrail.container import Container
from blocktrail.services.query_service import QueryService
from blocktrail.sync.engine import SyncEngine


@inject
def get_query_service(
    service: QueryService = Depends(Provide[Container.query_service]),
) -> QueryService:
    return service


@inject
def get_sync_engine(
    engine: SyncEngine = Depends(Provide[Container.sync_engine]),
) -> SyncEngine:
    return engine
