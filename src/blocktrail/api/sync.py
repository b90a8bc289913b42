from typing import Annotated

from fastapi import APIRouter, Depends

from blocktrail.api.deps import get_sync_engine
from blocktrail.api.schemas.sync import SyncStatusResponse
from blocktrail.sync.engine import SyncEngine

router = APIRouter(prefix="/api/sync", tags=["sync"])

EngineDep = Annotated[SyncEngine, Depends(get_sync_engine)]


@router.get("/status", response_model=SyncStatusResponse)
async def get_sync_status(engine: EngineDep) -> SyncStatusResponse:
    return SyncStatusResponse.model_validate(engine.status())
