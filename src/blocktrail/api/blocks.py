from typing import Annotated

from fastapi import APIRouter, Depends

from blocktrail.api.deps import get_query_service
from blocktrail.api.schemas.blocks import CurrentBlockResponse
from blocktrail.services.query_service import QueryService

router = APIRouter(prefix="/api/blocks", tags=["blocks"])

QueryDep = Annotated[QueryService, Depends(get_query_service)]


@router.get("/current", response_model=CurrentBlockResponse)
async def get_current_block(service: QueryDep) -> CurrentBlockResponse:
    return CurrentBlockResponse(current_block=service.current_height())
