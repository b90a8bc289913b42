from typing import Annotated

from fastapi import APIRouter, Depends

from blocktrail.api.deps import get_query_service
from blocktrail.api.schemas.subscriptions import SubscribeResponse, SubscriptionList
from blocktrail.domain.address import normalize_address
from blocktrail.services.query_service import QueryService

router = APIRouter(prefix="/api/subscriptions", tags=["subscriptions"])

QueryDep = Annotated[QueryService, Depends(get_query_service)]


@router.post("/{address}", response_model=SubscribeResponse)
async def subscribe(address: str, service: QueryDep) -> SubscribeResponse:
    """Track an address from the next committed block on. success=false if already tracked."""
    success = service.subscribe(address)
    return SubscribeResponse(address=normalize_address(address), success=success)


@router.get("", response_model=SubscriptionList)
async def list_subscriptions(service: QueryDep) -> SubscriptionList:
    addresses = service.subscriptions()
    return SubscriptionList(addresses=addresses, total=len(addresses))
