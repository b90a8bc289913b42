from typing import Annotated

from fastapi import APIRouter, Depends

from blocktrail.api.deps import get_query_service
from blocktrail.api.schemas.transactions import AddressTransactions
from blocktrail.domain.address import normalize_address
from blocktrail.services.query_service import QueryService

router = APIRouter(prefix="/api/transactions", tags=["transactions"])

QueryDep = Annotated[QueryService, Depends(get_query_service)]


@router.get("/{address}", response_model=AddressTransactions)
async def get_transactions(address: str, service: QueryDep) -> AddressTransactions:
    txs = service.transactions(address)
    return AddressTransactions(
        address=normalize_address(address),
        transactions=[tx.to_rpc() for tx in txs],
        total=len(txs),
    )
