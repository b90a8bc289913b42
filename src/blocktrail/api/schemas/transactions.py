from typing import Any

from pydantic import BaseModel


class AddressTransactions(BaseModel):
    address: str
    transactions: list[dict[str, Any]]  # Node wire format (from/to/value/hash/...)
    total: int
