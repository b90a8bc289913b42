"""Chain transaction record as seen by the store and the sync engine."""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from pydantic import BaseModel, Field, field_validator

# Fields lifted out of the RPC object; everything else goes to `extra` untouched
_TYPED_FIELDS = ("hash", "from", "to", "value", "blockNumber", "transactionIndex")


def parse_quantity(raw: Any) -> int:
    """Decode a JSON-RPC quantity: hex string ("0x1a"), decimal string, or int."""
    if isinstance(raw, bool):
        raise TypeError(f"Invalid quantity: {raw!r}")
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        raw = raw.strip()
        if raw.lower().startswith("0x"):
            return int(raw, 16)
        return int(raw)
    raise TypeError(f"Invalid quantity: {raw!r}")


def _optional_quantity(raw: Any) -> int | None:
    return None if raw is None else parse_quantity(raw)


class Transaction(BaseModel):
    """One chain transaction.

    Only hash, sender, recipient and value are interpreted. Gas, nonce, signature
    components and the rest of the node's payload ride along in `extra`.
    """

    hash: str
    from_addr: str
    to_addr: str | None = None  # None for contract creation
    value: int = 0  # wei
    block_number: int | None = None
    transaction_index: int | None = None
    extra: Mapping[str, Any] = Field(default_factory=dict, validate_default=True)

    model_config = {"frozen": True}

    @field_validator("extra")
    @classmethod
    def freeze_extra(cls, v: Mapping[str, Any]) -> Mapping[str, Any]:
        # One instance is shared by every matching address history
        return MappingProxyType(dict(v))

    @classmethod
    def from_rpc(cls, raw: dict[str, Any]) -> "Transaction":
        """Build from an eth_getBlockByNumber transaction object.

        Raises KeyError/TypeError/ValueError on malformed input.
        """
        if not isinstance(raw, dict):
            raise TypeError(f"Transaction object must be a dict, got {type(raw).__name__}")
        return cls(
            hash=raw["hash"],
            from_addr=raw["from"],
            to_addr=raw.get("to"),
            value=parse_quantity(raw.get("value") or 0),
            block_number=_optional_quantity(raw.get("blockNumber")),
            transaction_index=_optional_quantity(raw.get("transactionIndex")),
            extra={k: v for k, v in raw.items() if k not in _TYPED_FIELDS},
        )

    def to_rpc(self) -> dict[str, Any]:
        """Wire-shaped dict using the node's field names and hex quantities."""
        data: dict[str, Any] = dict(self.extra)
        data["hash"] = self.hash
        data["from"] = self.from_addr
        data["to"] = self.to_addr
        data["value"] = hex(self.value)
        if self.block_number is not None:
            data["blockNumber"] = hex(self.block_number)
        if self.transaction_index is not None:
            data["transactionIndex"] = hex(self.transaction_index)
        return data
