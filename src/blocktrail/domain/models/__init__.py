from blocktrail.domain.models.transaction import Transaction, parse_quantity

__all__ = [
    "Transaction",
    "parse_quantity",
]
