from blocktrail.infra.blockchain.base import ChainSource

__all__ = [
    "ChainSource",
]
