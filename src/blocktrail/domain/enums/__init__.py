from blocktrail.domain.enums.status import SyncState

__all__ = [
    "SyncState",
]
