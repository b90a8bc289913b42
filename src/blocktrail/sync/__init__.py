from blocktrail.sync.engine import SyncEngine, SyncPolicy, SyncStatus

__all__ = [
    "SyncEngine",
    "SyncPolicy",
    "SyncStatus",
]
