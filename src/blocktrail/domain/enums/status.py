from enum import Enum


class SyncState(str, Enum):
    """Sync engine state."""

    AWAIT_HEAD = "AWAIT_HEAD"
    CATCH_UP = "CATCH_UP"
    ERROR_BACKOFF = "ERROR_BACKOFF"
