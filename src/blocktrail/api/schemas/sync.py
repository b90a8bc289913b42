from typing import Optional

from pydantic import BaseModel

from blocktrail.domain.enums import SyncState


class SyncStatusResponse(BaseModel):
    state: SyncState
    current_height: int
    target_height: Optional[int] = None
    consecutive_errors: int
    last_error: Optional[str] = None
    blocks_committed: int

    model_config = {"from_attributes": True}
