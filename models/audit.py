from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from models.errors import RejectionReason
from models.move import MoveRequest
from models.occupant import Group


@dataclass
class MoveLogEntry:
    timestamp: datetime
    request: MoveRequest
    group: Optional[Group]   # None when the source room could not be resolved
    accepted: bool
    reason: Optional[RejectionReason] = None
    message: str = ""
