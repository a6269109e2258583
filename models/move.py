from dataclasses import dataclass
from typing import Optional, Tuple

from models.errors import ReassignmentError, RejectionReason
from models.room import Room


@dataclass(frozen=True)
class MoveRequest:
    source_room_id: str
    source_slot_index: int
    dest_room_id: str
    dest_slot_index: int

    @property
    def is_reorder(self) -> bool:
        return self.source_room_id == self.dest_room_id

    def reversed(self) -> "MoveRequest":
        return MoveRequest(
            source_room_id=self.dest_room_id,
            source_slot_index=self.dest_slot_index,
            dest_room_id=self.source_room_id,
            dest_slot_index=self.source_slot_index,
        )


@dataclass(frozen=True)
class MoveResult:
    accepted: bool
    rooms: Tuple[Room, ...] = ()                 # updated snapshots of the affected rooms
    reason: Optional[RejectionReason] = None
    message: str = ""

    @classmethod
    def accept(cls, rooms, message: str = "") -> "MoveResult":
        return cls(accepted=True, rooms=tuple(rooms), message=message)

    @classmethod
    def reject(cls, error: ReassignmentError) -> "MoveResult":
        return cls(accepted=False, reason=error.reason, message=str(error))
