"""Move rejection taxonomy."""

from enum import Enum


class RejectionReason(str, Enum):
    CROSS_GROUP = "CrossGroupMoveRejected"
    EMPTY_SOURCE = "EmptySourceRejected"
    ROOM_NOT_FOUND = "RoomNotFound"
    INDEX_OUT_OF_RANGE = "IndexOutOfRange"
    CONSERVATION_VIOLATION = "ConservationViolation"


class ReassignmentError(ValueError):
    """Base class for conditions that reject a single move.

    Always recoverable: the engine turns these into a rejected MoveResult and
    the session stays alive.
    """

    reason: RejectionReason = None


class RoomNotFound(ReassignmentError):
    reason = RejectionReason.ROOM_NOT_FOUND

    def __init__(self, room_id: str):
        self.room_id = room_id
        super().__init__(f"Room '{room_id}' does not exist.")


class IndexOutOfRange(ReassignmentError):
    reason = RejectionReason.INDEX_OUT_OF_RANGE

    def __init__(self, room_id: str, index: int):
        self.room_id = room_id
        self.index = index
        super().__init__(f"Slot {index} is out of range for room '{room_id}'.")


class CrossGroupMoveRejected(ReassignmentError):
    reason = RejectionReason.CROSS_GROUP

    def __init__(self, source_room_id: str, dest_room_id: str):
        self.source_room_id = source_room_id
        self.dest_room_id = dest_room_id
        super().__init__(
            f"Cannot move between '{source_room_id}' and '{dest_room_id}': rooms belong to different groups."
        )


class EmptySourceRejected(ReassignmentError):
    reason = RejectionReason.EMPTY_SOURCE

    def __init__(self, room_id: str, index: int):
        self.room_id = room_id
        self.index = index
        super().__init__(f"Slot {index} of room '{room_id}' is empty; nothing to move.")


class ConservationViolation(ReassignmentError):
    reason = RejectionReason.CONSERVATION_VIOLATION

    def __init__(self, before: list, after: list):
        self.before = before
        self.after = after
        super().__init__(f"Move would change the placed occupants: {sorted(before)} -> {sorted(after)}")


class PartitionInvariantError(ValueError):
    """Raised when a Partition is built from inconsistent rooms."""


class SessionClosedError(RuntimeError):
    """Raised when a finalized or cancelled session receives a request."""
