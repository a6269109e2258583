from models.occupant import Group, Occupant
from models.room import Room
from models.partition import Partition
from models.move import MoveRequest, MoveResult
from models.audit import MoveLogEntry
from models.errors import (
    ConservationViolation, CrossGroupMoveRejected, EmptySourceRejected, IndexOutOfRange,
    PartitionInvariantError, ReassignmentError, RejectionReason, RoomNotFound, SessionClosedError,
)
