"""Editing session: owns both partitions and applies engine results in order."""

import copy
import logging
from datetime import datetime
from typing import Dict, List, Optional

from engine.export import export_rows, ordered_rooms
from engine.reassignment_engine import apply_move, commit_move
from models.audit import MoveLogEntry
from models.errors import ReassignmentError, SessionClosedError
from models.move import MoveRequest, MoveResult
from models.occupant import Group
from models.partition import Partition, check_disjoint_room_ids
from models.room import Room

logger = logging.getLogger(__name__)


class SessionController:
    """Holds the partitions of one editing session.

    Every room change goes through the reassignment engine. The session ends
    with finalize() (export to the sink) or cancel() (discard edits).
    `sink` is any object with a ``save(rows)`` method.
    """

    def __init__(self, partitions: Dict[Group, Partition], sink=None):
        check_disjoint_room_ids(partitions)
        self._seed = {g: copy.deepcopy(p) for g, p in partitions.items()}
        self._partitions: Dict[Group, Partition] = dict(partitions)
        self.sink = sink
        self.move_log: List[MoveLogEntry] = []
        self.status = "open"   # "open", "finalized", "cancelled"

    @property
    def is_open(self) -> bool:
        return self.status == "open"

    @property
    def accepted_moves(self) -> int:
        return sum(1 for e in self.move_log if e.accepted)

    def _ensure_open(self):
        if not self.is_open:
            raise SessionClosedError(f"Session is {self.status}; start a new one to keep editing.")

    def partition(self, group: Group) -> Partition:
        return self._partitions[group]

    @property
    def partitions(self) -> Dict[Group, Partition]:
        return dict(self._partitions)

    def rooms(self) -> List[Room]:
        return ordered_rooms(self._partitions)

    def _group_of(self, room_id: str) -> Optional[Group]:
        for group, partition in self._partitions.items():
            if room_id in partition:
                return group
        return None

    def request_move(self, request: MoveRequest) -> MoveResult:
        """Apply one move. Rejections leave every room untouched."""
        self._ensure_open()

        result = apply_move(self._partitions, request)
        if result.accepted:
            try:
                self._partitions = commit_move(self._partitions, result)
            except ReassignmentError as e:
                result = MoveResult.reject(e)

        self.move_log.append(MoveLogEntry(
            timestamp=datetime.now(),
            request=request,
            group=self._group_of(request.source_room_id),
            accepted=result.accepted,
            reason=result.reason,
            message=result.message,
        ))
        return result

    def finalize(self) -> List[Room]:
        """Close the session and hand the export rows to the sink."""
        self._ensure_open()
        rooms = self.rooms()
        if self.sink is not None:
            self.sink.save(export_rows(rooms))
        self.status = "finalized"
        logger.info("Session finalized: %d rooms, %d accepted moves", len(rooms), self.accepted_moves)
        return rooms

    def cancel(self) -> Dict[Group, Partition]:
        """Discard all edits and return the seed partitions for re-seeding."""
        self._ensure_open()
        self._partitions = {}
        self.status = "cancelled"
        logger.info("Session cancelled after %d accepted moves", self.accepted_moves)
        return {g: copy.deepcopy(p) for g, p in self._seed.items()}
