"""Room reassignment engine: resolve one occupant move into new room snapshots.

The engine is a pure function of (partitions, move request). It never mutates
the rooms it is given: every change is made on snapshots, and a rejected move
returns no rooms at all.
"""

import logging
from collections import Counter
from typing import Dict, Iterable, List, Mapping, Tuple

from config.defaults import ROOM_CAPACITY
from models.errors import (
    ConservationViolation, CrossGroupMoveRejected, EmptySourceRejected,
    IndexOutOfRange, ReassignmentError, RoomNotFound,
)
from models.move import MoveRequest, MoveResult
from models.occupant import Group
from models.partition import Partition
from models.room import Room

logger = logging.getLogger(__name__)


def locate_room(partitions: Mapping[Group, Partition], room_id: str) -> Room:
    """Find a room in whichever partition holds it."""
    for partition in partitions.values():
        if room_id in partition:
            return partition.find_room(room_id)
    raise RoomNotFound(room_id)


def clamp_target_index(room: Room, index: int) -> int:
    """Map a drop position onto one of the room's two physical slots."""
    if not isinstance(index, int) or index < 0:
        raise IndexOutOfRange(room.room_id, index)
    return min(index, ROOM_CAPACITY - 1)


def _reorder(room: Room, source_index: int, target_index: int) -> Room:
    """Same-room move: list removal followed by insertion."""
    slots = list(room.slots)
    moved = slots.pop(source_index)
    slots.insert(target_index, moved)

    updated = room.snapshot()
    for i, occupant in enumerate(slots):
        updated.set_slot(i, occupant)
    return updated


def _relocate(
    source: Room,
    source_index: int,
    dest: Room,
    target_index: int,
) -> Tuple[Room, Room]:
    """Cross-room move: place into an empty slot if one is available, else swap."""
    new_source = source.snapshot()
    new_dest = dest.snapshot()
    dragged = new_source.slot_at(source_index)
    displaced = new_dest.slot_at(target_index)
    alternate_index = ROOM_CAPACITY - 1 - target_index

    if displaced is None:
        new_dest.set_slot(target_index, dragged)
        new_source.set_slot(source_index, None)
    elif new_dest.slot_at(alternate_index) is None:
        # Leave the occupant already under the drop point where they are
        new_dest.set_slot(alternate_index, dragged)
        new_source.set_slot(source_index, None)
    else:
        # Always the slot under the drop point, never a "better" one
        new_dest.set_slot(target_index, dragged)
        new_source.set_slot(source_index, displaced)

    return new_source, new_dest


def _check_conservation(before: Iterable[Room], after: Iterable[Room]):
    before_ids = [oid for r in before for oid in r.occupant_ids()]
    after_ids = [oid for r in after for oid in r.occupant_ids()]
    if Counter(before_ids) != Counter(after_ids):
        raise ConservationViolation(before_ids, after_ids)


def resolve_move(partitions: Mapping[Group, Partition], request: MoveRequest) -> List[Room]:
    """Compute the updated rooms for a move, raising ReassignmentError on rejection."""
    source = locate_room(partitions, request.source_room_id)
    dest = locate_room(partitions, request.dest_room_id)

    # Step 1: never mix groups
    if source.group != dest.group:
        raise CrossGroupMoveRejected(source.room_id, dest.room_id)

    # Step 2: there must be someone to move
    if source.slot_at(request.source_slot_index) is None:
        raise EmptySourceRejected(source.room_id, request.source_slot_index)

    target_index = clamp_target_index(dest, request.dest_slot_index)

    # Step 3: reorder within a room
    if request.is_reorder:
        updated = [_reorder(source, request.source_slot_index, target_index)]
        _check_conservation([source], updated)
        return updated

    # Step 4: relocate between rooms
    updated = list(_relocate(source, request.source_slot_index, dest, target_index))
    _check_conservation([source, dest], updated)
    return updated


def apply_move(partitions: Mapping[Group, Partition], request: MoveRequest) -> MoveResult:
    """Resolve a move request into an accepted or rejected MoveResult.

    Room scores are carried over unchanged in both the reorder and the
    relocation case.
    """
    try:
        rooms = resolve_move(partitions, request)
    except ReassignmentError as e:
        logger.info("Move %s rejected: %s", request, e)
        return MoveResult.reject(e)

    logger.debug(
        "Move accepted: %s",
        ", ".join(f"{r.room_id}={[o.occupant_id if o else None for o in r.slots]}" for r in rooms),
    )
    return MoveResult.accept(rooms)


def commit_move(
    partitions: Mapping[Group, Partition],
    result: MoveResult,
) -> Dict[Group, Partition]:
    """Return partitions with an accepted result's rooms swapped in.

    Rejected results leave every partition as it was.
    """
    committed = dict(partitions)
    if not result.accepted:
        return committed

    group = result.rooms[0].group
    committed[group] = partitions[group].with_rooms(result.rooms)
    return committed


def apply_moves(
    partitions: Mapping[Group, Partition],
    requests: Iterable[MoveRequest],
) -> Tuple[Dict[Group, Partition], List[MoveResult]]:
    """Apply requests strictly in order; returns the final partitions and each result."""
    current = dict(partitions)
    results = []
    for request in requests:
        result = apply_move(current, request)
        current = commit_move(current, result)
        results.append(result)
    return current, results
