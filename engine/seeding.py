"""Build the initial partitions from an external matching result."""

import logging
import math
from typing import Dict, Iterable, List, Mapping, Optional

from config.defaults import ROOM_CAPACITY, ROOM_ID_PREFIX
from models.occupant import Group, Occupant
from models.partition import Partition, check_disjoint_room_ids
from models.room import Room

logger = logging.getLogger(__name__)


def room_id_for(group: Group, number: int) -> str:
    return f"{ROOM_ID_PREFIX[group.value]}{number}"


def initial_room_score(occupants: List[Occupant]) -> float:
    """Floored mean of the seated occupants' scores; 0 for an empty room."""
    if not occupants:
        return 0
    return math.floor(sum(o.score for o in occupants) / len(occupants))


def empty_partitions() -> Dict[Group, Partition]:
    return {g: Partition(group=g) for g in Group}


def seed_partitions(
    occupants: Iterable[Occupant],
    room_counts: Mapping[Group, int],
) -> Dict[Group, Partition]:
    """Fill each group's rooms two at a time, in the order occupants are given.

    Pairing is the matching computation's job; this only materializes the
    rooms it produced. Raises ValueError when a group has more occupants than
    its rooms can hold.
    """
    by_group: Dict[Group, List[Occupant]] = {g: [] for g in Group}
    for occupant in occupants:
        by_group[occupant.group].append(occupant)

    partitions = {}
    for group in Group:
        members = by_group[group]
        count = room_counts.get(group, 0)
        if count < 0:
            raise ValueError(f"Room count for group {group.value} cannot be negative.")
        if len(members) > count * ROOM_CAPACITY:
            raise ValueError(
                f"{len(members)} {group.label.lower()} occupants do not fit in {count} rooms "
                f"of {ROOM_CAPACITY}."
            )

        rooms = []
        for i in range(count):
            seated = members[i * ROOM_CAPACITY:(i + 1) * ROOM_CAPACITY]
            slots: List[Optional[Occupant]] = seated + [None] * (ROOM_CAPACITY - len(seated))
            rooms.append(Room(
                room_id=room_id_for(group, i + 1),
                group=group,
                score=initial_room_score(seated),
                slots=slots,
            ))
        partitions[group] = Partition.from_rooms(group, rooms)
        logger.debug("Seeded %d %s rooms with %d occupants", count, group.label.lower(), len(members))

    return partitions


def _group_from_room_id(room_id: str) -> Optional[Group]:
    for value, prefix in ROOM_ID_PREFIX.items():
        if room_id.startswith(prefix) or room_id.startswith(value + "-"):
            return Group(value)
    return None


def partitions_from_matching(
    rows: Iterable[dict],
    roster: Mapping[str, Occupant],
) -> Dict[Group, Partition]:
    """Build partitions from matching result rows.

    Each row looks like {"roomId", "score", "memberA", "memberB"}; a blank
    member leaves that slot empty. The room's group comes from its members,
    or from its id prefix when it has none.
    """
    rooms_by_group: Dict[Group, List[Room]] = {g: [] for g in Group}

    for row in rows:
        room_id = str(row["roomId"]).strip()
        slots: List[Optional[Occupant]] = []
        for key in ("memberA", "memberB"):
            member_id = row.get(key)
            if member_id is None or str(member_id).strip() == "":
                slots.append(None)
                continue
            member_id = str(member_id).strip()
            if member_id not in roster:
                raise ValueError(f"Room '{room_id}': student '{member_id}' is not in the roster.")
            slots.append(roster[member_id])

        groups = {o.group for o in slots if o is not None}
        if len(groups) > 1:
            raise ValueError(f"Room '{room_id}' mixes groups: {sorted(g.value for g in groups)}")
        group = groups.pop() if groups else _group_from_room_id(room_id)
        if group is None:
            raise ValueError(f"Cannot tell which group empty room '{room_id}' belongs to.")

        rooms_by_group[group].append(Room(
            room_id=room_id,
            group=group,
            score=float(row.get("score") or 0),
            slots=slots,
        ))

    partitions = {g: Partition.from_rooms(g, rooms_by_group[g]) for g in Group}
    check_disjoint_room_ids(partitions)
    return partitions
