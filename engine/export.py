"""Export view of a finished assignment."""

from typing import Dict, Iterable, List

import pandas as pd

from config.defaults import EXPORT_COLUMNS, ROOM_CAPACITY
from models.occupant import Group
from models.partition import Partition
from models.room import Room


def ordered_rooms(partitions: Dict[Group, Partition]) -> List[Room]:
    """Rooms of every group, groups in enum order, rooms in seed order."""
    return [room for group in Group if group in partitions for room in partitions[group].room_list()]


def export_rows(rooms: Iterable[Room]) -> List[dict]:
    return [
        {
            "room_id": room.room_id,
            "group": room.group.value,
            "occupant_ids": room.occupant_ids(),
            "occupant_names": [o.name for o in room.occupants()],
            "score": room.score,
        }
        for room in rooms
    ]


def export_dataframe(rows: List[dict]) -> pd.DataFrame:
    """One row per room, slot members spread over Member A / Member B."""
    records = []
    for row in rows:
        ids = list(row["occupant_ids"]) + [""] * (ROOM_CAPACITY - len(row["occupant_ids"]))
        records.append({
            "Room ID": row["room_id"],
            "Group": row["group"],
            "Member A": ids[0],
            "Member B": ids[1],
            "Score": row["score"],
        })
    return pd.DataFrame(records, columns=EXPORT_COLUMNS)


def assignment_summary(partitions: Dict[Group, Partition]) -> List[dict]:
    """Per-group counts for the dashboard cards."""
    summary = []
    for group in Group:
        partition = partitions.get(group)
        if partition is None:
            continue
        rooms = partition.room_list()
        scores = [r.score for r in rooms]
        summary.append({
            "group": group.value,
            "label": group.label,
            "rooms": len(rooms),
            "occupants": len(partition.occupant_ids()),
            "full_rooms": sum(1 for r in rooms if r.is_full()),
            "empty_rooms": sum(1 for r in rooms if r.is_empty()),
            "avg_score": sum(scores) / len(scores) if scores else 0.0,
        })
    return summary
