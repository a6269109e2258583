from collections import Counter
from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Mapping

from models.errors import PartitionInvariantError, RoomNotFound
from models.occupant import Group
from models.room import Room


@dataclass
class Partition:
    """All rooms of one group, keyed by room id in seed order.

    Construction checks group purity and that no occupant id is placed twice.
    """
    group: Group
    rooms: Dict[str, Room] = field(default_factory=dict)

    def __post_init__(self):
        for room_id, room in self.rooms.items():
            if room_id != room.room_id:
                raise PartitionInvariantError(f"Room keyed as '{room_id}' has id '{room.room_id}'.")
            if room.group != self.group:
                raise PartitionInvariantError(
                    f"Room '{room_id}' belongs to group {room.group.value}, not {self.group.value}."
                )
            for occupant in room.occupants():
                if occupant.group != self.group:
                    raise PartitionInvariantError(
                        f"Occupant '{occupant.occupant_id}' in room '{room_id}' is not in group {self.group.value}."
                    )

        dupes = [oid for oid, n in Counter(self.occupant_ids()).items() if n > 1]
        if dupes:
            raise PartitionInvariantError(f"Occupants placed more than once: {sorted(dupes)}")

    @classmethod
    def from_rooms(cls, group: Group, rooms: Iterable[Room]) -> "Partition":
        by_id: Dict[str, Room] = {}
        for room in rooms:
            if room.room_id in by_id:
                raise PartitionInvariantError(f"Room id '{room.room_id}' appears more than once.")
            by_id[room.room_id] = room
        return cls(group=group, rooms=by_id)

    def find_room(self, room_id: str) -> Room:
        room = self.rooms.get(room_id)
        if room is None:
            raise RoomNotFound(room_id)
        return room

    def group_of(self, room_id: str) -> Group:
        return self.find_room(room_id).group

    def __contains__(self, room_id: str) -> bool:
        return room_id in self.rooms

    def room_list(self) -> List[Room]:
        return list(self.rooms.values())

    def occupant_ids(self) -> List[str]:
        return [oid for room in self.rooms.values() for oid in room.occupant_ids()]

    def with_rooms(self, updated: Iterable[Room]) -> "Partition":
        """New partition with the given rooms replacing entries of the same id."""
        rooms = dict(self.rooms)
        for room in updated:
            if room.room_id not in rooms:
                raise RoomNotFound(room.room_id)
            rooms[room.room_id] = room
        return Partition(group=self.group, rooms=rooms)


def check_disjoint_room_ids(partitions: Mapping[Group, Partition]):
    """Room ids must be unique across groups so a move can find its room."""
    seen: Dict[str, Group] = {}
    for group, partition in partitions.items():
        for room_id in partition.rooms:
            if room_id in seen:
                raise PartitionInvariantError(
                    f"Room id '{room_id}' is used by both group {seen[room_id].value} and group {group.value}."
                )
            seen[room_id] = group
