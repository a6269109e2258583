from dataclasses import dataclass, field
from typing import List, Optional

from config.defaults import ROOM_CAPACITY
from models.errors import IndexOutOfRange
from models.occupant import Group, Occupant


@dataclass
class Room:
    room_id: str
    group: Group
    score: float = 0.0   # fixed at creation, never recomputed after a move
    slots: List[Optional[Occupant]] = field(default_factory=lambda: [None] * ROOM_CAPACITY)

    def __post_init__(self):
        if len(self.slots) != ROOM_CAPACITY:
            raise ValueError(
                f"Room '{self.room_id}' must have exactly {ROOM_CAPACITY} slots, got {len(self.slots)}."
            )

    def _check_index(self, index: int):
        if not isinstance(index, int) or not 0 <= index < ROOM_CAPACITY:
            raise IndexOutOfRange(self.room_id, index)

    def slot_at(self, index: int) -> Optional[Occupant]:
        self._check_index(index)
        return self.slots[index]

    def set_slot(self, index: int, occupant: Optional[Occupant]):
        """Replace a slot's content. Only the reassignment engine calls this."""
        self._check_index(index)
        self.slots[index] = occupant

    def is_full(self) -> bool:
        return all(s is not None for s in self.slots)

    def is_empty(self) -> bool:
        return all(s is None for s in self.slots)

    def occupants(self) -> List[Occupant]:
        return [s for s in self.slots if s is not None]

    def occupant_ids(self) -> List[str]:
        return [s.occupant_id for s in self.slots if s is not None]

    def snapshot(self) -> "Room":
        """Copy with its own slot list; occupants are shared, not copied."""
        return Room(
            room_id=self.room_id,
            group=self.group,
            score=self.score,
            slots=list(self.slots),
        )
