from dataclasses import dataclass, field
from enum import Enum

from config.defaults import GENDER_ALIASES, GROUP_LABELS


class Group(str, Enum):
    MALE = "M"
    FEMALE = "F"

    @property
    def label(self) -> str:
        return GROUP_LABELS[self.value]

    @classmethod
    def parse(cls, value) -> "Group":
        """Accepts 'M'/'F', 'Male'/'Female' and '남'/'여' in any case."""
        if isinstance(value, Group):
            return value
        key = str(value).strip().lower()
        if key not in GENDER_ALIASES:
            raise ValueError(f"Unknown gender value: {value!r}")
        return cls(GENDER_ALIASES[key])


@dataclass(frozen=True)
class Occupant:
    occupant_id: str
    name: str = field(compare=False)
    group: Group = field(compare=False)
    score: float = field(default=0.0, compare=False)   # survey compatibility score, 0-100
