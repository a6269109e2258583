"""Tests for rooms and partitions."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import pytest

from models.errors import IndexOutOfRange, PartitionInvariantError, RoomNotFound
from models.occupant import Group, Occupant
from models.partition import Partition
from models.room import Room


def make_occupant(oid="A", group=Group.MALE, score=50):
    return Occupant(oid, f"Student {oid}", group, score)


def make_room(room_id="M-Room-1", slots=None, group=Group.MALE, score=70):
    return Room(room_id, group, score, slots if slots is not None else [None, None])


class TestOccupant:
    def test_equality_by_id_only(self):
        a = Occupant("1", "Kim", Group.MALE, 10)
        b = Occupant("1", "Lee", Group.MALE, 90)
        assert a == b
        assert hash(a) == hash(b)
        assert a != Occupant("2", "Kim", Group.MALE, 10)

    def test_group_parse_aliases(self):
        assert Group.parse("M") == Group.MALE
        assert Group.parse("female") == Group.FEMALE
        assert Group.parse(" 여 ") == Group.FEMALE
        with pytest.raises(ValueError):
            Group.parse("X")


class TestRoom:
    def test_requires_two_slots(self):
        with pytest.raises(ValueError):
            Room("M-Room-1", Group.MALE, 0, [None])
        with pytest.raises(ValueError):
            Room("M-Room-1", Group.MALE, 0, [None, None, None])

    def test_default_room_is_empty(self):
        room = Room("M-Room-1", Group.MALE)
        assert room.slots == [None, None]
        assert room.is_empty()
        assert not room.is_full()

    def test_slot_at_out_of_range(self):
        room = make_room(slots=[make_occupant("A"), None])
        assert room.slot_at(0).occupant_id == "A"
        assert room.slot_at(1) is None
        with pytest.raises(IndexOutOfRange):
            room.slot_at(2)
        with pytest.raises(IndexOutOfRange):
            room.slot_at(-1)

    def test_set_slot_and_full(self):
        room = make_room(slots=[make_occupant("A"), None])
        room.set_slot(1, make_occupant("B"))
        assert room.is_full()
        assert room.occupant_ids() == ["A", "B"]
        with pytest.raises(IndexOutOfRange):
            room.set_slot(5, None)

    def test_snapshot_shares_occupants_not_slots(self):
        a = make_occupant("A")
        room = make_room(slots=[a, None])
        copy = room.snapshot()
        copy.set_slot(0, None)
        assert room.slot_at(0) is a
        assert room.snapshot().slot_at(0) is a
        assert copy.score == room.score


class TestPartition:
    def test_find_room_and_group_of(self):
        partition = Partition.from_rooms(Group.MALE, [make_room("M-Room-1"), make_room("M-Room-2")])
        assert partition.find_room("M-Room-2").room_id == "M-Room-2"
        assert partition.group_of("M-Room-1") == Group.MALE
        with pytest.raises(RoomNotFound):
            partition.find_room("M-Room-9")
        with pytest.raises(RoomNotFound):
            partition.group_of("F-Room-1")

    def test_rejects_duplicate_occupant(self):
        a = make_occupant("A")
        with pytest.raises(PartitionInvariantError):
            Partition.from_rooms(Group.MALE, [
                make_room("M-Room-1", [a, None]),
                make_room("M-Room-2", [None, a]),
            ])

    def test_rejects_foreign_group_room(self):
        with pytest.raises(PartitionInvariantError):
            Partition.from_rooms(Group.MALE, [make_room("F-Room-1", group=Group.FEMALE)])

    def test_rejects_foreign_group_occupant(self):
        with pytest.raises(PartitionInvariantError):
            Partition.from_rooms(Group.MALE, [make_room("M-Room-1", [make_occupant("X", Group.FEMALE), None])])

    def test_with_rooms_replaces_entries(self):
        original = make_room("M-Room-1", [make_occupant("A"), None])
        partition = Partition.from_rooms(Group.MALE, [original, make_room("M-Room-2")])
        updated = partition.with_rooms([make_room("M-Room-1", [None, make_occupant("A")])])

        assert updated.find_room("M-Room-1").occupant_ids() == ["A"]
        assert updated.find_room("M-Room-1").slot_at(1).occupant_id == "A"
        assert partition.find_room("M-Room-1") is original
        assert [r.room_id for r in updated.room_list()] == ["M-Room-1", "M-Room-2"]

    def test_from_rooms_rejects_repeated_id(self):
        with pytest.raises(PartitionInvariantError):
            Partition.from_rooms(Group.MALE, [
                make_room("M-Room-1", [make_occupant("A"), None]),
                make_room("M-Room-1", [make_occupant("B"), None]),
            ])

    def test_with_rooms_unknown_room(self):
        partition = Partition.from_rooms(Group.MALE, [make_room("M-Room-1")])
        with pytest.raises(RoomNotFound):
            partition.with_rooms([make_room("M-Room-7")])


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
