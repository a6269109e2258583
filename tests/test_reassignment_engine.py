"""Tests for the room reassignment engine."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

import copy
import random
from collections import Counter

import pytest

from engine.reassignment_engine import apply_move, apply_moves, commit_move, locate_room
from models.errors import RejectionReason, RoomNotFound
from models.move import MoveRequest
from models.occupant import Group, Occupant
from models.partition import Partition
from models.room import Room


def make_rooms(group, layout, score=70):
    """layout: {room_id: [id or None, id or None]}"""
    rooms = []
    for room_id, ids in layout.items():
        slots = [Occupant(i, f"Student {i}", group, 50) if i else None for i in ids]
        rooms.append(Room(room_id, group, score, slots))
    return rooms


def make_partitions(male=None, female=None):
    return {
        Group.MALE: Partition.from_rooms(Group.MALE, make_rooms(Group.MALE, male or {})),
        Group.FEMALE: Partition.from_rooms(Group.FEMALE, make_rooms(Group.FEMALE, female or {})),
    }


def layout(partitions, group=Group.MALE):
    return {
        r.room_id: [o.occupant_id if o else None for o in r.slots]
        for r in partitions[group].room_list()
    }


def move(partitions, src, src_idx, dst, dst_idx):
    result = apply_move(partitions, MoveRequest(src, src_idx, dst, dst_idx))
    return result, commit_move(partitions, result)


class TestCrossRoomMove:
    def test_swap_when_destination_full(self):
        parts = make_partitions(male={"R1": ["A", "B"], "R2": ["C", "D"]})
        result, after = move(parts, "R1", 0, "R2", 0)

        assert result.accepted
        assert layout(after) == {"R1": ["C", "B"], "R2": ["A", "D"]}

    def test_prefers_empty_alternate_slot_over_swap(self):
        parts = make_partitions(male={"R1": ["A", "B"], "R2": ["C", None]})
        result, after = move(parts, "R1", 0, "R2", 0)

        assert result.accepted
        assert layout(after) == {"R1": [None, "B"], "R2": ["C", "A"]}

    def test_direct_placement_into_empty_target(self):
        parts = make_partitions(male={"R1": ["A", "B"], "R2": [None, "C"]})
        _, after = move(parts, "R1", 1, "R2", 0)

        assert layout(after) == {"R1": ["A", None], "R2": ["B", "C"]}

    def test_into_empty_room(self):
        parts = make_partitions(male={"R1": ["A", "B"], "R2": [None, None]})
        _, after = move(parts, "R1", 0, "R2", 1)

        assert layout(after) == {"R1": [None, "B"], "R2": [None, "A"]}

    def test_destination_index_clamped(self):
        parts = make_partitions(male={"R1": ["A", "B"], "R2": ["C", "D"]})
        result, after = move(parts, "R1", 0, "R2", 5)

        assert result.accepted
        assert layout(after) == {"R1": ["D", "B"], "R2": ["C", "A"]}

    def test_scores_unchanged(self):
        parts = make_partitions(male={"R1": ["A", "B"], "R2": ["C", None]})
        parts[Group.MALE] = Partition.from_rooms(Group.MALE, [
            Room("R1", Group.MALE, 91, parts[Group.MALE].find_room("R1").slots),
            Room("R2", Group.MALE, 12, parts[Group.MALE].find_room("R2").slots),
        ])
        _, after = move(parts, "R1", 0, "R2", 0)

        assert after[Group.MALE].find_room("R1").score == 91
        assert after[Group.MALE].find_room("R2").score == 12

    def test_swap_symmetry(self):
        parts = make_partitions(male={"R1": ["X", "B"], "R2": ["Y", "D"]})
        _, once = move(parts, "R1", 0, "R2", 0)
        _, back = move(once, "R2", 0, "R1", 0)

        assert layout(once) == {"R1": ["Y", "B"], "R2": ["X", "D"]}
        assert layout(back) == layout(parts)

    def test_input_partitions_not_mutated(self):
        parts = make_partitions(male={"R1": ["A", "B"], "R2": ["C", "D"]})
        before = copy.deepcopy(parts)
        result = apply_move(parts, MoveRequest("R1", 0, "R2", 0))

        assert result.accepted
        assert parts == before
        assert len(result.rooms) == 2

    def test_occupant_instances_are_moved_not_copied(self):
        parts = make_partitions(male={"R1": ["A", "B"], "R2": ["C", None]})
        a = parts[Group.MALE].find_room("R1").slot_at(0)
        _, after = move(parts, "R1", 0, "R2", 0)

        assert after[Group.MALE].find_room("R2").slot_at(1) is a


class TestSameRoomReorder:
    def test_reorder_swaps_positions(self):
        parts = make_partitions(male={"R1": ["A", "B"]})
        result, after = move(parts, "R1", 0, "R1", 1)

        assert result.accepted
        assert len(result.rooms) == 1
        assert layout(after) == {"R1": ["B", "A"]}
        assert after[Group.MALE].find_room("R1").score == 70

    def test_reorder_backwards(self):
        parts = make_partitions(male={"R1": ["A", "B"]})
        _, after = move(parts, "R1", 1, "R1", 0)
        assert layout(after) == {"R1": ["B", "A"]}

    def test_reorder_onto_itself_is_noop(self):
        parts = make_partitions(male={"R1": ["A", "B"]})
        result, after = move(parts, "R1", 0, "R1", 0)
        assert result.accepted
        assert layout(after) == {"R1": ["A", "B"]}

    def test_reorder_with_empty_slot(self):
        parts = make_partitions(male={"R1": ["A", None]})
        _, after = move(parts, "R1", 0, "R1", 1)
        assert layout(after) == {"R1": [None, "A"]}


class TestRejections:
    def test_cross_group_rejected(self):
        parts = make_partitions(male={"M1": ["A", "B"]}, female={"F1": ["C", "D"]})
        before = copy.deepcopy(parts)
        result, after = move(parts, "M1", 0, "F1", 0)

        assert not result.accepted
        assert result.reason == RejectionReason.CROSS_GROUP
        assert result.rooms == ()
        assert after == before

    def test_empty_source_rejected(self):
        parts = make_partitions(male={"R1": ["A", None], "R2": ["C", "D"]})
        result, after = move(parts, "R1", 1, "R2", 0)

        assert result.reason == RejectionReason.EMPTY_SOURCE
        assert layout(after) == layout(parts)

    def test_unknown_room_rejected(self):
        parts = make_partitions(male={"R1": ["A", "B"]})
        result, _ = move(parts, "R1", 0, "R9", 0)
        assert result.reason == RejectionReason.ROOM_NOT_FOUND

    def test_source_index_out_of_range(self):
        parts = make_partitions(male={"R1": ["A", "B"], "R2": ["C", None]})
        result, _ = move(parts, "R1", 2, "R2", 0)
        assert result.reason == RejectionReason.INDEX_OUT_OF_RANGE

    def test_negative_destination_index(self):
        parts = make_partitions(male={"R1": ["A", "B"], "R2": ["C", None]})
        result, _ = move(parts, "R1", 0, "R2", -1)
        assert result.reason == RejectionReason.INDEX_OUT_OF_RANGE

    def test_group_guard_runs_before_empty_check(self):
        parts = make_partitions(male={"M1": [None, None]}, female={"F1": ["C", "D"]})
        result, _ = move(parts, "M1", 0, "F1", 0)
        assert result.reason == RejectionReason.CROSS_GROUP

    def test_repeated_rejection_has_no_effect(self):
        parts = make_partitions(male={"M1": ["A", "B"]}, female={"F1": ["C", None]})
        before = copy.deepcopy(parts)
        after, results = apply_moves(parts, [MoveRequest("M1", 0, "F1", 1)] * 5)

        assert all(not r.accepted for r in results)
        assert after == before

    def test_locate_room_unknown(self):
        with pytest.raises(RoomNotFound):
            locate_room(make_partitions(), "R1")


class TestMoveSequences:
    def test_moves_applied_in_order(self):
        parts = make_partitions(male={"R1": ["A", "B"], "R2": ["C", None], "R3": [None, None]})
        after, results = apply_moves(parts, [
            MoveRequest("R1", 0, "R3", 0),   # A -> R3
            MoveRequest("R2", 0, "R1", 0),   # C -> R1 slot 0
            MoveRequest("R3", 0, "R1", 1),   # A onto B with R1 full: swap
        ])

        assert [r.accepted for r in results] == [True, True, True]
        assert layout(after) == {"R1": ["C", "A"], "R2": [None, None], "R3": ["B", None]}

    def test_random_moves_preserve_invariants(self):
        rng = random.Random(7)
        parts = make_partitions(
            male={f"M{i}": [f"m{2 * i}", f"m{2 * i + 1}" if i % 2 else None] for i in range(5)},
            female={f"F{i}": [f"f{2 * i}", f"f{2 * i + 1}"] for i in range(4)},
        )
        room_ids = [r.room_id for p in parts.values() for r in p.room_list()] + ["nope"]
        initial = Counter(oid for p in parts.values() for oid in p.occupant_ids())

        requests = [
            MoveRequest(rng.choice(room_ids), rng.randint(-1, 2), rng.choice(room_ids), rng.randint(-1, 3))
            for _ in range(300)
        ]
        after, results = apply_moves(parts, requests)

        assert any(r.accepted for r in results)
        assert any(not r.accepted for r in results)
        assert Counter(oid for p in after.values() for oid in p.occupant_ids()) == initial
        for group, partition in after.items():
            for room in partition.room_list():
                assert len(room.slots) == 2
                assert room.group == group
                assert all(o.group == group for o in room.occupants())


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
