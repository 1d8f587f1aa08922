"""Tests for key movement across the hex grid."""
from __future__ import annotations

import pytest

from isomap.adjacency import MoveMap
from isomap.keyboard import GROUPS, KEYS_PER_GROUP, Direction, KeyPosition

ALL_POSITIONS = list(KeyPosition.iter_all())


class TestKeyPosition:
    """Test KeyPosition construction and parsing."""

    def test_iter_all_covers_every_key(self) -> None:

        assert len(ALL_POSITIONS) == GROUPS * KEYS_PER_GROUP == 280
        assert len(set(ALL_POSITIONS)) == 280

    def test_equality_is_structural(self) -> None:

        assert KeyPosition(2, 39) == KeyPosition(2, 39)
        assert hash(KeyPosition(2, 39)) == hash(KeyPosition(2, 39))

    @pytest.mark.parametrize("group,key", [(-1, 0), (5, 0), (0, 56), (0, -1)])
    def test_out_of_range_rejected(self, group: int, key: int) -> None:

        with pytest.raises(ValueError):
            KeyPosition(group, key)

    def test_parse(self) -> None:

        assert KeyPosition.parse("2:39") == KeyPosition(2, 39)
        assert str(KeyPosition(4, 0)) == "4:0"

    @pytest.mark.parametrize("text", ["239", "a:b", "7:0", "2:"])
    def test_parse_invalid(self, text: str) -> None:

        with pytest.raises(ValueError):
            KeyPosition.parse(text)


class TestDirection:
    """Test Direction opposites."""

    def test_opposite_pairs(self) -> None:

        assert Direction.UP_LEFT.opposite is Direction.DOWN_RIGHT
        assert Direction.UP_RIGHT.opposite is Direction.DOWN_LEFT
        assert Direction.RIGHT.opposite is Direction.LEFT

    def test_opposite_is_involution(self) -> None:

        for direction in Direction:
            assert direction.opposite.opposite is direction
            assert direction.opposite is not direction


class TestMoveMapConsistency:
    """Exhaustive checks over every key and every direction."""

    @pytest.mark.parametrize("direction", list(Direction), ids=lambda d: d.value)
    def test_round_trip(self, move_map: MoveMap, direction: Direction) -> None:

        for pos in ALL_POSITIONS:
            dest = move_map.step(pos, direction)
            if dest is None:
                continue
            back = move_map.step(dest, direction.opposite)
            assert back == pos, f"{pos} {direction.value} -> {dest} -> {back}"

    @pytest.mark.parametrize("direction", list(Direction), ids=lambda d: d.value)
    def test_injective(self, move_map: MoveMap, direction: Direction) -> None:

        seen: dict[KeyPosition, KeyPosition] = {}
        for pos in ALL_POSITIONS:
            dest = move_map.step(pos, direction)
            if dest is None:
                continue
            assert dest not in seen, f"{seen.get(dest)} and {pos} both move {direction.value} to {dest}"
            seen[dest] = pos

    @pytest.mark.parametrize("direction", list(Direction), ids=lambda d: d.value)
    def test_no_way_back_into_dead_end(self, move_map: MoveMap, direction: Direction) -> None:

        for pos in ALL_POSITIONS:
            if move_map.step(pos, direction) is not None:
                continue
            for other in ALL_POSITIONS:
                assert move_map.step(other, direction.opposite) != pos

    @pytest.mark.parametrize("first,second,combined", [
        (Direction.UP_LEFT, Direction.RIGHT, Direction.UP_RIGHT),
        (Direction.RIGHT, Direction.UP_LEFT, Direction.UP_RIGHT),
        (Direction.DOWN_LEFT, Direction.RIGHT, Direction.DOWN_RIGHT),
    ])
    def test_hex_lattice(self, move_map: MoveMap, first: Direction, second: Direction,
                         combined: Direction) -> None:

        checked = 0
        for pos in ALL_POSITIONS:
            mid = move_map.step(pos, first)
            if mid is None:
                continue
            two_step = move_map.step(mid, second)
            direct = move_map.step(pos, combined)
            if two_step is None or direct is None:
                continue
            assert two_step == direct, f"{pos}: {first.value}+{second.value} != {combined.value}"
            checked += 1
        assert checked > 100


class TestMoveMapEdges:
    """Test specific moves within groups, across seams and off the edges."""

    def test_within_group(self, move_map: MoveMap) -> None:

        assert move_map.step(KeyPosition(2, 39), Direction.RIGHT) == KeyPosition(2, 40)
        assert move_map.step(KeyPosition(2, 39), Direction.LEFT) == KeyPosition(2, 38)
        assert move_map.step(KeyPosition(2, 39), Direction.UP_LEFT) == KeyPosition(2, 33)
        assert move_map.step(KeyPosition(2, 39), Direction.DOWN_LEFT) == KeyPosition(2, 45)

    def test_across_seam(self, move_map: MoveMap) -> None:

        assert move_map.step(KeyPosition(2, 12), Direction.RIGHT) == KeyPosition(3, 0)
        assert move_map.step(KeyPosition(3, 0), Direction.LEFT) == KeyPosition(2, 12)
        assert move_map.step(KeyPosition(2, 18), Direction.UP_RIGHT) == KeyPosition(3, 0)
        assert move_map.step(KeyPosition(3, 0), Direction.DOWN_LEFT) == KeyPosition(2, 18)
        assert move_map.step(KeyPosition(2, 18), Direction.DOWN_RIGHT) == KeyPosition(3, 7)
        assert move_map.step(KeyPosition(3, 7), Direction.UP_LEFT) == KeyPosition(2, 18)

    def test_off_first_group(self, move_map: MoveMap) -> None:

        assert move_map.step(KeyPosition(0, 0), Direction.LEFT) is None
        assert move_map.step(KeyPosition(0, 7), Direction.UP_LEFT) is None
        assert move_map.step(KeyPosition(0, 0), Direction.DOWN_LEFT) is None

    def test_off_last_group(self, move_map: MoveMap) -> None:

        assert move_map.step(KeyPosition(4, 12), Direction.RIGHT) is None
        assert move_map.step(KeyPosition(4, 18), Direction.UP_RIGHT) is None
        assert move_map.step(KeyPosition(4, 53), Direction.DOWN_RIGHT) is None

    def test_group_edges_without_neighbors(self, move_map: MoveMap) -> None:

        assert move_map.step(KeyPosition(2, 1), Direction.RIGHT) is None
        assert move_map.step(KeyPosition(2, 6), Direction.RIGHT) is None
        assert move_map.step(KeyPosition(2, 0), Direction.UP_LEFT) is None
        assert move_map.step(KeyPosition(2, 55), Direction.DOWN_RIGHT) is None
