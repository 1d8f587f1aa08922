"""
Key movement across the hex grid.

All five groups share the same internal layout, so the movement tables are
indexed only by key. A move either stays within the group or crosses into the
neighboring group (a group delta of -1 or +1). Moves off the first or last
group are rejected when the move is made, not in the tables, so the same
tables serve every group.

The tables are written out as literal data rather than computed: the tilted
3+4 layout folded into each group is irregular enough that no simple offset
formula holds everywhere, especially along the group seams.
"""

from dataclasses import dataclass
from typing import Optional

from .keyboard import GROUPS, KEYS_PER_GROUP, Direction, KeyPosition


@dataclass(frozen=True)
class KeyMove:
    """A move from a key: the change of group, and the destination key."""

    group: int
    key: int


MoveTable = list[Optional[KeyMove]]


def _table(keys: list[int], missing: tuple[int, ...] = (), crossing: tuple[int, ...] = (),
           delta: int = 0) -> MoveTable:
    """
    Build a move table from a destination per key.

    Args:
        keys: Destination key for each of the 56 keys.
        missing: Keys that have no neighbor in this direction.
        crossing: Keys whose neighbor is in the adjacent group.
        delta: The group change for the keys in `crossing`.
    """
    assert len(keys) == KEYS_PER_GROUP
    table: MoveTable = [KeyMove(0, k) for k in keys]
    for k in missing:
        table[k] = None
    for k in crossing:
        table[k] = KeyMove(delta, keys[k])
    return table


def _right() -> MoveTable:
    table: MoveTable = [KeyMove(0, k + 1) for k in range(KEYS_PER_GROUP)]
    # Nothing to the right of these two.
    table[1] = None
    table[6] = None
    for k, dest in ((12, 0), (18, 2), (24, 7), (30, 13), (36, 19),
                    (42, 25), (48, 31), (53, 37), (55, 43)):
        table[k] = KeyMove(1, dest)
    return table


def _left() -> MoveTable:
    table: MoveTable = [KeyMove(0, k - 1) for k in range(KEYS_PER_GROUP)]
    table[49] = None
    table[54] = None
    for k, dest in ((0, 12), (2, 18), (7, 24), (13, 30), (19, 36),
                    (25, 42), (31, 48), (37, 53), (43, 55)):
        table[k] = KeyMove(-1, dest)
    return table


# Unused slots in the literal rows below hold 0 and are listed in `missing`.

_DOWN_RIGHT = [
    2, 3,
    8, 9, 10, 11, 12,
    13, 14, 15, 16, 17, 18,
    20, 21, 22, 23, 24, 7,
    25, 26, 27, 28, 29, 30,
    32, 33, 34, 35, 36, 19,
    37, 38, 39, 40, 41, 42,
    44, 45, 46, 47, 48, 31,
    0, 49, 50, 51, 52, 53,
    0, 0, 54, 55, 43,
    0, 0,
]

_UP_LEFT = [
    0, 0,
    0, 1, 0, 0, 0,
    18, 2, 3, 4, 5, 6,
    7, 8, 9, 10, 11, 12,
    30, 13, 14, 15, 16, 17,
    19, 20, 21, 22, 23, 24,
    42, 25, 26, 27, 28, 29,
    31, 32, 33, 34, 35, 36,
    53, 37, 38, 39, 40, 41,
    44, 45, 46, 47, 48,
    51, 52,
]

_DOWN_LEFT = [
    18, 2,
    7, 8, 9, 10, 11,
    30, 13, 14, 15, 16, 17,
    19, 20, 21, 22, 23, 24,
    42, 25, 26, 27, 28, 29,
    31, 32, 33, 34, 35, 36,
    53, 37, 38, 39, 40, 41,
    43, 44, 45, 46, 47, 48,
    0, 0, 49, 50, 51, 52,
    0, 0, 0, 54, 55,
    0, 0,
]

_UP_RIGHT = [
    0, 0,
    1, 0, 0, 0, 0,
    2, 3, 4, 5, 6, 0,
    8, 9, 10, 11, 12, 0,
    13, 14, 15, 16, 17, 18,
    20, 21, 22, 23, 24, 7,
    25, 26, 27, 28, 29, 30,
    32, 33, 34, 35, 36, 19,
    37, 38, 39, 40, 41, 42,
    45, 46, 47, 48, 31,
    52, 53,
]


class MoveMap:
    """The six per-direction move tables."""

    def __init__(self):
        self.tables: dict[Direction, MoveTable] = {
            Direction.RIGHT: _right(),
            Direction.LEFT: _left(),
            Direction.DOWN_RIGHT: _table(
                _DOWN_RIGHT, missing=(43, 49, 50, 54, 55),
                crossing=(18, 30, 42, 53), delta=1),
            Direction.UP_LEFT: _table(
                _UP_LEFT, missing=(0, 1, 4, 5, 6),
                crossing=(7, 19, 31, 43), delta=-1),
            # The top-right edge of a group leads into the next group.
            Direction.UP_RIGHT: _table(
                _UP_RIGHT, missing=(0, 1, 3, 4, 5, 6, 12),
                crossing=(18, 30, 42, 53), delta=1),
            Direction.DOWN_LEFT: _table(
                _DOWN_LEFT, missing=(43, 44, 49, 50, 51, 54, 55),
                crossing=(0, 7, 19, 31), delta=-1),
        }

    def step(self, pos: KeyPosition, direction: Direction) -> Optional[KeyPosition]:
        """
        The key next to `pos` in the given direction, or None if there isn't one.
        """
        move = self.tables[direction][pos.key]
        if move is None:
            return None
        group = pos.group + move.group
        if not 0 <= group < GROUPS:
            return None
        return KeyPosition(group, move.key)
