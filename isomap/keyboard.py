"""
The keyboard surface.

The keyboard is an isomorphic hex grid of 280 keys, split into 5 groups
(boards) of 56 keys each. The grid is tilted slightly counterclockwise, which
gives a 3+4 staggered pattern across the whole instrument. A single group is
laid out like this (without the tilt); the pipes mark where the next group
starts:

    00  01
      02  03  04  05  06
    07  08  09  10  11  12| 00  01  ...
      13  14  15  16  17  18| 02  03 ...
    19  20  21  22  23  24| 07  08
      25  26  27  28  29  30| 13  14 ...
    31  32  33  34  35  36| 19  20 ...
      37  38  39  40  41  42| 25  26 ...
    43  44  45  46  47  48| 31  32 ...
          49  50  51  52  53| 37  38 ...
                    54  55| 43  44
"""

import copy
from dataclasses import dataclass
from enum import Enum
from typing import Iterator, Optional

from pydantic import BaseModel, Field

from .colors import RGBColor

GROUPS = 5
KEYS_PER_GROUP = 56


@dataclass(frozen=True)
class KeyPosition:
    """A physical key: the group across the keyboard, and the key within it."""

    group: int
    key: int

    def __post_init__(self):
        if not 0 <= self.group < GROUPS or not 0 <= self.key < KEYS_PER_GROUP:
            raise ValueError(f"Invalid key position: {self.group}:{self.key}")

    @classmethod
    def origin(cls) -> "KeyPosition":
        return cls(0, 0)

    @classmethod
    def iter_all(cls) -> Iterator["KeyPosition"]:
        """Every key on the keyboard, group by group."""
        for group in range(GROUPS):
            for key in range(KEYS_PER_GROUP):
                yield cls(group, key)

    @classmethod
    def parse(cls, text: str) -> "KeyPosition":
        """
        Parse a position written as 'GROUP:KEY', e.g. '2:39'.

        Raises:
            ValueError: If the text is not a valid position.
        """
        group, sep, key = text.partition(":")
        if not sep:
            raise ValueError(f"Invalid key position: {text!r} (expected GROUP:KEY)")
        return cls(int(group), int(key))

    def __str__(self) -> str:
        return f"{self.group}:{self.key}"


class Direction(Enum):
    """A direction to move across the hex grid."""

    UP_LEFT = "up_left"
    UP_RIGHT = "up_right"
    RIGHT = "right"
    DOWN_RIGHT = "down_right"
    DOWN_LEFT = "down_left"
    LEFT = "left"

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_OPPOSITES = {
    Direction.UP_LEFT: Direction.DOWN_RIGHT,
    Direction.DOWN_RIGHT: Direction.UP_LEFT,
    Direction.UP_RIGHT: Direction.DOWN_LEFT,
    Direction.DOWN_LEFT: Direction.UP_RIGHT,
    Direction.RIGHT: Direction.LEFT,
    Direction.LEFT: Direction.RIGHT,
}


class KeyRecord(BaseModel):
    """What gets assigned to a single key."""

    channel: int = Field(ge=0, le=255)
    note: int = Field(ge=0, le=127)
    color: RGBColor = RGBColor.white()
    label: str = ""


class Keyboard:
    """
    The whole keyboard: an optional KeyRecord for every key.

    Keys start out empty. Filling, loading and rendering all work on the same
    instance, which is owned by the caller.
    """

    def __init__(self):
        self.keys: list[list[Optional[KeyRecord]]] = [
            [None] * KEYS_PER_GROUP for _ in range(GROUPS)
        ]

    def get(self, pos: KeyPosition) -> Optional[KeyRecord]:
        return self.keys[pos.group][pos.key]

    def set(self, pos: KeyPosition, record: Optional[KeyRecord]) -> None:
        self.keys[pos.group][pos.key] = record

    def items(self) -> Iterator[tuple[KeyPosition, Optional[KeyRecord]]]:
        for pos in KeyPosition.iter_all():
            yield pos, self.get(pos)

    def count(self) -> int:
        """Number of keys that have a record."""
        return sum(1 for group in self.keys for record in group if record is not None)

    def copy(self) -> "Keyboard":
        return copy.deepcopy(self)


# The starting column and length of each row of the whole keyboard, top to
# bottom, used to lay the keys out for display.
ROW_SPANS: tuple[tuple[int, int], ...] = (
    (0, 2),
    (0, 5),
    (0, 8),
    (0, 11),
    (0, 14),
    (0, 17),
    (0, 20),
    (0, 23),
    (0, 26),
    (1, 28),
    (4, 26),
    (7, 23),
    (10, 20),
    (13, 17),
    (16, 14),
    (19, 11),
    (22, 8),
    (25, 5),
    (28, 2),
)
