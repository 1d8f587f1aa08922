"""
Isomorphic layout fill.

Starting from a single key set to middle C, the filler spreads out across the
grid breadth first. Every step moves to a neighboring key and, in lockstep,
moves the pitch by the interval the layout assigns to that direction. A branch
stops when it runs off the keyboard, out of pitch range, past the horizontal
bounds, or into a key that has already been filled.
"""

import logging
from collections import deque
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .adjacency import MoveMap
from .keyboard import Direction, Keyboard, KeyPosition, KeyRecord
from .layout import FillRegion, Layout
from .tuning import MidiNote, Tuning

logger = logging.getLogger(__name__)


class Phase(Enum):
    """
    Which diagonal the fill moves along for "up" and "down". The grid has no
    straight vertical, so a vertical walk zigzags: with LEFT, up is UpLeft and
    down is DownLeft; with RIGHT, up is UpRight and down is DownRight. Every
    vertical step flips the phase.
    """

    LEFT = "left"
    RIGHT = "right"

    def complement(self) -> "Phase":
        return Phase.RIGHT if self is Phase.LEFT else Phase.LEFT

    def direction(self, card: "Cardinal") -> Direction:
        """The hex direction for a cardinal direction in this phase."""
        if card is Cardinal.LEFT:
            return Direction.LEFT
        if card is Cardinal.RIGHT:
            return Direction.RIGHT
        if card is Cardinal.UP:
            return Direction.UP_LEFT if self is Phase.LEFT else Direction.UP_RIGHT
        return Direction.DOWN_LEFT if self is Phase.LEFT else Direction.DOWN_RIGHT


class Cardinal(Enum):
    """The four directions the fill expands in."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @property
    def x_offset(self) -> int:
        if self is Cardinal.LEFT:
            return -1
        if self is Cardinal.RIGHT:
            return 1
        return 0

    @property
    def increasing(self) -> bool:
        """Does this direction head toward higher notes (affects names and colors)."""
        return self in (Cardinal.UP, Cardinal.RIGHT)

    def new_phase(self, phase: Phase) -> Phase:
        if self in (Cardinal.LEFT, Cardinal.RIGHT):
            return phase
        return phase.complement()


@dataclass
class Work:
    """A single key waiting to be filled."""

    x: int  # horizontal offset from the start, for bounds checking only
    pos: KeyPosition
    note: MidiNote
    phase: Phase
    increasing: bool


@dataclass
class FillStats:
    """What a fill did."""

    written: int = 0
    lightened: int = 0
    dropped: int = 0


class Filler:
    """
    Fill a keyboard from one starting key.

    Usage:
        >>> keyboard = Keyboard()
        >>> region = FillRegion(start=KeyPosition(2, 39), left=16, right=16)
        >>> Filler(keyboard, EDO12, WICKI_HAYDEN, region).run()
    """

    def __init__(self, keyboard: Keyboard, tuning: Tuning, layout: Layout, region: FillRegion):
        self.keyboard = keyboard
        self.tuning = tuning
        self.layout = layout
        self.region = region
        self.mv = MoveMap()

        self.work: deque[Work] = deque()
        self.work.append(Work(
            x=0,
            pos=region.start,
            note=tuning.middle_c(),
            phase=Phase.LEFT,
            increasing=True,
        ))

    def run(self) -> FillStats:
        """Process work until every branch has stopped."""
        stats = FillStats()
        first = True

        while self.work:
            work = self.work.popleft()

            cell = self.keyboard.get(work.pos)
            if cell is not None:
                # Already filled; mark where two fronts disagree by lightening
                # the key. This lightens again on every conflicting arrival.
                if cell.channel != work.note.channel or cell.note != work.note.note:
                    cell.color = cell.color.lighten()
                    stats.lightened += 1
                continue

            if work.x > self.region.right or work.x < -self.region.left:
                stats.dropped += 1
                continue

            self.keyboard.set(work.pos, KeyRecord(
                channel=work.note.channel,
                note=work.note.note,
                color=self.tuning.color(work.note, work.increasing),
                label=self.tuning.name(work.note, work.increasing),
            ))
            stats.written += 1

            for card in Cardinal:
                pos = self.pos_move(work.pos, work.phase, card)
                if pos is None:
                    continue
                note = self.note_move(work.note, work.phase, card)
                if note is None:
                    continue

                # Only the first key decides which way is increasing; after
                # that it is inherited.
                increasing = card.increasing if first else work.increasing
                self.work.append(Work(
                    x=work.x + card.x_offset,
                    pos=pos,
                    note=note,
                    phase=card.new_phase(work.phase),
                    increasing=increasing,
                ))

            first = False

        return stats

    def pos_move(self, pos: KeyPosition, phase: Phase, card: Cardinal) -> Optional[KeyPosition]:
        return self.mv.step(pos, phase.direction(card))

    def note_move(self, note: MidiNote, phase: Phase, card: Cardinal) -> Optional[MidiNote]:
        direction = phase.direction(card)
        interval, up = {
            Direction.LEFT: (self.layout.right, False),
            Direction.RIGHT: (self.layout.right, True),
            Direction.UP_LEFT: (self.layout.up_left, True),
            Direction.UP_RIGHT: (self.layout.up_right, True),
            Direction.DOWN_LEFT: (self.layout.up_right, False),
            Direction.DOWN_RIGHT: (self.layout.up_left, False),
        }[direction]
        return self.tuning.interval(note, interval, up)


def fill_layout(keyboard: Keyboard, tuning: Tuning, layout: Layout, region: FillRegion) -> FillStats:
    """
    Fill `keyboard` in place with `layout` under `tuning`, from a single start.

    Keys that already have a record are left alone, so several regions can be
    filled one after another on the same keyboard.

    Returns:
        Counts of keys written, seam keys lightened and branches dropped at the
        horizontal bounds.
    """
    logger.debug("Filling %s with %s from %s (left %d, right %d)",
                 tuning, layout.name, region.start, region.left, region.right)
    stats = Filler(keyboard, tuning, layout, region).run()
    logger.info("Filled %d keys from %s (%d seam keys lightened, %d dropped)",
                stats.written, region.start, stats.lightened, stats.dropped)
    return stats
