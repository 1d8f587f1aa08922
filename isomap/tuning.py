"""
Tuning systems.

A tuning knows how to move a MIDI note by a musical interval, what to call the
resulting pitch, and what color the key for it should be. Every tuning here is
an equal division of the octave (EDO), so one parameterised class covers them
all; each variant is just a set of constant tables.

Two ways of addressing pitches are supported:

- Plain mode: the MIDI note number is the pitch, the channel is carried along
  unchanged.
- Channel-octave mode: the MIDI channel is the octave number and the note
  number (minus a bias) is the step within that octave. This is how tunings
  with more than 12 steps reach a useful range on a 128-note channel.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from .colors import RGBColor, name_color

# Channel-octave arithmetic is done this many octaves above zero so that the
# intermediate values never go negative.
OCTAVE_OFFSET = 100

# Octaves outside this window (after removing OCTAVE_OFFSET) are rejected.
MAX_OCTAVE = 128


@dataclass(frozen=True, order=True)
class MidiNote:
    """A pitch as a synthesizer addresses it."""

    channel: int
    note: int

    def __post_init__(self):
        if self.channel < 0 or self.note < 0:
            raise ValueError(f"Negative MIDI value: {self.channel}:{self.note}")


class Interval(Enum):
    """Intervals used for building keyboard layouts."""

    MINOR_SECOND = "minor_second"
    MAJOR_SECOND = "major_second"
    MINOR_THIRD = "minor_third"
    MAJOR_THIRD = "major_third"
    PERFECT_FOURTH = "perfect_fourth"
    AUGMENTED_FOURTH = "augmented_fourth"
    DIMINISHED_FIFTH = "diminished_fifth"
    PERFECT_FIFTH = "perfect_fifth"


class Tuning(ABC):
    """
    A tuning system, with as much information as is needed to produce a
    keyboard layout and MIDI mapping.
    """

    @abstractmethod
    def steps(self, interval: Interval) -> Optional[int]:
        """
        Number of steps an interval spans, or None if it has no fixed size in
        this tuning. Tunings returning None should override `interval`.
        """

    @abstractmethod
    def name(self, note: MidiNote, sharp: bool) -> str:
        """
        A readable name for this note. `sharp` is a hint, for tunings with
        enharmonic spellings, of whether to prefer the sharp name.
        """

    @abstractmethod
    def middle_c(self) -> MidiNote:
        """The reference note layouts are built out from."""

    @abstractmethod
    def interval(self, note: MidiNote, interval: Interval, up: bool) -> Optional[MidiNote]:
        """
        Move a note by an interval, upward in pitch when `up` is true.

        Returns None when the result is out of range or the interval makes no
        sense in this tuning.
        """

    def color(self, note: MidiNote, sharp: bool) -> RGBColor:
        """Suggested key color for this note."""
        return name_color(self.name(note, sharp))


@dataclass(frozen=True, eq=False)
class Edo(Tuning):
    """
    A general equal division of the octave.

    Attributes:
        label: Registry name, e.g. "edo12".
        octave: Number of steps in an octave.
        channel_octaves: None for plain mode. Otherwise the channel is the
            octave, and this is the note number that C sits on in each channel.
        reference: Middle C.
        intervals: Step count for each supported interval.
        sharp_names: Pitch names for each step, preferring sharps.
        flat_names: Pitch names for each step, preferring flats.
    """

    label: str
    octave: int
    channel_octaves: Optional[int]
    reference: MidiNote
    intervals: dict[Interval, int]
    sharp_names: tuple[str, ...]
    flat_names: tuple[str, ...]

    def __post_init__(self):
        if len(self.sharp_names) != self.octave or len(self.flat_names) != self.octave:
            raise ValueError(f"{self.label}: name tables must have {self.octave} entries")

    def steps(self, interval: Interval) -> Optional[int]:
        return self.intervals.get(interval)

    def middle_c(self) -> MidiNote:
        return self.reference

    def interval(self, note: MidiNote, interval: Interval, up: bool) -> Optional[MidiNote]:
        steps = self.steps(interval)
        if steps is None:
            return None
        if not up:
            steps = -steps

        if self.channel_octaves is None:
            pitch = note.note + steps
            if not 0 <= pitch <= 127:
                return None
            return MidiNote(note.channel, pitch)

        bias = self.channel_octaves
        flat = (note.channel + OCTAVE_OFFSET) * self.octave + (note.note - bias) + steps
        octave, step = divmod(flat, self.octave)
        octave -= OCTAVE_OFFSET
        if not 0 <= octave < MAX_OCTAVE:
            return None
        pitch = step + bias
        if pitch > 127:
            return None
        return MidiNote(octave, pitch)

    def _octave_step(self, note: MidiNote) -> tuple[int, int]:
        if self.channel_octaves is None:
            # Middle C is taken to be in octave 4.
            pitch = note.note - self.reference.note + self.octave * 4
        else:
            pitch = note.channel * self.octave + (note.note - self.channel_octaves)
        return divmod(pitch, self.octave)

    def name(self, note: MidiNote, sharp: bool) -> str:
        octave, step = self._octave_step(note)
        names = self.sharp_names if sharp else self.flat_names
        return f"{names[step]}{octave}"

    def __repr__(self) -> str:
        return f"Edo({self.label!r})"


EDO12 = Edo(
    label="edo12",
    octave=12,
    channel_octaves=None,
    reference=MidiNote(1, 60),
    intervals={
        Interval.MINOR_SECOND: 1,
        Interval.MAJOR_SECOND: 2,
        Interval.MINOR_THIRD: 3,
        Interval.MAJOR_THIRD: 4,
        Interval.PERFECT_FOURTH: 5,
        Interval.AUGMENTED_FOURTH: 6,
        Interval.DIMINISHED_FIFTH: 6,
        Interval.PERFECT_FIFTH: 7,
    },
    sharp_names=("C", "C♯", "D", "D♯", "E", "F", "F♯", "G", "G♯", "A", "A♯", "B"),
    flat_names=("C", "D♭", "D", "E♭", "E", "F", "G♭", "G", "A♭", "A", "B♭", "B"),
)

EDO19 = Edo(
    label="edo19",
    octave=19,
    channel_octaves=None,
    reference=MidiNote(1, 60),
    intervals={
        Interval.MINOR_SECOND: 2,
        Interval.MAJOR_SECOND: 3,
        Interval.MINOR_THIRD: 5,
        Interval.MAJOR_THIRD: 6,
        Interval.PERFECT_FOURTH: 8,
        Interval.AUGMENTED_FOURTH: 9,
        Interval.DIMINISHED_FIFTH: 10,
        Interval.PERFECT_FIFTH: 11,
    },
    sharp_names=(
        "C", "C♯", "D♭", "D", "D♯", "E♭", "E", "E♯", "F", "F♯",
        "G♭", "G", "G♯", "A♭", "A", "A♯", "B♭", "B", "B♯",
    ),
    flat_names=(
        "C", "C♯", "D♭", "D", "D♯", "E♭", "E", "F♭", "F", "F♯",
        "G♭", "G", "G♯", "A♭", "A", "A♯", "B♭", "B", "C♭",
    ),
)

# 31 steps: a whole tone is 5, a sharp or flat is 2, and ↑/↓ mark a single
# step (roughly a quarter tone).
EDO31 = Edo(
    label="edo31",
    octave=31,
    channel_octaves=0,
    reference=MidiNote(4, 0),
    intervals={
        Interval.MINOR_SECOND: 3,
        Interval.MAJOR_SECOND: 5,
        Interval.MINOR_THIRD: 8,
        Interval.MAJOR_THIRD: 10,
        Interval.PERFECT_FOURTH: 13,
        Interval.AUGMENTED_FOURTH: 15,
        Interval.DIMINISHED_FIFTH: 16,
        Interval.PERFECT_FIFTH: 18,
    },
    sharp_names=(
        "C", "C↑", "C♯", "D♭", "C𝄪", "D", "D↑", "D♯", "E♭", "D𝄪",
        "E", "E↑", "E♯", "F", "F↑", "F♯", "G♭", "F𝄪", "G", "G↑",
        "G♯", "A♭", "G𝄪", "A", "A↑", "A♯", "B♭", "A𝄪", "B", "B↑",
        "B♯",
    ),
    flat_names=(
        "C", "D𝄫", "C♯", "D♭", "D↓", "D", "E𝄫", "D♯", "E♭", "E↓",
        "E", "F♭", "F↓", "F", "G𝄫", "F♯", "G♭", "G↓", "G", "A𝄫",
        "G♯", "A♭", "A↓", "A", "B𝄫", "A♯", "B♭", "B↓", "B", "C♭",
        "C↓",
    ),
)

TUNINGS: dict[str, Edo] = {t.label: t for t in (EDO12, EDO19, EDO31)}


def get_tuning(name: str) -> Edo:
    """
    Look up a tuning by name ('edo12', 'EDO-31', ...).

    Raises:
        ValueError: If there is no such tuning.
    """
    key = name.lower().replace("-", "").replace("_", "").replace(" ", "")
    try:
        return TUNINGS[key]
    except KeyError:
        raise ValueError(
            f"Invalid tuning: {name}. Choose from: {', '.join(TUNINGS)}"
        ) from None
