"""
Reading and writing keyboard mappings in the .ltn text format.

A mapping file is split into one [BoardN] section per group, each holding
key=value lines for the 56 keys of that group:

    [Board0]
    Key_0=60
    Chan_0=1
    Col_0=e04040
    ...

Only the note, channel and color of each key are meaningful here. The
controller configuration lines the hardware editor also writes are accepted
and ignored.
"""

import logging
import re
from pathlib import Path
from typing import Optional, Union

from .colors import RGBColor
from .keyboard import GROUPS, KEYS_PER_GROUP, Keyboard, KeyPosition, KeyRecord

logger = logging.getLogger(__name__)

BOARD_RE = re.compile(r"^\[Board(\d+)\]$")
KEY_RE = re.compile(r"^Key_(\d+)=(\d+)$")
CHAN_RE = re.compile(r"^Chan_(\d+)=(\d+)$")
COL_RE = re.compile(r"^Col_(\d+)=#?([0-9a-fA-F]{6})$")
INVERT_RE = re.compile(r"^CCInvert_(\d+)$")
IGNORE_RE = re.compile(
    r"^(AfterTouchActive|LightOnKeyStrokes|InvertFootController|InvertSustain|"
    r"ExprCtrlSensivity|VelocityIntrvlTbl|NoteOnOffVelocityCrvTbl|FaderConfig|"
    r"afterTouchConfig|LumaTouchConfig)=(.*)$"
)


class LtnFormatError(ValueError):
    """A line in a mapping file could not be understood."""

    def __init__(self, message: str, line_number: int):
        super().__init__(f"line {line_number}: {message}")
        self.line_number = line_number


class _Board:
    """The keys of one [BoardN] section, as they are read."""

    def __init__(self, group: int):
        self.group = group
        self.notes = [0] * KEYS_PER_GROUP
        self.channels = [0] * KEYS_PER_GROUP
        self.colors = [RGBColor.white()] * KEYS_PER_GROUP

    def store(self, keyboard: Keyboard) -> None:
        for key in range(KEYS_PER_GROUP):
            channel = self.channels[key]
            note = self.notes[key]
            keyboard.set(KeyPosition(self.group, key), KeyRecord(
                channel=channel,
                note=note,
                color=self.colors[key],
                label=f"{channel}:{note}",
            ))


def _key_index(text: str, line_number: int) -> int:
    index = int(text)
    if index >= KEYS_PER_GROUP:
        raise LtnFormatError(f"key index {index} out of range", line_number)
    return index


def load(path: Union[str, Path], keyboard: Optional[Keyboard] = None) -> Keyboard:
    """
    Read a mapping file.

    Args:
        path: File to read.
        keyboard: Keyboard to load into; a new empty one if None.

    Returns:
        The keyboard, with every key of every board in the file set.

    Raises:
        LtnFormatError: On a line that is malformed or not recognized.
        OSError: If the file cannot be read.
    """
    keyboard = keyboard if keyboard is not None else Keyboard()
    board: Optional[_Board] = None

    with open(path, encoding="utf-8") as fd:
        for line_number, line in enumerate(fd, start=1):
            line = line.strip()
            if not line:
                continue

            m = BOARD_RE.match(line)
            if m:
                if board is not None:
                    board.store(keyboard)
                group = int(m.group(1))
                if group >= GROUPS:
                    raise LtnFormatError(f"board {group} out of range", line_number)
                board = _Board(group)
                continue

            if IGNORE_RE.match(line):
                continue

            if board is None:
                raise LtnFormatError(f"key data before any board: {line!r}", line_number)

            if m := KEY_RE.match(line):
                value = int(m.group(2))
                if value > 127:
                    raise LtnFormatError(f"note {value} out of range", line_number)
                board.notes[_key_index(m.group(1), line_number)] = value
            elif m := CHAN_RE.match(line):
                value = int(m.group(2))
                if value > 255:
                    raise LtnFormatError(f"channel {value} out of range", line_number)
                board.channels[_key_index(m.group(1), line_number)] = value
            elif m := COL_RE.match(line):
                board.colors[_key_index(m.group(1), line_number)] = RGBColor.parse(m.group(2))
            elif m := INVERT_RE.match(line):
                # Inverted-CC flags have no effect on the note mapping.
                _key_index(m.group(1), line_number)
            else:
                raise LtnFormatError(f"unrecognized line: {line!r}", line_number)

    if board is not None:
        board.store(keyboard)

    logger.info("Loaded mapping from %s", path)
    return keyboard


def save(path: Union[str, Path], keyboard: Keyboard) -> None:
    """
    Write a mapping file. Keys without a record are written as note 0 on
    channel 0, colored black.
    """
    blank = KeyRecord(channel=0, note=0, color=RGBColor.black())
    lines = []
    for group in range(GROUPS):
        lines.append(f"[Board{group}]")
        for key in range(KEYS_PER_GROUP):
            record = keyboard.get(KeyPosition(group, key))
            if record is None:
                record = blank
            lines.append(f"Key_{key}={record.note}")
            lines.append(f"Chan_{key}={record.channel}")
            lines.append(f"Col_{key}={record.color.to_hex().lstrip('#')}")

    Path(path).write_text("\n".join(lines) + "\n", encoding="utf-8")
    logger.info("Saved mapping to %s", path)
