"""
Isomap - Isomorphic Keyboard Mapping Generator

Isomap fills the keys of a 280-key hex-grid keyboard with an isomorphic
layout: pick a tuning, pick the intervals for each direction across the grid,
and pick where middle C goes. The result can be saved as a .ltn mapping for
the instrument, or drawn as an SVG picture.
"""

__version__ = "0.1.0"
__author__ = "Isomap Project"

from .adjacency import MoveMap
from .colors import RGBColor
from .fill import FillStats, fill_layout
from .keyboard import Direction, Keyboard, KeyPosition, KeyRecord
from .layout import HARMONIC_TABLE, WICKI_HAYDEN, FillRegion, Layout
from .tuning import EDO12, EDO19, EDO31, Edo, Interval, MidiNote, Tuning

__all__ = [
    "MoveMap",
    "RGBColor",
    "FillStats",
    "fill_layout",
    "Direction",
    "Keyboard",
    "KeyPosition",
    "KeyRecord",
    "FillRegion",
    "Layout",
    "WICKI_HAYDEN",
    "HARMONIC_TABLE",
    "Tuning",
    "Edo",
    "Interval",
    "MidiNote",
    "EDO12",
    "EDO19",
    "EDO31",
]
