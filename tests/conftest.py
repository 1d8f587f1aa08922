"""Pytest configuration and fixtures."""
import os

# The SVG renderer needs Qt, which must not try to open a display.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from isomap.adjacency import MoveMap
from isomap.fill import fill_layout
from isomap.keyboard import Keyboard, KeyPosition
from isomap.layout import WICKI_HAYDEN, FillRegion
from isomap.tuning import EDO12

CENTER = KeyPosition(2, 39)


@pytest.fixture
def move_map() -> MoveMap:
    return MoveMap()


@pytest.fixture
def keyboard() -> Keyboard:
    return Keyboard()


@pytest.fixture
def wicki_keyboard() -> Keyboard:
    """A keyboard filled with Wicki-Hayden in 12-EDO, middle C at 2:39."""
    keyboard = Keyboard()
    fill_layout(keyboard, EDO12, WICKI_HAYDEN, FillRegion(start=CENTER, left=16, right=16))
    return keyboard
