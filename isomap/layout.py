"""
Keyboard layouts.

An isomorphic layout is defined by the interval spanned by a step in each
direction across the grid. Only three are needed: Right, UpLeft and UpRight;
the other three directions are their inverses. Since UpLeft followed by Right
lands on the same key as UpRight, a coherent layout has
up_right == up_left + right. That is left to whoever defines the layout.
"""

from pathlib import Path
from typing import Union

from pydantic import BaseModel, Field

from .keyboard import KeyPosition
from .tuning import Interval


class Layout(BaseModel):
    """The intervals spanned by moving in each of the three generating directions."""

    name: str = "custom"
    right: Interval
    up_left: Interval
    up_right: Interval

    @classmethod
    def load(cls, path: Union[str, Path]) -> "Layout":
        """Read a layout from a JSON file."""
        return cls.model_validate_json(Path(path).read_text(encoding="utf-8"))


class FillRegion(BaseModel):
    """Where to start a fill, and how far it may spread horizontally."""

    start: KeyPosition
    left: int = Field(ge=0, default=16)
    right: int = Field(ge=0, default=16)


WICKI_HAYDEN = Layout(
    name="wicki-hayden",
    right=Interval.MAJOR_SECOND,
    up_left=Interval.PERFECT_FOURTH,
    up_right=Interval.PERFECT_FIFTH,
)

HARMONIC_TABLE = Layout(
    name="harmonic-table",
    right=Interval.MINOR_SECOND,
    up_left=Interval.MINOR_THIRD,
    up_right=Interval.MAJOR_THIRD,
)

LAYOUTS: dict[str, Layout] = {layout.name: layout for layout in (WICKI_HAYDEN, HARMONIC_TABLE)}


def get_layout(name: str) -> Layout:
    """
    Look up a preset layout by name.

    Raises:
        ValueError: If there is no such layout.
    """
    key = name.strip().lower().replace("_", "-").replace(" ", "-")
    try:
        return LAYOUTS[key]
    except KeyError:
        raise ValueError(
            f"Invalid layout: {name}. Choose from: {', '.join(LAYOUTS)}"
        ) from None
