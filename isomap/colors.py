"""
Color handling for key mappings.

Keys carry a plain 24-bit RGB color. The palette below gives every class of
pitch name (naturals, sharps, flats, quarter tones...) its own color so that
the same pitch class always lights up the same way on the keyboard.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class RGBColor:
    """An 8-bit-per-channel color."""

    r: int
    g: int
    b: int

    def __post_init__(self):
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 255:
                raise ValueError(f"Color channel out of range: {channel}")

    @classmethod
    def white(cls) -> "RGBColor":
        return cls(255, 255, 255)

    @classmethod
    def black(cls) -> "RGBColor":
        return cls(0, 0, 0)

    @classmethod
    def parse(cls, text: str) -> "RGBColor":
        """
        Parse a color written as six hex digits, with or without a leading '#'.

        Raises:
            ValueError: If the text is not a 24-bit hex color.
        """
        digits = text.strip().lstrip("#")
        if len(digits) != 6:
            raise ValueError(f"Invalid color: {text!r}")
        value = int(digits, 16)
        return cls((value >> 16) & 0xFF, (value >> 8) & 0xFF, value & 0xFF)

    def to_hex(self) -> str:
        return "#{:02x}{:02x}{:02x}".format(self.r, self.g, self.b)

    def lighten(self) -> "RGBColor":
        """Return a color halfway between this one and white."""
        return RGBColor(
            self.r + (255 - self.r) // 2,
            self.g + (255 - self.g) // 2,
            self.b + (255 - self.b) // 2,
        )


# Pitch-name classes and their colors.
REFERENCE = RGBColor(0xE0, 0x40, 0x40)
NATURAL = RGBColor(0xF0, 0xF0, 0xE8)
SHARP = RGBColor(0x40, 0x70, 0xD0)
FLAT = RGBColor(0x40, 0xA0, 0x60)
DOUBLE_SHARP = RGBColor(0x30, 0x40, 0x90)
DOUBLE_FLAT = RGBColor(0x30, 0x60, 0x40)
QUARTER_UP = RGBColor(0xE0, 0x90, 0x40)
QUARTER_DOWN = RGBColor(0xA0, 0x50, 0xB0)

# Checked in order; double accidentals must come before the single ones.
ACCIDENTAL_COLORS: tuple[tuple[str, RGBColor], ...] = (
    ("𝄪", DOUBLE_SHARP),
    ("𝄫", DOUBLE_FLAT),
    ("♯", SHARP),
    ("♭", FLAT),
    ("↑", QUARTER_UP),
    ("↓", QUARTER_DOWN),
)


def name_color(name: str) -> RGBColor:
    """
    Pick a color for a rendered note name such as 'C4', 'D♭3' or 'E↑5'.

    Args:
        name: Note name, with its octave number.

    Returns:
        The color for the class of pitch the name describes.
    """
    pitch = name.rstrip("-0123456789")
    if pitch == "C":
        return REFERENCE
    for marker, color in ACCIDENTAL_COLORS:
        if marker in pitch:
            return color
    return NATURAL
