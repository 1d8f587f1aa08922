#!/usr/bin/env python3
"""
Isomap - isomorphic keyboard mapping generator

Entry point for generating a mapping from the command line. Fills the
keyboard with an isomorphic layout in the chosen tuning, then writes a .ltn
mapping file and/or an SVG picture of it.

Usage:
    python -m isomap.main [options]

Options:
    --tuning NAME       Tuning to use (default: edo12)
    --layout NAME       Preset layout (default: wicki-hayden)
    --layout-file PATH  Read the layout from a JSON file instead
    --start GROUP:KEY   Key to put middle C on; repeat for several fills
    --left N            How far the fill may spread left (default: 16)
    --right N           How far the fill may spread right (default: 16)
    --load PATH         Start from an existing .ltn mapping
    --ltn PATH          Write the mapping to a .ltn file
    --svg PATH          Draw the mapping to an SVG file
    --list              List tunings and layouts and exit
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from . import ltn
from .fill import fill_layout
from .keyboard import Keyboard, KeyPosition
from .layout import LAYOUTS, FillRegion, Layout, get_layout
from .tuning import TUNINGS, get_tuning

DEFAULT_START = "2:39"


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Isomap - isomorphic keyboard mapping generator",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=f"""
Tunings:
  {', '.join(TUNINGS)}

Layouts:
  {', '.join(LAYOUTS)}

Examples:
  python -m isomap.main --ltn wicki.ltn --svg wicki.svg
  python -m isomap.main --tuning edo31 --layout harmonic-table --ltn ht31.ltn
  python -m isomap.main --start 1:39 --start 3:39 --left 8 --right 8 --svg two.svg
        """
    )

    parser.add_argument(
        "--tuning", type=str, default="edo12",
        help="Tuning to use (default: edo12)"
    )
    parser.add_argument(
        "--layout", type=str, default="wicki-hayden",
        help="Preset layout (default: wicki-hayden)"
    )
    parser.add_argument(
        "--layout-file", type=str, default=None,
        help="JSON file with 'right', 'up_left' and 'up_right' intervals"
    )
    parser.add_argument(
        "--start", type=str, action="append", default=None,
        help=f"Key to place middle C on, as GROUP:KEY (default: {DEFAULT_START})"
    )
    parser.add_argument(
        "--left", type=int, default=16,
        help="Keys the fill may spread to the left (default: 16)"
    )
    parser.add_argument(
        "--right", type=int, default=16,
        help="Keys the fill may spread to the right (default: 16)"
    )
    parser.add_argument(
        "--load", type=str, default=None,
        help="Existing .ltn mapping to start from"
    )
    parser.add_argument(
        "--ltn", type=str, default=None,
        help="Write the mapping to this .ltn file"
    )
    parser.add_argument(
        "--svg", type=str, default=None,
        help="Draw the mapping to this SVG file"
    )
    parser.add_argument(
        "--list", action="store_true",
        help="List available tunings and layouts and exit"
    )
    parser.add_argument(
        "--verbose", action="store_true",
        help="Show debug logging"
    )

    return parser.parse_args(argv)


def print_choices():
    """Print the available tunings and layouts."""
    print("\nTunings:")
    for name, tuning in TUNINGS.items():
        mode = "channel octaves" if tuning.channel_octaves is not None else "plain"
        print(f"  - {name} ({tuning.octave} steps, {mode})")
    print("\nLayouts:")
    for name, layout in LAYOUTS.items():
        print(f"  - {name}: right={layout.right.value}, "
              f"up_left={layout.up_left.value}, up_right={layout.up_right.value}")


def build_keyboard(args: argparse.Namespace) -> Keyboard:
    """Load or create the keyboard and run a fill for each start."""
    tuning = get_tuning(args.tuning)
    layout = Layout.load(args.layout_file) if args.layout_file else get_layout(args.layout)

    keyboard = ltn.load(args.load) if args.load else Keyboard()

    for start in args.start or [DEFAULT_START]:
        region = FillRegion(start=KeyPosition.parse(start), left=args.left, right=args.right)
        stats = fill_layout(keyboard, tuning, layout, region)
        print(f"Filled {stats.written} keys from {region.start} "
              f"({stats.lightened} seam keys lightened)")

    return keyboard


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Main entry point for Isomap."""
    args = parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)

    if args.list:
        print_choices()
        return 0

    try:
        keyboard = build_keyboard(args)

        if args.ltn:
            ltn.save(args.ltn, keyboard)
            print(f"Wrote mapping to {args.ltn}")
        if args.svg:
            # Qt is only needed for drawing.
            from .svg import render_svg
            render_svg(keyboard, args.svg)
            print(f"Wrote image to {args.svg}")
        if not args.ltn and not args.svg:
            print("Nothing written (use --ltn and/or --svg)")

    except ValueError as e:
        print(f"Error: {e}")
        return 1
    except OSError as e:
        print(f"File Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
