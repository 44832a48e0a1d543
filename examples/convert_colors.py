#!/usr/bin/env python3
"""
Example: Turn a few colors into chords.

This walks the whole pipeline - hex to HSL, HSL to pitch class and chord
kind, and chord kind to MIDI notes and frequencies.

Usage:
    python examples/convert_colors.py
    python examples/convert_colors.py "#3A9FD9" ff8800
"""

import sys

from chuk_mcp_palette.converter import convert_color
from chuk_mcp_palette.core import InvalidColorFormatError

DEFAULT_COLORS = ["#3A9FD9", "#FF0000", "#00FF00", "#0000FF", "#000000", "#FFFFFF"]


def main() -> None:
    """Print the chord for each color."""
    colors = sys.argv[1:] or DEFAULT_COLORS

    for color in colors:
        try:
            result = convert_color(color)
        except InvalidColorFormatError as e:
            print(f"{color}: {e}")
            continue

        hsl = result.hsl
        freqs = ", ".join(f"{f:.2f}" for f in result.frequency_hz)
        print(f"{color}: hsl({hsl.h}, {hsl.s}%, {hsl.l}%)")
        print(f"  {result.pitch_class} {result.mode}")
        print(f"  MIDI: {result.midi_notes}")
        print(f"  Hz:   [{freqs}]")


if __name__ == "__main__":
    main()
