"""
Core palette primitives - the pure pipeline.

hex string -> HSLColor -> (PitchClass, ChordKind) -> (MIDI notes, frequencies)

- HSLColor / parse_hex_color: Color parsing
- PitchClass: The 12 chromatic pitch classes (0-11)
- ChordKind: Mode plus extension, chosen from saturation/lightness
- ChordQuality / build_chord: Interval stacks and chord construction
"""

from chuk_mcp_palette.core.chord import ChordQuality, build_chord, quality_for, root_midi
from chuk_mcp_palette.core.color import HSLColor, InvalidColorFormatError, parse_hex_color
from chuk_mcp_palette.core.mapping import (
    ChordKind,
    ChordMode,
    Extension,
    classify_chord,
    mode_and_extension,
    pitch_class_from_hue,
)
from chuk_mcp_palette.core.pitch import PitchClass, midi_to_frequency

__all__ = [
    # Color
    "HSLColor",
    "InvalidColorFormatError",
    "parse_hex_color",
    # Pitch
    "PitchClass",
    "midi_to_frequency",
    # Mapping
    "ChordKind",
    "ChordMode",
    "Extension",
    "classify_chord",
    "mode_and_extension",
    "pitch_class_from_hue",
    # Chord
    "ChordQuality",
    "build_chord",
    "quality_for",
    "root_midi",
]
