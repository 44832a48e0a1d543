"""
Constants and enums for the palette system.

No magic strings - use enums and Literal types for constrained values.
"""

from enum import Enum
from typing import Literal

# Hue circle is split into 12 equal segments, one per pitch class
HUE_SEGMENT_DEGREES = 30

# Saturation at/above this selects a major chord
DEFAULT_MODE_THRESHOLD = 50

# Lightness at/above this adds the minor seventh
DEFAULT_EXTENSION_THRESHOLD = 50

# Equal temperament reference (A4)
A4_MIDI = 69
DEFAULT_REFERENCE_HZ = 440.0

# Chord roots live in the octave starting at middle C (C4 = 60)
ROOT_OCTAVE = 4
DEFAULT_BASE_NOTE = 60


class ColorErrorReason(str, Enum):
    """Why a color value was rejected."""

    EMPTY = "empty"
    MALFORMED = "malformed"


# Response status values
ResponseStatus = Literal["success", "error"]


class ErrorMessages:
    """Standardized error messages."""

    EMPTY_COLOR = "Color value cannot be null or empty."
    MALFORMED_COLOR = "Invalid HEX color format: '{value}'. Expected #RRGGBB or RRGGBB."
    INVALID_CONFIG = "Invalid palette config '{path}': {detail}"
