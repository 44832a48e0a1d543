"""
Color-to-music mapping - hue picks the root, saturation and lightness
pick the chord kind.

The chord kind is passed on as a structured ChordKind. Its label
("major", "minor-7", ...) is only a serialization.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from chuk_mcp_palette.constants import (
    DEFAULT_EXTENSION_THRESHOLD,
    DEFAULT_MODE_THRESHOLD,
    HUE_SEGMENT_DEGREES,
)

from .pitch import PitchClass


class ChordMode(str, Enum):
    """Chord mode (third quality)."""

    MAJOR = "major"
    MINOR = "minor"


class Extension(str, Enum):
    """Chord extension above the triad."""

    NONE = ""
    SEVENTH = "7"


@dataclass(frozen=True)
class ChordKind:
    """
    Mode plus optional extension.

    Serializes as "<mode>" or "<mode>-<extension>".
    """

    mode: ChordMode
    extension: Extension = Extension.NONE

    @property
    def label(self) -> str:
        """The serialized form, e.g. 'major-7'."""
        if self.extension == Extension.NONE:
            return self.mode.value
        return f"{self.mode.value}-{self.extension.value}"

    @property
    def is_minor(self) -> bool:
        return self.mode == ChordMode.MINOR

    @property
    def has_seventh(self) -> bool:
        return self.extension == Extension.SEVENTH

    @classmethod
    def from_label(cls, label: str) -> ChordKind:
        """
        Read a label back into a ChordKind.

        Uses the loose rules older callers rely on: a 'minor' prefix
        selects minor (anything else is major), and a '7' anywhere in
        the label adds the seventh.
        """
        mode = ChordMode.MINOR if label.startswith(ChordMode.MINOR.value) else ChordMode.MAJOR
        extension = Extension.SEVENTH if Extension.SEVENTH.value in label else Extension.NONE
        return cls(mode, extension)

    def __str__(self) -> str:
        return self.label


def pitch_class_from_hue(hue: int) -> PitchClass:
    """
    Map a hue in degrees to a pitch class.

    Each pitch class owns a 30 degree segment centred on its multiple
    of 30, so 345-359 wraps around to C.
    """
    return PitchClass(round(hue / HUE_SEGMENT_DEGREES) % 12)


def classify_chord(
    saturation: int,
    lightness: int,
    *,
    mode_threshold: int = DEFAULT_MODE_THRESHOLD,
    extension_threshold: int = DEFAULT_EXTENSION_THRESHOLD,
) -> ChordKind:
    """
    Pick the chord kind for a saturation/lightness pair.

    Args:
        saturation: Saturation percentage
        lightness: Lightness percentage
        mode_threshold: Saturation at or above this is major
        extension_threshold: Lightness at or above this adds a seventh

    Returns:
        The chord kind
    """
    mode = ChordMode.MAJOR if saturation >= mode_threshold else ChordMode.MINOR
    extension = Extension.SEVENTH if lightness >= extension_threshold else Extension.NONE
    return ChordKind(mode, extension)


def mode_and_extension(
    saturation: int,
    lightness: int,
    *,
    mode_threshold: int = DEFAULT_MODE_THRESHOLD,
    extension_threshold: int = DEFAULT_EXTENSION_THRESHOLD,
) -> str:
    """Label form of classify_chord, e.g. 'major-7'."""
    return classify_chord(
        saturation,
        lightness,
        mode_threshold=mode_threshold,
        extension_threshold=extension_threshold,
    ).label
