"""
Chord primitives - ChordQuality and the chord builder.

Chords are ordered interval stacks measured from the root. The order of
the intervals is the order of the notes that come out.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from types import MappingProxyType
from typing import ClassVar

from chuk_mcp_palette.constants import DEFAULT_BASE_NOTE, DEFAULT_REFERENCE_HZ

from .mapping import ChordKind
from .pitch import PitchClass, midi_to_frequency

logger = logging.getLogger(__name__)

MINOR_SEVENTH = 10

# Root note for each pitch class, one octave from middle C
ROOT_MIDI: MappingProxyType[PitchClass, int] = MappingProxyType(
    {pc: pc.to_midi() for pc in PitchClass}
)


@dataclass(frozen=True)
class ChordQuality:
    """
    A chord quality defined by its intervals from the root.

    A major triad is root + M3 + P5 (0, 4, 7 semitones).

    Immutable and hashable.
    """

    intervals: tuple[int, ...]
    name: str = ""

    MAJOR: ClassVar[ChordQuality]
    MINOR: ClassVar[ChordQuality]

    def extended(self, interval: int, name: str = "") -> ChordQuality:
        """Return a new quality with an interval appended."""
        return ChordQuality(self.intervals + (interval,), name or self.name)

    def get_midi_notes(self, root_midi: int) -> list[int]:
        """MIDI note numbers for this quality over a root, in interval order."""
        return [root_midi + interval for interval in self.intervals]


ChordQuality.MAJOR = ChordQuality((0, 4, 7), "major")
ChordQuality.MINOR = ChordQuality((0, 3, 7), "minor")


def quality_for(kind: ChordKind) -> ChordQuality:
    """Resolve a chord kind to its interval stack."""
    quality = ChordQuality.MINOR if kind.is_minor else ChordQuality.MAJOR
    if kind.has_seventh:
        quality = quality.extended(MINOR_SEVENTH, kind.label)
    return quality


def root_midi(pitch_class: PitchClass | str) -> int:
    """
    Base MIDI note for a pitch class (C4 = 60 ... B4 = 71).

    Names must be one of the 12 sharp names exactly. Anything else
    falls back to middle C instead of failing.
    """
    if not isinstance(pitch_class, PitchClass):
        resolved = PitchClass.from_name(pitch_class)
        if resolved is None:
            logger.debug(f"Unknown pitch class {pitch_class!r}, using {DEFAULT_BASE_NOTE}")
            return DEFAULT_BASE_NOTE
        pitch_class = resolved
    return ROOT_MIDI[pitch_class]


def build_chord(
    pitch_class: PitchClass | str,
    kind: ChordKind | str,
    *,
    reference_hz: float = DEFAULT_REFERENCE_HZ,
) -> tuple[list[int], list[float]]:
    """
    Build a chord's MIDI notes and frequencies.

    Args:
        pitch_class: Root pitch class (a PitchClass or a name like 'F#')
        kind: Chord kind, or its label (e.g. 'minor-7')
        reference_hz: Frequency of A4

    Returns:
        (notes, frequencies) as parallel lists in interval order
    """
    if isinstance(kind, str):
        kind = ChordKind.from_label(kind)

    notes = quality_for(kind).get_midi_notes(root_midi(pitch_class))
    frequencies = [midi_to_frequency(note, reference_hz) for note in notes]
    return notes, frequencies
