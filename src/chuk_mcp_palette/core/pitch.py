"""
Pitch primitives - PitchClass and the MIDI/frequency math.

PitchClass represents the 12 chromatic pitches (octave-independent).
Frequencies use twelve-tone equal temperament anchored at A4.
"""

from __future__ import annotations

from enum import IntEnum

from chuk_mcp_palette.constants import A4_MIDI, DEFAULT_REFERENCE_HZ, ROOT_OCTAVE

# Sharp spellings (module level to avoid IntEnum member issues)
_SHARP_NAMES: tuple[str, ...] = (
    "C",
    "C#",
    "D",
    "D#",
    "E",
    "F",
    "F#",
    "G",
    "G#",
    "A",
    "A#",
    "B",
)


class PitchClass(IntEnum):
    """
    The 12 chromatic pitch classes (0-11).

    Octave-independent - C4 and C5 are both PitchClass.C.
    Values follow the hue order: C is 0 degrees, C# is 30, and so on.

    Spelling is a display concern, handled at serialization.
    Internally, we use sharp names (Cs, Ds, etc.).
    """

    C = 0
    Cs = 1  # C# / Db
    D = 2
    Ds = 3  # D# / Eb
    E = 4
    F = 5
    Fs = 6  # F# / Gb
    G = 7
    Gs = 8  # G# / Ab
    A = 9
    As = 10  # A# / Bb
    B = 11

    def to_midi(self, octave: int = ROOT_OCTAVE) -> int:
        """Convert to MIDI note number. C4 = 60."""
        return self.value + (octave + 1) * 12

    def spell(self) -> str:
        """Get the sharp name, e.g. 'C#'."""
        return _SHARP_NAMES[self.value]

    @classmethod
    def from_name(cls, name: str) -> PitchClass | None:
        """
        Look up a pitch class by its exact sharp name.

        Only the 12 names 'C' ... 'B' match. Anything else, including
        flats, lowercase and padded names, gives None.
        """
        if name in _SHARP_NAMES:
            return cls(_SHARP_NAMES.index(name))
        return None


def midi_to_frequency(midi_note: int, reference_hz: float = DEFAULT_REFERENCE_HZ) -> float:
    """
    Equal-tempered frequency of a MIDI note.

    Args:
        midi_note: MIDI note number (69 = A4)
        reference_hz: Frequency of A4

    Returns:
        Frequency in Hz, unrounded
    """
    return reference_hz * 2 ** ((midi_note - A4_MIDI) / 12)
