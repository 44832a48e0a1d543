"""
Conversion models - the records that cross the tool boundary.

ChordOutput is what a conversion hands back to the caller.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field, model_validator

from chuk_mcp_palette.core import HSLColor


class HSLModel(BaseModel):
    """Serializable HSL triple."""

    h: int = Field(..., ge=0, lt=360, description="Hue in degrees")
    s: int = Field(..., ge=0, le=100, description="Saturation percentage")
    l: int = Field(..., ge=0, le=100, description="Lightness percentage")  # noqa: E741

    model_config = {"frozen": True}

    @classmethod
    def from_color(cls, color: HSLColor) -> HSLModel:
        """Build from a core HSLColor."""
        return cls(h=color.h, s=color.s, l=color.l)


class ChordOutput(BaseModel):
    """
    The result of converting one color into a chord.

    midi_notes and frequency_hz are parallel: index i of one
    corresponds to index i of the other.
    """

    hex: str = Field(..., description="The color value as given")
    hsl: HSLModel = Field(..., description="Parsed HSL triple")
    pitch_class: str = Field(..., description="Root pitch class, e.g. 'G#'")
    mode: str = Field(..., description="Mode/extension label, e.g. 'major-7'")
    midi_notes: list[int] = Field(..., description="Chord notes in interval order")
    frequency_hz: list[float] = Field(..., description="Frequency of each note")

    model_config = {"frozen": True}

    @model_validator(mode="after")
    def validate_parallel(self) -> ChordOutput:
        """Notes and frequencies must line up."""
        if len(self.midi_notes) != len(self.frequency_hz):
            raise ValueError(
                f"midi_notes ({len(self.midi_notes)}) and frequency_hz "
                f"({len(self.frequency_hz)}) differ in length"
            )
        return self

    def to_yaml_dict(self) -> dict[str, Any]:
        """Plain dict in display order, for YAML export."""
        return {
            "hex": self.hex,
            "hsl": {"h": self.hsl.h, "s": self.hsl.s, "l": self.hsl.l},
            "pitch_class": self.pitch_class,
            "mode": self.mode,
            "midi_notes": list(self.midi_notes),
            "frequency_hz": list(self.frequency_hz),
        }
