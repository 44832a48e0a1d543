"""
Color-to-chord converter - runs the whole pipeline for one color.

parse -> map -> build. A parse failure stops the pipeline before any
mapping happens; the mapping and building stages cannot fail.
"""

from __future__ import annotations

from chuk_mcp_palette.config import PaletteConfig
from chuk_mcp_palette.core import (
    build_chord,
    classify_chord,
    parse_hex_color,
    pitch_class_from_hue,
)
from chuk_mcp_palette.models import ChordOutput, HSLModel


def convert_color(value: str | None, config: PaletteConfig | None = None) -> ChordOutput:
    """
    Convert a hex color into a chord.

    Args:
        value: Hex color, with or without '#'
        config: Mapping config (defaults if None)

    Returns:
        The full conversion record

    Raises:
        InvalidColorFormatError: If value is empty or malformed
    """
    config = config or PaletteConfig()

    hsl = parse_hex_color(value)
    pitch_class = pitch_class_from_hue(hsl.h)
    kind = classify_chord(
        hsl.s,
        hsl.l,
        mode_threshold=config.mode_threshold,
        extension_threshold=config.extension_threshold,
    )
    notes, frequencies = build_chord(pitch_class, kind, reference_hz=config.reference_hz)

    return ChordOutput(
        hex=value,
        hsl=HSLModel.from_color(hsl),
        pitch_class=pitch_class.spell(),
        mode=kind.label,
        midi_notes=notes,
        frequency_hz=frequencies,
    )
