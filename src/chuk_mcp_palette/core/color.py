"""
Color primitives - hex parsing and the HSL triple.

This is the front of the pipeline. Everything downstream assumes a valid
HSLColor, so every input problem is caught here.
"""

from __future__ import annotations

import re
from dataclasses import dataclass

from chuk_mcp_palette.constants import ColorErrorReason, ErrorMessages

_HEX_PATTERN = re.compile(r"#?([0-9a-fA-F]{6})")


class InvalidColorFormatError(ValueError):
    """Raised when a color value is empty or not a 6-digit hex string."""

    def __init__(self, value: object, reason: ColorErrorReason) -> None:
        self.value = value
        self.reason = reason
        if reason == ColorErrorReason.EMPTY:
            message = ErrorMessages.EMPTY_COLOR
        else:
            message = ErrorMessages.MALFORMED_COLOR.format(value=value)
        super().__init__(message)


@dataclass(frozen=True)
class HSLColor:
    """
    A color as hue/saturation/lightness.

    h is in degrees [0, 360), s and l are percentages [0, 100].
    Immutable and hashable.
    """

    h: int
    s: int
    l: int  # noqa: E741

    def as_tuple(self) -> tuple[int, int, int]:
        """Return (h, s, l)."""
        return (self.h, self.s, self.l)


def parse_hex_color(value: str | None) -> HSLColor:
    """
    Parse a hex color string into HSL.

    Accepts 'RRGGBB' or '#RRGGBB', case-insensitive. Values are rounded
    with round() (half-to-even).

    Args:
        value: The color string

    Returns:
        The HSL triple

    Raises:
        InvalidColorFormatError: If value is None/empty or not 6 hex digits
    """
    if value is None or value == "":
        raise InvalidColorFormatError(value, ColorErrorReason.EMPTY)

    match = _HEX_PATTERN.fullmatch(value) if isinstance(value, str) else None
    if match is None:
        raise InvalidColorFormatError(value, ColorErrorReason.MALFORMED)

    digits = match.group(1)
    r = int(digits[0:2], 16) / 255
    g = int(digits[2:4], 16) / 255
    b = int(digits[4:6], 16) / 255

    high = max(r, g, b)
    low = min(r, g, b)
    delta = high - low
    lightness = (high + low) / 2

    hue = 0.0
    saturation = 0.0
    if delta != 0:
        # Exactly 0.5 takes the second branch
        if lightness < 0.5:
            saturation = delta / (high + low)
        else:
            saturation = delta / (2 - high - low)

        # Channel priority on ties: red, then green, then blue
        if high == r:
            hue = (g - b) / delta + (6 if g < b else 0)
        elif high == g:
            hue = (b - r) / delta + 2
        else:
            hue = (r - g) / delta + 4
        hue *= 60

    # A hue just under 360 rounds up to it; keep the circle half-open
    return HSLColor(
        h=round(hue) % 360,
        s=round(saturation * 100),
        l=round(lightness * 100),
    )
