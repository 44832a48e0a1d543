"""
Tests for the color-to-chord pipeline and its models.
"""

import pytest
from pydantic import ValidationError

from chuk_mcp_palette.config import PaletteConfig
from chuk_mcp_palette.converter import convert_color
from chuk_mcp_palette.core import InvalidColorFormatError
from chuk_mcp_palette.models import ChordOutput, HSLModel


class TestConvertColor:
    """Tests for convert_color."""

    def test_reference_blue(self) -> None:
        """#3A9FD9 is a G major seventh."""
        result = convert_color("#3A9FD9")
        assert result.hex == "#3A9FD9"
        assert (result.hsl.h, result.hsl.s, result.hsl.l) == (202, 68, 54)
        assert result.pitch_class == "G"
        assert result.mode == "major-7"
        assert result.midi_notes == [67, 71, 74, 77]
        assert result.frequency_hz == pytest.approx([392.00, 493.88, 587.33, 698.46], abs=0.01)

    def test_blue_primary(self) -> None:
        result = convert_color("0000ff")
        assert result.pitch_class == "G#"
        assert result.mode == "major-7"
        assert result.midi_notes == [68, 72, 75, 78]

    def test_keeps_input_verbatim(self) -> None:
        assert convert_color("3a9fd9").hex == "3a9fd9"

    def test_black(self) -> None:
        result = convert_color("#000000")
        assert result.pitch_class == "C"
        assert result.mode == "minor"
        assert result.midi_notes == [60, 63, 67]

    def test_white(self) -> None:
        result = convert_color("#FFFFFF")
        assert result.mode == "minor-7"
        assert result.midi_notes == [60, 63, 67, 70]

    def test_parallel_arrays(self) -> None:
        result = convert_color("#FF00FF")
        assert len(result.midi_notes) == len(result.frequency_hz)

    def test_config_thresholds(self) -> None:
        config = PaletteConfig(mode_threshold=70)
        result = convert_color("#3A9FD9", config)
        assert result.mode == "minor-7"
        assert result.midi_notes == [67, 70, 74, 77]

    def test_config_reference_pitch(self) -> None:
        config = PaletteConfig(reference_hz=432.0)
        result = convert_color("#FF0000", config)
        assert result.frequency_hz[0] == pytest.approx(432.0 * 2 ** (-9 / 12))

    @pytest.mark.parametrize("value", [None, "", "#12345", "#ZZZZZZ"])
    def test_invalid_aborts(self, value: str | None) -> None:
        with pytest.raises(InvalidColorFormatError):
            convert_color(value)


class TestChordOutput:
    """Tests for the ChordOutput model."""

    def test_rejects_mismatched_lengths(self) -> None:
        with pytest.raises(ValidationError):
            ChordOutput(
                hex="#000000",
                hsl=HSLModel(h=0, s=0, l=0),
                pitch_class="C",
                mode="minor",
                midi_notes=[60, 63, 67],
                frequency_hz=[261.63],
            )

    def test_hsl_ranges(self) -> None:
        with pytest.raises(ValidationError):
            HSLModel(h=360, s=0, l=0)
        with pytest.raises(ValidationError):
            HSLModel(h=0, s=101, l=0)

    def test_frozen(self) -> None:
        result = convert_color("#000000")
        with pytest.raises(ValidationError):
            result.mode = "major"

    def test_yaml_dict_order(self) -> None:
        data = convert_color("#FF0000").to_yaml_dict()
        assert list(data) == ["hex", "hsl", "pitch_class", "mode", "midi_notes", "frequency_hz"]
        assert data["hsl"] == {"h": 0, "s": 100, "l": 50}
