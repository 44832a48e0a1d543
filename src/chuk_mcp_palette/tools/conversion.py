"""
Conversion tools - MCP tools for turning colors into chords.

Tools for converting a color, exporting the result as YAML, and
describing the active color-to-music mapping.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import yaml

from chuk_mcp_palette.config import PaletteConfig
from chuk_mcp_palette.constants import HUE_SEGMENT_DEGREES
from chuk_mcp_palette.converter import convert_color
from chuk_mcp_palette.core import (
    ChordKind,
    ChordMode,
    Extension,
    InvalidColorFormatError,
    PitchClass,
    quality_for,
    root_midi,
)

if TYPE_CHECKING:
    from chuk_mcp_server import ChukMCPServer

logger = logging.getLogger(__name__)


def _invalid_input(error: InvalidColorFormatError) -> str:
    """Error envelope for a rejected color value."""
    return json.dumps(
        {
            "status": "error",
            "error_type": "invalid_input",
            "reason": error.reason.value,
            "message": str(error),
        }
    )


def register_conversion_tools(
    mcp: ChukMCPServer,
    config: PaletteConfig | None = None,
) -> dict[str, Any]:
    """
    Register color conversion tools with the MCP server.

    Args:
        mcp: The MCP server instance
        config: Mapping config (defaults if None)

    Returns:
        Dictionary of registered tool functions
    """
    config = config or PaletteConfig()
    tools: dict[str, Any] = {}

    @mcp.tool  # type: ignore[arg-type]
    async def palette_convert_color(color_value: str | None = None) -> str:
        """
        Convert a hex color into a chord.

        Hue picks the root pitch class, saturation picks major/minor,
        and lightness decides whether a minor seventh is added.

        Args:
            color_value: Hex color like '#3A9FD9' or '3a9fd9'

        Returns:
            JSON string with HSL, pitch class, mode, MIDI notes and frequencies

        Example:
            palette_convert_color(color_value="#3A9FD9")
        """
        try:
            result = convert_color(color_value, config)
            logger.debug(f"Converted {color_value} -> {result.pitch_class} {result.mode}")
            return json.dumps({"status": "success", "result": result.model_dump()})
        except InvalidColorFormatError as e:
            return _invalid_input(e)
        except Exception as e:
            logger.exception("Failed to convert color")
            return json.dumps({"status": "error", "message": str(e)})

    tools["palette_convert_color"] = palette_convert_color

    @mcp.tool  # type: ignore[arg-type]
    async def palette_export_yaml(color_value: str | None = None) -> str:
        """
        Convert a color and return the result as YAML.

        Args:
            color_value: Hex color like '#3A9FD9'

        Returns:
            JSON string containing the YAML content

        Example:
            palette_export_yaml(color_value="#FF0000")
        """
        try:
            result = convert_color(color_value, config)
            yaml_content = yaml.safe_dump(
                result.to_yaml_dict(), default_flow_style=False, sort_keys=False
            )

            return json.dumps(
                {
                    "status": "success",
                    "yaml": yaml_content,
                }
            )
        except InvalidColorFormatError as e:
            return _invalid_input(e)
        except Exception as e:
            logger.exception("Failed to export YAML")
            return json.dumps({"status": "error", "message": str(e)})

    tools["palette_export_yaml"] = palette_export_yaml

    @mcp.tool  # type: ignore[arg-type]
    async def palette_describe_mapping() -> str:
        """
        Describe how colors map to chords.

        Returns the pitch class for each hue segment, the thresholds
        for mode and extension, and the interval stack of each chord kind.

        Returns:
            JSON string with the mapping tables

        Example:
            palette_describe_mapping()
        """
        try:
            kinds = [ChordKind(mode, ext) for mode in ChordMode for ext in Extension]

            return json.dumps(
                {
                    "status": "success",
                    "hue_segment_degrees": HUE_SEGMENT_DEGREES,
                    "pitch_classes": [
                        {
                            "name": pc.spell(),
                            "hue": pc.value * HUE_SEGMENT_DEGREES,
                            "root_midi": root_midi(pc),
                        }
                        for pc in PitchClass
                    ],
                    "mode_threshold": config.mode_threshold,
                    "extension_threshold": config.extension_threshold,
                    "reference_hz": config.reference_hz,
                    "chords": {kind.label: list(quality_for(kind).intervals) for kind in kinds},
                }
            )
        except Exception as e:
            logger.exception("Failed to describe mapping")
            return json.dumps({"status": "error", "message": str(e)})

    tools["palette_describe_mapping"] = palette_describe_mapping

    return tools
