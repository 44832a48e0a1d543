#!/usr/bin/env python3
"""
Async Palette MCP Server using chuk-mcp-server

This server provides MCP tools for turning colors into chords. A hex
color is parsed into hue/saturation/lightness, hue picks the root pitch
class, and saturation/lightness pick the chord mode and extension.

The server provides tools for:
- Converting a hex color into MIDI notes and frequencies
- Exporting a conversion as YAML
- Describing the active color-to-music mapping
"""

import logging
import os
from pathlib import Path

from chuk_mcp_server import ChukMCPServer

from chuk_mcp_palette.config import load_config
from chuk_mcp_palette.tools import register_conversion_tools

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

# Create the MCP server instance
mcp = ChukMCPServer("chuk-mcp-palette")

# Config - explicit path from the environment, else palette.yaml in cwd
CONFIG_PATH = Path(os.environ.get("PALETTE_CONFIG", Path.cwd() / "palette.yaml"))
config = load_config(CONFIG_PATH)

# Register all tools
conversion_tools = register_conversion_tools(mcp, config)

# Export tool functions for direct access
palette_convert_color = conversion_tools["palette_convert_color"]
palette_export_yaml = conversion_tools["palette_export_yaml"]
palette_describe_mapping = conversion_tools["palette_describe_mapping"]

logger.info("CHUK Palette MCP Server initialized")
logger.info(f"  Config path: {CONFIG_PATH}")
logger.info(
    f"  Thresholds: mode>={config.mode_threshold} extension>={config.extension_threshold}"
)
logger.info(f"  Reference pitch: A4={config.reference_hz} Hz")
