"""
MCP tool implementations.

Tools are organized by domain:
- conversion - Color to chord conversion and mapping description
"""

from chuk_mcp_palette.tools.conversion import register_conversion_tools

__all__ = [
    "register_conversion_tools",
]
