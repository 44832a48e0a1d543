"""
Pydantic models for the palette system.

This module provides:
- HSLModel: Serializable HSL triple
- ChordOutput: Complete conversion result
"""

from chuk_mcp_palette.models.conversion import ChordOutput, HSLModel

__all__ = [
    "ChordOutput",
    "HSLModel",
]
