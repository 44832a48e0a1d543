"""
Palette configuration - mapping thresholds and tuning.

Config lives in an optional YAML file. Every field has a default, so an
absent file (or an empty one) gives the standard mapping.

Example palette.yaml:

    mode_threshold: 50
    extension_threshold: 50
    reference_hz: 440.0
"""

from __future__ import annotations

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, ValidationError

from chuk_mcp_palette.constants import (
    DEFAULT_EXTENSION_THRESHOLD,
    DEFAULT_MODE_THRESHOLD,
    DEFAULT_REFERENCE_HZ,
    ErrorMessages,
)


class ConfigError(ValueError):
    """Raised when a config file can't be read or validated."""


class PaletteConfig(BaseModel):
    """Tunable parts of the color-to-chord mapping."""

    mode_threshold: int = Field(
        DEFAULT_MODE_THRESHOLD,
        ge=0,
        le=100,
        description="Saturation at or above this is major",
    )
    extension_threshold: int = Field(
        DEFAULT_EXTENSION_THRESHOLD,
        ge=0,
        le=100,
        description="Lightness at or above this adds a minor seventh",
    )
    reference_hz: float = Field(
        DEFAULT_REFERENCE_HZ,
        gt=0,
        description="Frequency of A4 (MIDI 69)",
    )

    model_config = {"frozen": True, "extra": "forbid"}


def load_config(path: Path | None = None) -> PaletteConfig:
    """
    Load config from a YAML file.

    Args:
        path: Path to the YAML file, or None for defaults

    Returns:
        The loaded config

    Raises:
        ConfigError: If the file exists but is unreadable or invalid
    """
    if path is None or not path.exists():
        return PaletteConfig()

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(ErrorMessages.INVALID_CONFIG.format(path=path, detail=e)) from e

    if not isinstance(data, dict):
        raise ConfigError(
            ErrorMessages.INVALID_CONFIG.format(path=path, detail="expected a mapping")
        )

    try:
        return PaletteConfig(**data)
    except ValidationError as e:
        raise ConfigError(ErrorMessages.INVALID_CONFIG.format(path=path, detail=e)) from e
