"""Pydantic model for generator settings."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from litegui_assets.errors import ConfigurationError

from .values import ENCODING, PATHS


class GeneratorSettings(BaseModel):
    """Where icons are read from, where output goes, and encoder quality.

    Parameters
    ----------
    source_root: Directory holding the hand-edited source icons.
    output_root: Directory the generated tree is written under. Created on
        demand.
    boot_jpeg_quality: JPEG quality for the boot animation frames (1-95).
    """

    model_config = ConfigDict(frozen=True)

    source_root: Path = Field(default=Path(PATHS["source_root"]))
    output_root: Path = Field(default=Path(PATHS["output_root"]))
    boot_jpeg_quality: int = Field(default=int(ENCODING["boot_jpeg_quality"]))

    @field_validator("boot_jpeg_quality")
    @classmethod
    def _chk_quality(cls, v: int) -> int:
        if not 1 <= v <= 95:
            raise ValueError("boot_jpeg_quality must be within 1..95")
        return v


def make_settings(**overrides: Any) -> GeneratorSettings:
    """Build settings from the YAML defaults and any non-None *overrides*.

    Validation failures are reported as :class:`ConfigurationError`.
    """
    data = {k: v for k, v in overrides.items() if v is not None}
    try:
        return GeneratorSettings.model_validate(data)
    except ValidationError as exc:
        raise ConfigurationError(f"invalid settings: {exc}") from exc
