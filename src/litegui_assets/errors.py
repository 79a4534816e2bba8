"""Error taxonomy for the asset generator.

Every failure is fatal for a build run. Leaf functions raise one of the
classes below and :func:`litegui_assets.cli.main` is the single place that
reports the error and turns it into a non-zero exit status.
"""

from __future__ import annotations

from pathlib import Path

__all__ = [
    "AssetError",
    "ConfigurationError",
    "GeometryError",
    "AssetIOError",
    "IconDecodeError",
    "EncodeError",
]


class AssetError(Exception):
    """Base class for all generator failures."""


class ConfigurationError(AssetError):
    """Invalid settings, frame range or family selection."""


class GeometryError(ConfigurationError):
    """A mask was described with an inner radius larger than its outer radius."""

    def __init__(self, inner_radius: float, outer_radius: float) -> None:
        super().__init__(
            f"inner radius {inner_radius!r} > outer radius {outer_radius!r}"
        )
        self.inner_radius = inner_radius
        self.outer_radius = outer_radius


class AssetIOError(AssetError):
    """Directory creation, file write or frame copy failed."""

    def __init__(self, path: Path | str, cause: BaseException) -> None:
        super().__init__(f"{path}: {cause}")
        self.path = Path(path)
        self.cause = cause


class IconDecodeError(AssetError):
    """A source icon is missing or is not a decodable image."""

    def __init__(self, path: Path | str, cause: BaseException) -> None:
        super().__init__(f"{path}: {cause}")
        self.path = Path(path)
        self.cause = cause


class EncodeError(AssetError):
    """Pillow failed to encode a finished frame."""
