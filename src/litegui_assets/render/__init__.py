"""Stencils, canvas compositing and icon decoding."""

from litegui_assets.render.canvas import TRANSPARENT, Canvas, Color, Op
from litegui_assets.render.icons import load_icon
from litegui_assets.render.mask import AnnulusSector, Point, Rect

__all__ = [
    "AnnulusSector",
    "Canvas",
    "Color",
    "Op",
    "Point",
    "Rect",
    "TRANSPARENT",
    "load_icon",
]
