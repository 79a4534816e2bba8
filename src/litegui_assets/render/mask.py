"""Annulus-sector stencil.

An :class:`AnnulusSector` describes a ring bounded by an inner and an outer
radius, optionally restricted to an angular range. It is a binary stencil:
a pixel is either covered (alpha 255) or not (alpha 0). Every badge, wedge,
ring segment and arc the generator produces is one of these, parameterised
differently.

Angles are radians measured counter-clockwise from the positive x axis with
the screen y axis flipped, so ``pi/2`` points to the top of the image. When
``start_angle == end_angle`` the sector covers the whole ring, not an empty
slice. A range with ``start_angle > end_angle`` wraps through the +/-pi
branch cut.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Tuple

import numpy as np
from PIL import Image

from litegui_assets.errors import GeometryError

__all__ = ["Point", "Rect", "AnnulusSector", "OPAQUE", "TRANSPARENT_ALPHA"]

Point = Tuple[int, int]
# (min_x, min_y, max_x, max_y); max is exclusive like a Pillow box
Rect = Tuple[int, int, int, int]

OPAQUE = 255
TRANSPARENT_ALPHA = 0


@dataclass(frozen=True, slots=True)
class AnnulusSector:
    center: Point
    outer_radius: float
    inner_radius: float = 0.0
    start_angle: float = 0.0
    end_angle: float = 0.0

    def __post_init__(self) -> None:
        if self.inner_radius > self.outer_radius:
            raise GeometryError(self.inner_radius, self.outer_radius)

    @property
    def full_ring(self) -> bool:
        return self.start_angle == self.end_angle

    def bounds(self) -> Rect:
        """Square box of side ``2*ceil(outer_radius)`` centred on the mask."""
        rr = int(math.ceil(self.outer_radius))
        cx, cy = self.center
        return (cx - rr, cy - rr, cx + rr, cy + rr)

    def contains(self, x: int, y: int) -> bool:
        dx = float(x - self.center[0])
        dy = float(y - self.center[1])
        rr = dx * dx + dy * dy
        if rr < self.inner_radius * self.inner_radius:
            return False
        if rr > self.outer_radius * self.outer_radius:
            return False
        if self.full_ring:
            return True
        a = math.atan2(-dy, dx)
        if self.start_angle < self.end_angle:
            return self.start_angle <= a <= self.end_angle
        return a >= self.start_angle or a <= self.end_angle

    def alpha_at(self, x: int, y: int) -> int:
        return OPAQUE if self.contains(x, y) else TRANSPARENT_ALPHA

    def rasterize(self, box: Rect) -> np.ndarray:
        """Evaluate :meth:`contains` for every pixel of *box* at once.

        Returns a ``(height, width)`` uint8 array holding 255 where the
        stencil covers the pixel and 0 elsewhere. Row ``r`` / column ``c``
        correspond to pixel ``(box[0] + c, box[1] + r)``.
        """
        x0, y0, x1, y1 = box
        if x1 <= x0 or y1 <= y0:
            return np.zeros((max(0, y1 - y0), max(0, x1 - x0)), dtype=np.uint8)

        ys, xs = np.mgrid[y0:y1, x0:x1]
        dx = (xs - self.center[0]).astype(np.float64)
        dy = (ys - self.center[1]).astype(np.float64)
        rr = dx * dx + dy * dy
        inside = (rr >= self.inner_radius * self.inner_radius) & (
            rr <= self.outer_radius * self.outer_radius
        )
        if not self.full_ring:
            a = np.arctan2(-dy, dx)
            if self.start_angle < self.end_angle:
                inside &= (a >= self.start_angle) & (a <= self.end_angle)
            else:
                inside &= (a >= self.start_angle) | (a <= self.end_angle)
        return np.where(inside, OPAQUE, TRANSPARENT_ALPHA).astype(np.uint8)

    def to_image(self, box: Rect) -> Image.Image:
        """The raster of *box* as a Pillow ``L`` image usable as a paste mask."""
        return Image.fromarray(self.rasterize(box))
