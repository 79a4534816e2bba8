"""Pillow-backed frame canvas and the two compositing operators.

A :class:`Canvas` wraps one RGBA image for the lifetime of a single frame.
Shapes are painted through an :class:`~litegui_assets.render.mask.AnnulusSector`
stencil with either:

* ``Op.REPLACE``: inside the stencil's bounds the destination becomes the
  source colour where the stencil is opaque and fully transparent where it
  is not. Pixels outside the bounds are left alone.
* ``Op.OVER``: the source colour is alpha-blended over the destination where
  the stencil is opaque; everything else is preserved.

Example:
    canvas = Canvas(32, 32)
    canvas.fill((255, 153, 0, 255), AnnulusSector((16, 16), 8.0), Op.REPLACE)
    data = canvas.encode()
"""

from __future__ import annotations

import io
from enum import Enum
from typing import Tuple

from PIL import Image

from litegui_assets.errors import EncodeError
from litegui_assets.render.mask import AnnulusSector, Point, Rect

__all__ = ["Color", "TRANSPARENT", "Op", "Canvas"]

Color = Tuple[int, int, int, int]

TRANSPARENT: Color = (0, 0, 0, 0)


class Op(Enum):
    REPLACE = "replace"
    OVER = "over"


class Canvas:
    def __init__(self, width: int, height: int) -> None:
        self._width, self._height = int(width), int(height)
        self._img = Image.new("RGBA", (self._width, self._height), TRANSPARENT)

    @property
    def image(self) -> Image.Image:
        return self._img

    @property
    def size(self) -> Tuple[int, int]:
        return (self._width, self._height)

    @property
    def bounds(self) -> Rect:
        return (0, 0, self._width, self._height)

    @property
    def center(self) -> Point:
        return (self._width // 2, self._height // 2)

    def pixel(self, x: int, y: int) -> Color:
        r, g, b, a = self._img.getpixel((x, y))
        return (int(r), int(g), int(b), int(a))

    def _clip(self, box: Rect) -> Rect | None:
        x0 = max(box[0], 0)
        y0 = max(box[1], 0)
        x1 = min(box[2], self._width)
        y1 = min(box[3], self._height)
        if x1 <= x0 or y1 <= y0:
            return None
        return (x0, y0, x1, y1)

    def fill(self, color: Color, mask: AnnulusSector, op: Op = Op.OVER) -> None:
        """Paint *color* through *mask* using compositing operator *op*."""
        box = self._clip(mask.bounds())
        if box is None:
            return
        w, h = box[2] - box[0], box[3] - box[1]
        layer = Image.new("RGBA", (w, h), TRANSPARENT)
        layer.paste(tuple(int(c) for c in color), (0, 0, w, h), mask.to_image(box))
        if op is Op.REPLACE:
            self._img.paste(layer, (box[0], box[1]))
        else:
            self._img.alpha_composite(layer, dest=(box[0], box[1]))

    def overlay(self, icon: Image.Image, offset: Point = (0, 0)) -> None:
        """Alpha-blend *icon* over the canvas with its top-left at *offset*.

        The icon may hang off any edge; only the overlapping part is drawn.
        """
        ox, oy = int(offset[0]), int(offset[1])
        src = icon if icon.mode == "RGBA" else icon.convert("RGBA")
        iw, ih = src.size
        box = self._clip((ox, oy, ox + iw, oy + ih))
        if box is None:
            return
        part = src.crop((box[0] - ox, box[1] - oy, box[2] - ox, box[3] - oy))
        self._img.alpha_composite(part, dest=(box[0], box[1]))

    def encode(self, jpeg_quality: int | None = None) -> bytes:
        """Encode the canvas as JPEG when *jpeg_quality* is set, else PNG.

        JPEG has no alpha channel; the alpha plane is dropped, so untouched
        (transparent black) pixels come out black.
        """
        buf = io.BytesIO()
        try:
            if jpeg_quality is not None:
                self._img.convert("RGB").save(
                    buf, format="JPEG", quality=int(jpeg_quality)
                )
            else:
                self._img.save(buf, format="PNG")
        except (OSError, ValueError) as exc:
            fmt = "JPEG" if jpeg_quality is not None else "PNG"
            raise EncodeError(f"{fmt} encode failed: {exc}") from exc
        return buf.getvalue()
