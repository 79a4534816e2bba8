"""Boot animation: a shrinking, fading stack of concentric discs.

Frame ``i`` paints ``i + 1`` concentric discs from the largest to the
smallest. Disc radius shrinks with ``i - c`` and the colour intensity is
modulated by a sine of the ring index, which gives the glow its banding.
The shutdown sequence is every second boot frame played backwards and is
produced by copying the boot files rather than re-rendering them.
"""

from __future__ import annotations

import logging
import math

from litegui_assets.frames import AssetFamily, FrameCopy
from litegui_assets.render.canvas import Canvas, Color, Op
from litegui_assets.render.mask import AnnulusSector, Point, Rect
from litegui_assets.settings.schema import GeneratorSettings

logger = logging.getLogger(__name__)

SIZE = (320, 240)
LAST_FRAME = 45
MAX_RADIUS = 336.0
SHUTDOWN_FRAMES = 18


def ring_color(i: int, c: int) -> Color:
    """Colour of disc *c* in boot frame *i*.

    Brightness fades out with the frame index and pulses along a sine of
    the disc index, on top of a dim green floor.
    """
    f0 = float(LAST_FRAME - i) / LAST_FRAME
    f1 = float(i - c + 1) / float(LAST_FRAME + 1)
    f2 = max(0.0, math.sin(float(c + 1) / 2) + 1) * 0.5 * (1 - f1) * f0
    return (
        int(math.ceil(f2 * 0xC0)) + 0x0C,
        int(math.ceil(f2 * 0xF0)) + 0x0F,
        0,
        0xFF,
    )


def ring_radius(i: int, c: int) -> float:
    """Radius of disc *c* in frame *i*; the newest disc is the smallest."""
    f1 = float(i - c + 1) / float(LAST_FRAME + 1)
    return MAX_RADIUS * f1


def draw(i: int, bounds: Rect, center: Point, canvas: Canvas) -> None:
    for c in range(i + 1):
        ring = AnnulusSector(center=center, outer_radius=ring_radius(i, c))
        canvas.fill(ring_color(i, c), ring, Op.OVER)
    logger.debug("boot frame %d: %d rings", i, i + 1)


def shutdown_sources() -> tuple[int, ...]:
    """Boot frame index used for each shutdown frame."""
    return tuple((SHUTDOWN_FRAMES - 1 - k) * 2 for k in range(SHUTDOWN_FRAMES))


def family(settings: GeneratorSettings) -> AssetFamily:
    out = settings.output_root / "litegui" / "boot_animation"
    return AssetFamily(
        name="boot_animation",
        size=SIZE,
        pattern=out / "boot{:d}.jpg",
        draw=draw,
        first=0,
        last=LAST_FRAME,
        jpeg_quality=settings.boot_jpeg_quality,
        copies=(FrameCopy(out / "shutdown{:d}.jpg", shutdown_sources()),),
    )
