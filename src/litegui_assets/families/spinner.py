"""Music library update spinner: an orange dot pulsing along a sine curve."""

from __future__ import annotations

import math

from litegui_assets.frames import AssetFamily
from litegui_assets.render.canvas import Canvas, Color, Op
from litegui_assets.render.mask import AnnulusSector, Point, Rect
from litegui_assets.settings.schema import GeneratorSettings

SIZE = (32, 32)
FRAMES = 12
DOT_COLOR: Color = (0xFF, 0x99, 0x00, 0xFF)
MAX_RADIUS = 8.0


def dot_radius(i: int) -> float:
    return MAX_RADIUS * math.sin(float(i + 1) / 12.5 * math.pi)


def draw(i: int, bounds: Rect, center: Point, canvas: Canvas) -> None:
    dot = AnnulusSector(center=center, outer_radius=dot_radius(i))
    canvas.fill(DOT_COLOR, dot, Op.REPLACE)


def family(settings: GeneratorSettings) -> AssetFamily:
    out = settings.output_root / "litegui" / "theme1" / "music_update"
    return AssetFamily(
        name="music_update",
        size=SIZE,
        pattern=out / "{:02d}.png",
        draw=draw,
        first=0,
        last=FRAMES - 1,
    )
