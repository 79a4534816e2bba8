"""Tapered arcs for the linear setting scales (max volume, timers)."""

from __future__ import annotations

import math
from typing import List

from litegui_assets.families.arcs import volume_color, wrap_angle
from litegui_assets.frames import AssetFamily
from litegui_assets.render.canvas import Canvas, Color, Op
from litegui_assets.render.mask import AnnulusSector, Point, Rect
from litegui_assets.settings.schema import GeneratorSettings

SCALE_NAMES = ("maxvol", "blktime", "savetime", "sleeptime")

SIZE = (122, 122)
STEPS = 120
OUTER_RADIUS = 56.0
# fraction of a full turn covered by the arc
SWEEP = 0.7


def step_inner_radius(j: int) -> float:
    """Inner radius of step *j*; the band thickens as the value grows."""
    return OUTER_RADIUS - 4.0 - 8.0 * float(j) / float(STEPS)


def step_angles(j: int) -> tuple[float, float]:
    """Angles of step *j* on a 252 degree sweep starting lower left."""
    a = (-0.4 - float(j + 1) / float(STEPS) * SWEEP) * 2 * math.pi
    b = (-0.4 - float(j) / float(STEPS) * SWEEP) * 2 * math.pi
    return wrap_angle(a), wrap_angle(b)


def step_color(j: int) -> Color:
    """Volume green, dimmer toward the start of the scale."""
    return volume_color(1 - float(STEPS - j) * 0.004)


def draw(i: int, bounds: Rect, center: Point, canvas: Canvas) -> None:
    for j in range(1, STEPS):
        a, b = step_angles(j)
        segment = AnnulusSector(
            center=center,
            outer_radius=OUTER_RADIUS,
            inner_radius=step_inner_radius(j),
            start_angle=a,
            end_angle=b,
        )
        canvas.fill(step_color(j), segment, Op.OVER)


def families(settings: GeneratorSettings) -> List[AssetFamily]:
    out = settings.output_root / "litegui" / "theme1" / "adjust"
    return [
        AssetFamily(
            name=f"adjust/{name}",
            size=SIZE,
            pattern=out / f"{name}_scale_focus.png",
            draw=draw,
        )
        for name in SCALE_NAMES
    ]
