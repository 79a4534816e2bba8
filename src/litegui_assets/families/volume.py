"""Volume scale: 120 ring segments sweeping clockwise from just before 12
o'clock, green ramping to yellow, then orange to red over the last 20 steps.
"""

from __future__ import annotations

import math

from litegui_assets.families.arcs import volume_color, volume_warning_color, wrap_angle
from litegui_assets.frames import AssetFamily
from litegui_assets.render.canvas import Canvas, Color, Op
from litegui_assets.render.mask import AnnulusSector, Point, Rect
from litegui_assets.settings.schema import GeneratorSettings

SIZE = (118, 118)
STEPS = 120
WARNING_STEP = 100
OUTER_RADIUS = 59.0
INNER_RADIUS = 44.4


def step_angles(j: int) -> tuple[float, float]:
    """Start and end angle of segment *j*, clockwise from 12 o'clock."""
    a = (0.25 - float(j) / float(STEPS)) * 2 * math.pi
    b = (0.25 - float(j - 1) / float(STEPS)) * 2 * math.pi
    return wrap_angle(a), wrap_angle(b)


def step_color(j: int) -> Color:
    """Green ramp up to the warning step, then the warning ramp."""
    if j < WARNING_STEP:
        return volume_color(1 - float(WARNING_STEP - 1 - j) * 0.004)
    return volume_warning_color(1 - float(j - WARNING_STEP) / 20.0)


def draw(i: int, bounds: Rect, center: Point, canvas: Canvas) -> None:
    for j in range(STEPS):
        a, b = step_angles(j)
        segment = AnnulusSector(
            center=center,
            outer_radius=OUTER_RADIUS,
            inner_radius=INNER_RADIUS,
            start_angle=a,
            end_angle=b,
        )
        canvas.fill(step_color(j), segment, Op.OVER)


def family(settings: GeneratorSettings) -> AssetFamily:
    out = settings.output_root / "litegui" / "theme1" / "adjust"
    return AssetFamily(
        name="adjust/volume",
        size=SIZE,
        pattern=out / "volume_scale_focus.png",
        draw=draw,
    )
