"""Theme selector wheel.

Six 45-degree wedges are laid around the circle (two eighths stay empty).
Unselected wedges are drawn as a thin ring on the rim; the selected wedge is
a solid slice out to the rim. A grey disc covers the centre and the theme's
icon is placed inside the selected wedge, ``ICON_RADIUS`` pixels out along
the wedge's middle angle. Output ``theme_<i>.png`` shows theme ``i``
selected.
"""

from __future__ import annotations

import math
from pathlib import Path
from typing import Tuple

from litegui_assets.frames import AssetFamily, DrawFn
from litegui_assets.render.canvas import Canvas, Color, Op
from litegui_assets.render.icons import load_icon
from litegui_assets.render.mask import AnnulusSector, Point, Rect
from litegui_assets.settings.schema import GeneratorSettings

SIZE = (128, 128)
THEMES = 6

OUTER_RADIUS = 64.0
INNER_RADIUS = 60.0
ICON_RADIUS = 48.0
CUTOFF_RADIUS = 16.0

WEDGE_COLORS: Tuple[Color, ...] = (
    (0x66, 0x99, 0x00, 0xFF),
    (0x66, 0x99, 0x00, 0xFF),
    (0x66, 0x99, 0x00, 0xFF),
    (0x66, 0x99, 0x00, 0xFF),
    (0x00, 0x00, 0x99, 0xFF),
    (0x33, 0x33, 0x33, 0xFF),
)
CUTOFF_COLOR: Color = (0x99, 0x99, 0x99, 0xFF)


def wedge_angles(j: int) -> Tuple[float, float, float]:
    """Start, middle and end angle of wedge *j* (1-based), in radians."""
    k = float((9 - j) % 8)
    start = (k - 4.0) / 4.0 * math.pi
    mid = (k - 3.5) / 4.0 * math.pi
    end = (k - 3.0) / 4.0 * math.pi
    return start, mid, end


def icon_offset(center: Point, mid: float, icon_size: Tuple[int, int]) -> Point:
    """Top-left position that centres an icon on the wedge's icon radius."""
    # int() truncates toward zero, matching the reference rounding
    dx = int(math.cos(mid) * ICON_RADIUS + 0.5)
    dy = int(math.sin(mid) * ICON_RADIUS + 0.5)
    w, h = icon_size
    return (center[0] + dx - w // 2, center[1] - dy - h // 2)


def draw_wheel(selected: int, center: Point, canvas: Canvas) -> float:
    """Paint the wedges and centre disc; return the selected mid angle."""
    selected_mid = 0.0
    for j in range(1, THEMES + 1):
        start, mid, end = wedge_angles(j)
        if j == selected:
            selected_mid = mid
        wedge = AnnulusSector(
            center=center,
            outer_radius=OUTER_RADIUS,
            inner_radius=0.0 if j == selected else INNER_RADIUS,
            start_angle=start,
            end_angle=end,
        )
        canvas.fill(WEDGE_COLORS[j - 1], wedge, Op.OVER)

    cutoff = AnnulusSector(center=center, outer_radius=CUTOFF_RADIUS)
    canvas.fill(CUTOFF_COLOR, cutoff, Op.OVER)
    return selected_mid


def make_draw(source_root: Path) -> DrawFn:
    def draw(i: int, bounds: Rect, center: Point, canvas: Canvas) -> None:
        mid = draw_wheel(i, center, canvas)
        icon = load_icon(source_root / f"theme_icon_{i}.png")
        canvas.overlay(icon, icon_offset(center, mid, icon.size))

    return draw


def family(settings: GeneratorSettings) -> AssetFamily:
    out = settings.output_root / "litegui" / "theme1" / "theme"
    return AssetFamily(
        name="theme",
        size=SIZE,
        pattern=out / "theme_{:d}.png",
        draw=make_draw(settings.source_root),
        first=1,
        last=THEMES,
    )
