"""Launcher focus badges: a green disc with the launcher icon on top."""

from __future__ import annotations

from pathlib import Path
from typing import List

from litegui_assets.frames import AssetFamily, DrawFn
from litegui_assets.render.canvas import Canvas, Color, Op
from litegui_assets.render.icons import load_icon
from litegui_assets.render.mask import AnnulusSector, Point, Rect
from litegui_assets.settings.schema import GeneratorSettings

LAUNCHER_NAMES = ("playing", "category", "explorer", "play_set", "sys_set")

SIZE = (56, 72)
BADGE_COLOR: Color = (0x80, 0xAA, 0x00, 0xFF)
BADGE = AnnulusSector(center=(28, 21), outer_radius=22.0)


def make_draw(icon_path: Path) -> DrawFn:
    def draw(i: int, bounds: Rect, center: Point, canvas: Canvas) -> None:
        canvas.fill(BADGE_COLOR, BADGE, Op.REPLACE)
        canvas.overlay(load_icon(icon_path), (0, 0))

    return draw


def families(settings: GeneratorSettings) -> List[AssetFamily]:
    src = settings.source_root / "litegui" / "theme1" / "launcher"
    dst = settings.output_root / "litegui" / "theme1" / "launcher"
    return [
        AssetFamily(
            name=f"launcher/{name}",
            size=SIZE,
            pattern=dst / f"{name}_f.png",
            draw=make_draw(src / f"{name}.png"),
        )
        for name in LAUNCHER_NAMES
    ]
