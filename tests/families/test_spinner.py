from __future__ import annotations

import math

from litegui_assets.families import spinner
from litegui_assets.frames import run_family
from litegui_assets.render.canvas import TRANSPARENT, Canvas
from litegui_assets.settings.schema import GeneratorSettings


def test_radius_pulses() -> None:
    radii = [spinner.dot_radius(i) for i in range(spinner.FRAMES)]
    assert all(0 < r <= 8.0 for r in radii)
    assert radii[0] == 8 * math.sin(1 / 12.5 * math.pi)
    # rises to the middle of the sequence and falls again
    assert max(radii) == radii[5]
    assert radii[11] < radii[6]


def test_small_and_large_dot() -> None:
    canvas = Canvas(*spinner.SIZE)
    spinner.draw(0, canvas.bounds, canvas.center, canvas)
    assert canvas.pixel(16, 16) == spinner.DOT_COLOR
    assert canvas.pixel(18, 16) == TRANSPARENT

    canvas = Canvas(*spinner.SIZE)
    spinner.draw(5, canvas.bounds, canvas.center, canvas)
    assert canvas.pixel(23, 16) == spinner.DOT_COLOR
    assert canvas.pixel(24, 16) == TRANSPARENT


def test_spinner_files(settings: GeneratorSettings) -> None:
    written = run_family(spinner.family(settings))
    assert [p.name for p in written] == [f"{i:02d}.png" for i in range(12)]
    assert written[0].parent == settings.output_root / "litegui/theme1/music_update"
