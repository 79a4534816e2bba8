from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from PIL import Image

from litegui_assets.errors import IconDecodeError
from litegui_assets.families import launcher
from litegui_assets.frames import run_family, run_families
from litegui_assets.settings.schema import GeneratorSettings, make_settings

BADGE = (0x80, 0xAA, 0x00, 0xFF)

IconWriter = Callable[..., Path]


def test_one_family_per_launcher(settings: GeneratorSettings) -> None:
    families = launcher.families(settings)
    assert [f.name for f in families] == [
        "launcher/playing",
        "launcher/category",
        "launcher/explorer",
        "launcher/play_set",
        "launcher/sys_set",
    ]
    assert all(f.size == (56, 72) and f.first == f.last == 0 for f in families)


def test_badge_under_icon(settings: GeneratorSettings, write_icon: IconWriter) -> None:
    icon = settings.source_root / "litegui" / "theme1" / "launcher" / "playing.png"
    write_icon(icon, size=(10, 10), color=(0, 0, 255, 255))
    (path,) = run_family(launcher.families(settings)[0])
    assert path.name == "playing_f.png"
    with Image.open(path) as im:
        assert im.size == (56, 72)
        assert im.getpixel((28, 21)) == BADGE
        assert im.getpixel((28, 0)) == BADGE
        assert im.getpixel((2, 2)) == (0, 0, 255, 255)
        assert im.getpixel((28, 60)) == (0, 0, 0, 0)
        assert im.getpixel((55, 71)) == (0, 0, 0, 0)


def test_all_launchers_written(settings: GeneratorSettings) -> None:
    written = run_families(launcher.families(settings))
    names = sorted(p.name for p in written)
    assert names == sorted(f"{n}_f.png" for n in launcher.LAUNCHER_NAMES)


def test_missing_icon(tmp_path: Path) -> None:
    s = make_settings(source_root=tmp_path / "empty", output_root=tmp_path / "out")
    with pytest.raises(IconDecodeError, match="playing.png"):
        run_family(launcher.families(s)[0])
