from __future__ import annotations

from pathlib import Path
from typing import Callable

import pytest
from PIL import Image

from litegui_assets.families.launcher import LAUNCHER_NAMES
from litegui_assets.families.theme_wheel import THEMES
from litegui_assets.settings.schema import GeneratorSettings, make_settings

IconWriter = Callable[..., Path]


@pytest.fixture
def write_icon() -> IconWriter:
    def _write(
        path: Path,
        size: tuple[int, int] = (24, 24),
        color: tuple[int, int, int, int] = (0, 0, 0, 0),
    ) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        Image.new("RGBA", size, color).save(path)
        return path

    return _write


@pytest.fixture
def source_tree(tmp_path: Path, write_icon: IconWriter) -> Path:
    """A source root holding a transparent icon for every family that needs one."""
    root = tmp_path / "edited"
    launcher_dir = root / "litegui" / "theme1" / "launcher"
    for name in LAUNCHER_NAMES:
        write_icon(launcher_dir / f"{name}.png", size=(56, 72))
    for i in range(1, THEMES + 1):
        write_icon(root / f"theme_icon_{i}.png")
    return root


@pytest.fixture
def settings(tmp_path: Path, source_tree: Path) -> GeneratorSettings:
    return make_settings(source_root=source_tree, output_root=tmp_path / "generated")
