"""Frame generation driver.

An :class:`AssetFamily` pairs output geometry (canvas size, file pattern,
frame range, encoding) with the draw routine that paints one frame. A
single loop, :func:`run_families`, walks an explicit list of families and
for each one renders every frame, encodes it and writes it to disk.

File patterns use a ``str.format`` integer field (``boot{:d}.jpg``,
``{:02d}.png``) that is filled with the frame index. Families with a single
frame (``first == last``) use their pattern verbatim.

Everything here is fail-fast: the first I/O, decode or encode problem raises
an :class:`~litegui_assets.errors.AssetError` and stops the run. Files
written before the failure stay on disk.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Iterable, List, Tuple

from litegui_assets.errors import AssetIOError, ConfigurationError
from litegui_assets.render.canvas import Canvas
from litegui_assets.render.mask import Point, Rect

__all__ = [
    "DrawFn",
    "FrameCopy",
    "AssetFamily",
    "format_frame_name",
    "generate",
    "copy_frames",
    "run_family",
    "run_families",
]

logger = logging.getLogger(__name__)

DrawFn = Callable[[int, Rect, Point, Canvas], None]


@dataclass(frozen=True)
class FrameCopy:
    """Frames derived from a family by copying already written files.

    Output frame ``k`` (``pattern`` formatted with ``k``) is a byte copy of
    the family's frame ``sources[k]``.
    """

    pattern: Path
    sources: Tuple[int, ...]


@dataclass(frozen=True)
class AssetFamily:
    name: str
    size: Tuple[int, int]
    pattern: Path
    draw: DrawFn
    first: int = 0
    last: int = 0
    jpeg_quality: int | None = None
    copies: Tuple[FrameCopy, ...] = field(default=())

    @property
    def frame_count(self) -> int:
        return self.last - self.first + 1


def format_frame_name(pattern: Path | str, index: int) -> Path:
    """Substitute *index* into the integer field of *pattern*'s file name.

    Only the last path component is formatted; braces in parent
    directories are kept literally.
    """
    pattern = Path(pattern)
    try:
        return pattern.with_name(pattern.name.format(index))
    except (IndexError, KeyError, ValueError) as exc:
        raise ConfigurationError(f"bad frame pattern {pattern!s}: {exc}") from exc


def _write_bytes(path: Path, data: bytes) -> None:
    try:
        path.write_bytes(data)
    except OSError as exc:
        raise AssetIOError(path, exc) from exc


def _ensure_dir(path: Path) -> None:
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise AssetIOError(path, exc) from exc


def generate(
    width: int,
    height: int,
    pattern: Path | str,
    first: int,
    last: int,
    draw: DrawFn,
    jpeg_quality: int | None = None,
) -> List[Path]:
    """Render frames ``first..last`` (inclusive) and write one file each.

    Each frame gets a fresh transparent canvas; *draw* is called with the
    frame index, the canvas bounds, the canvas centre and the canvas. The
    result is encoded as JPEG when *jpeg_quality* is given, PNG otherwise.
    Returns the paths written, in frame order.
    """
    if first > last:
        raise ConfigurationError(
            f"empty frame range {first}..{last} for {pattern!s}"
        )
    pattern = Path(pattern)
    _ensure_dir(pattern.parent)

    written: List[Path] = []
    for i in range(first, last + 1):
        fname = pattern if first == last else format_frame_name(pattern, i)
        logger.info("Writing %s", fname)

        canvas = Canvas(width, height)
        draw(i, canvas.bounds, canvas.center, canvas)
        _write_bytes(fname, canvas.encode(jpeg_quality))
        written.append(fname)
    return written


def copy_frames(src_pattern: Path | str, copy: FrameCopy) -> List[Path]:
    """Materialise *copy* from frames already written under *src_pattern*."""
    dst_pattern = Path(copy.pattern)
    _ensure_dir(dst_pattern.parent)

    written: List[Path] = []
    for k, src_index in enumerate(copy.sources):
        dst = format_frame_name(dst_pattern, k)
        src = format_frame_name(src_pattern, src_index)
        logger.info("Linking %s", dst)
        try:
            dst.unlink(missing_ok=True)
            shutil.copyfile(src, dst)
        except OSError as exc:
            raise AssetIOError(dst, exc) from exc
        written.append(dst)
    return written


def run_family(family: AssetFamily) -> List[Path]:
    w, h = family.size
    written = generate(
        w,
        h,
        family.pattern,
        family.first,
        family.last,
        family.draw,
        jpeg_quality=family.jpeg_quality,
    )
    for copy in family.copies:
        written.extend(copy_frames(family.pattern, copy))
    return written


def run_families(families: Iterable[AssetFamily]) -> List[Path]:
    """Run every family in order and return all paths written."""
    written: List[Path] = []
    for family in families:
        logger.debug(
            "family %s: %dx%d, %d frame(s)",
            family.name,
            family.size[0],
            family.size[1],
            family.frame_count,
        )
        written.extend(run_family(family))
    return written
