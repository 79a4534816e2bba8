"""Source icon loading."""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image, UnidentifiedImageError

from litegui_assets.errors import IconDecodeError

__all__ = ["load_icon"]

logger = logging.getLogger(__name__)


def load_icon(path: Path | str) -> Image.Image:
    """Decode the image at *path* fully and return it in RGBA mode.

    A missing file or anything Pillow cannot decode raises
    :class:`IconDecodeError` naming the file.
    """
    p = Path(path)
    try:
        with Image.open(p) as im:
            im.load()
            icon = im.convert("RGBA")
    except (OSError, UnidentifiedImageError, ValueError) as exc:
        raise IconDecodeError(p, exc) from exc
    logger.debug("decoded icon %s (%dx%d)", p, icon.width, icon.height)
    return icon
