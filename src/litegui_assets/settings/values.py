"""Centralized default values loaded from YAML.

The master source is ``values.yml`` in this package. On import we attempt
to load and parse it; missing keys or an unreadable file fall back to the
hard-coded defaults below so a plain checkout still produces the usual
output tree.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict

import yaml

logger = logging.getLogger(__name__)

_PKG_DIR = Path(__file__).parent
_YAML_PATH = _PKG_DIR / "values.yml"

# --- Fallback literals ---------------------------------------------------
_FALLBACK_PATHS = {
    "source_root": "changes_edited",
    "output_root": "changes_generated",
}
_FALLBACK_ENCODING = {"boot_jpeg_quality": 25}

_paths: Dict[str, str] = dict(_FALLBACK_PATHS)
_encoding: Dict[str, int] = dict(_FALLBACK_ENCODING)


def _load(path: Path) -> Dict[str, Any]:
    with path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    return raw if isinstance(raw, dict) else {}


if _YAML_PATH.exists():  # pragma: no branch - simple path
    try:
        raw = _load(_YAML_PATH)
    except (OSError, yaml.YAMLError) as exc:  # pragma: no cover - corrupt file
        logger.warning("ignoring unreadable %s: %s", _YAML_PATH, exc)
        raw = {}
    paths = raw.get("paths")
    if isinstance(paths, dict):
        _paths.update(
            {
                k: str(v)
                for k, v in paths.items()
                if k in _FALLBACK_PATHS and isinstance(v, str) and v
            }
        )
    enc = raw.get("encoding")
    if isinstance(enc, dict):
        q = enc.get("boot_jpeg_quality")
        if isinstance(q, int) and not isinstance(q, bool):
            _encoding["boot_jpeg_quality"] = q

# --- Public accessors ----------------------------------------------------
PATHS: Dict[str, str] = dict(_paths)
ENCODING: Dict[str, int] = dict(_encoding)

__all__ = ["PATHS", "ENCODING"]
