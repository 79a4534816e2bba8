"""Helpers shared by the arc-shaped scale indicators."""

from __future__ import annotations

import math

from litegui_assets.render.canvas import Color

__all__ = ["wrap_angle", "volume_color", "volume_warning_color"]


def wrap_angle(a: float) -> float:
    """Bring an angle that swept past -pi back into the atan2 range."""
    if a < -math.pi:
        a += 2 * math.pi
    return a


def volume_color(c: float) -> Color:
    """Green ramp of the top-bar volume colour; ``c`` is the intensity."""
    return (int(math.ceil(c * 0x99)), int(math.ceil(c * 0xFF)), 0x00, 0xFF)


def volume_warning_color(c: float) -> Color:
    """Orange-to-red ramp used past the safe volume range."""
    return (0xFF, int(math.ceil(c * 0x82)), 0x34, 0xFF)
