from __future__ import annotations

import math

import numpy as np
import pytest

from litegui_assets.errors import ConfigurationError, GeometryError
from litegui_assets.render.mask import AnnulusSector


def test_center_covered_by_disc() -> None:
    disc = AnnulusSector(center=(10, 10), outer_radius=5.0)
    assert disc.contains(10, 10)
    assert disc.alpha_at(10, 10) == 255


def test_outer_radius_is_inclusive() -> None:
    disc = AnnulusSector(center=(10, 10), outer_radius=5.0)
    assert disc.contains(15, 10)
    assert not disc.contains(16, 10)
    assert disc.alpha_at(16, 10) == 0


def test_inner_radius_leaves_hole() -> None:
    ring = AnnulusSector(center=(0, 0), outer_radius=10.0, inner_radius=5.0)
    assert not ring.contains(0, 0)
    assert not ring.contains(4, 0)
    assert ring.contains(5, 0)
    assert ring.contains(0, -7)
    assert not ring.contains(8, 8)


def test_angles_follow_screen_y_up() -> None:
    # First quadrant in math terms is up and to the right on screen
    quarter = AnnulusSector(
        center=(20, 20), outer_radius=10.0, start_angle=0.0, end_angle=math.pi / 2
    )
    assert quarter.contains(23, 17)
    assert not quarter.contains(23, 23)
    assert not quarter.contains(17, 17)


def test_wraparound_through_branch_cut() -> None:
    s = AnnulusSector(
        center=(50, 50),
        outer_radius=20.0,
        start_angle=math.radians(170),
        end_angle=math.radians(-170),
    )
    # 180 degrees (left of centre) is inside
    assert s.contains(40, 50)
    # 0 degrees (right of centre) is outside
    assert not s.contains(60, 50)
    # just above and just below the negative x axis
    assert s.contains(35, 49)
    assert s.contains(35, 51)
    # straight up is outside
    assert not s.contains(50, 40)


def test_equal_angles_mean_full_ring() -> None:
    ring = AnnulusSector(
        center=(0, 0),
        outer_radius=6.0,
        inner_radius=3.0,
        start_angle=1.25,
        end_angle=1.25,
    )
    for x, y in [(4, 0), (-4, 0), (0, 4), (0, -4), (3, 3), (-3, -3)]:
        assert ring.contains(x, y)


def test_bounds_square_around_center() -> None:
    badge = AnnulusSector(center=(28, 21), outer_radius=22.0)
    assert badge.bounds() == (6, -1, 50, 43)
    small = AnnulusSector(center=(0, 0), outer_radius=2.5, inner_radius=1.0)
    assert small.bounds() == (-3, -3, 3, 3)


def test_inner_larger_than_outer_is_rejected() -> None:
    with pytest.raises(GeometryError) as ei:
        AnnulusSector(center=(0, 0), outer_radius=4.0, inner_radius=5.0)
    assert ei.value.inner_radius == 5.0
    assert ei.value.outer_radius == 4.0
    assert isinstance(ei.value, ConfigurationError)
    assert "5.0" in str(ei.value) and "4.0" in str(ei.value)


def test_inner_equal_outer_is_allowed() -> None:
    ring = AnnulusSector(center=(0, 0), outer_radius=5.0, inner_radius=5.0)
    assert ring.contains(5, 0)
    assert not ring.contains(4, 0)


def test_rasterize_layout_matches_box() -> None:
    disc = AnnulusSector(center=(3, 2), outer_radius=1.0)
    raster = disc.rasterize((0, 0, 6, 4))
    assert raster.shape == (4, 6)
    assert raster.dtype == np.uint8
    expected = np.zeros((4, 6), dtype=np.uint8)
    for x, y in [(3, 2), (2, 2), (4, 2), (3, 1), (3, 3)]:
        expected[y, x] = 255
    assert np.array_equal(raster, expected)


def test_rasterize_empty_box() -> None:
    disc = AnnulusSector(center=(3, 2), outer_radius=1.0)
    assert disc.rasterize((5, 5, 5, 9)).size == 0


def test_to_image_is_grayscale_mask() -> None:
    disc = AnnulusSector(center=(4, 4), outer_radius=2.0)
    img = disc.to_image(disc.bounds())
    assert img.mode == "L"
    assert img.size == (4, 4)
    # box starts at (2, 2); the centre pixel sits at (2, 2) inside the image
    assert img.getpixel((2, 2)) == 255
    assert img.getpixel((0, 0)) == 0
