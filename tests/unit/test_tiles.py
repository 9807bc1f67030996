# tests/unit/test_tiles.py

import math

import pytest

from ammann_beenker.tiles import (
    RHOMBUS_ANGLE,
    SQRT_2,
    SQUARE_SIZE_RATIO,
    Rhombus,
    Square,
    tile_kind,
    vertices,
)
from ammann_beenker.geometry import distance
from ammann_beenker.types import TileKind
from tests.test_utils import assert_points_close, make_rhombus, make_square, polar


def test_constants() -> None:
    assert SQRT_2 == pytest.approx(math.sqrt(2))
    assert RHOMBUS_ANGLE == pytest.approx(math.pi / 4)
    assert SQUARE_SIZE_RATIO == pytest.approx(1 / math.sqrt(2))


def test_rhombus_vertices_step_by_45_degrees() -> None:
    tile = make_rhombus(size=1.0)
    assert_points_close(
        vertices(tile),
        [polar(1.0, 0), polar(1.0, 45), polar(1.0, 90), polar(1.0, 135)],
    )


def test_square_vertices_step_by_90_degrees() -> None:
    tile = make_square(size=2.0)
    r = 2.0 / math.sqrt(2)
    assert_points_close(
        vertices(tile),
        [polar(r, 0), polar(r, 90), polar(r, 180), polar(r, 270)],
    )


def test_vertices_follow_center_and_angle() -> None:
    tile = make_rhombus(center=(10.0, 20.0), size=4.0, angle=math.pi / 2)
    expected = [
        (10.0 + x, 20.0 + y)
        for x, y in (polar(4.0, 90), polar(4.0, 135), polar(4.0, 180), polar(4.0, 225))
    ]
    assert_points_close(vertices(tile), expected)


@pytest.mark.parametrize(
    "tile",
    [
        make_rhombus(),
        make_square(),
        make_rhombus(size=0.0),
        make_square(angle=37 * math.pi),
    ],
)
def test_vertex_count_and_radius(tile) -> None:
    points = vertices(tile)
    assert len(points) == 4
    radius = tile.size if isinstance(tile, Rhombus) else tile.size / SQRT_2
    for p in points:
        assert distance(p, tile.center) == pytest.approx(radius, abs=1e-9)


def test_polygon_is_open() -> None:
    points = vertices(make_square())
    assert points[0] != points[-1]


def test_vertices_are_deterministic() -> None:
    tile = make_rhombus(center=(1.5, -2.5), size=3.3, angle=12.7)
    assert vertices(tile) == vertices(tile)
    assert vertices(tile) == vertices(make_rhombus(center=(1.5, -2.5), size=3.3, angle=12.7))


def test_tile_kind() -> None:
    assert tile_kind(make_rhombus()) == TileKind.RHOMBUS
    assert tile_kind(make_square()) == TileKind.SQUARE


def test_tiles_are_frozen_with_empty_default_color() -> None:
    tile = make_square()
    assert tile.color == ""
    with pytest.raises(AttributeError):
        tile.color = "red"  # type: ignore[misc]


def test_variants_do_not_compare_equal() -> None:
    assert make_rhombus(size=1.0) != make_square(size=1.0)
    assert isinstance(make_square(), Square)
