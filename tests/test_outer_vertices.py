"""Tests for the {n/d} outer vertex ring."""

import math

import pytest

from generators.outer_vertices import make_outer_points
from models.errors import InvalidArgumentError


def _polar_degrees(point, r):
    return math.degrees(math.atan2(r - point.y, point.x - r))


def _angle_gap(a, b):
    """Signed difference a - b folded into [-180, 180)."""
    return (a - b + 180) % 360 - 180


def test_pentagram_ring():
    points = make_outer_points(5, 2, 90, 50)

    assert len(points) == 5
    assert points[0].x == pytest.approx(50)
    assert points[0].y == pytest.approx(0)
    assert points[1].x == pytest.approx(50 + 50 * math.cos(math.radians(234)))
    assert points[1].y == pytest.approx(50 - 50 * math.sin(math.radians(234)))


@pytest.mark.parametrize("num_points, density", [(5, 2), (7, 3), (8, 3), (9, 4), (12, 5), (6, 2)])
def test_ring_on_circle_with_density_spacing(num_points, density):
    r = 40.0
    points = make_outer_points(num_points, density, 90 + 17, r)

    assert len(points) == num_points
    for p in points:
        assert math.hypot(p.x - r, p.y - r) == pytest.approx(r)

    step = density * 360 / num_points
    for prev, cur in zip(points, points[1:]):
        gap = _polar_degrees(cur, r) - _polar_degrees(prev, r)
        assert _angle_gap(gap, step) == pytest.approx(0, abs=1e-9)


@pytest.mark.parametrize("num_points, density", [(4, 2), (5, 1), (3, 0)])
def test_invalid_counts(num_points, density):
    with pytest.raises(InvalidArgumentError):
        make_outer_points(num_points, density, 90, 50)
