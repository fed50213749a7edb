"""Tests for the zig-zag outline generator."""

import math

import pytest

from generators.outline import make_outline_points


def test_outline_alternates_radii():
    points = make_outline_points(10, 90, 50, 20)

    assert len(points) == 10
    for i, p in enumerate(points):
        expected = 50 if i % 2 == 0 else 20
        assert math.hypot(p.x - 50, p.y - 50) == pytest.approx(expected)


def test_outline_spacing_and_start():
    points = make_outline_points(14, 90, 30, 10)

    assert points[0].x == pytest.approx(30)
    assert points[0].y == pytest.approx(0)

    # first inner notch sits half a tip-step counter-clockwise
    theta = math.radians(90 + 360 / 14)
    assert points[1].x == pytest.approx(30 + 10 * math.cos(theta))
    assert points[1].y == pytest.approx(30 - 10 * math.sin(theta))
