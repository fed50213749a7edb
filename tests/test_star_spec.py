"""Tests for StarSpec, BoundingBox and presets."""

import pytest

import config
from models.errors import InvalidArgumentError
from models.star_spec import BoundingBox, StarSpec


def test_bounding_box():
    box = BoundingBox.square(80, left=10, top=20)
    assert box.is_square
    assert box.size == 80
    assert box.center == (50, 60)
    assert not BoundingBox(0, 0, 80, 81).is_square


def test_derived_values():
    spec = StarSpec(7, 3, rotation_degrees=15, box=BoundingBox.square(60, left=5, top=6))
    assert spec.radius == 30
    assert spec.x_offset == 5
    assert spec.y_offset == 6
    assert spec.start_degrees == 105
    assert not spec.outlined


def test_from_preset():
    spec = StarSpec.from_preset("great_heptagram", BoundingBox.square(100), outlined=True)
    assert (spec.num_points, spec.density, spec.outlined) == (7, 3, True)


def test_every_preset_is_a_star():
    for name, preset in config.STAR_PRESETS.items():
        assert preset["NUM_POINTS"] >= config.MIN_NUM_POINTS, name
        assert 2 <= preset["DENSITY"] < preset["NUM_POINTS"] / 2, name


def test_unknown_preset():
    with pytest.raises(InvalidArgumentError, match="unknown star preset"):
        StarSpec.from_preset("hexagon", BoundingBox.square(100))


def test_active_params_follow_mode(monkeypatch):
    monkeypatch.setattr(config, "OUTLINED_MODE", False)
    params = config.get_active_params()
    assert params["OUTLINED"] is False
    assert params["STAR_SIZE"] == config.IMAGE_SIZE - 2 * config.STAR_MARGIN

    monkeypatch.setattr(config, "OUTLINED_MODE", True)
    assert config.get_active_params()["OUTLINED"] is True
