"""Tests for the batch entry point."""

import os

import config
import main


def test_main_renders_presets(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(main, "OUTPUT_FOLDER", str(tmp_path))
    monkeypatch.setattr(config, "STAR_PRESETS", {
        "pentagram": {"NUM_POINTS": 5, "DENSITY": 2},
        "star_of_diameters": {"NUM_POINTS": 6, "DENSITY": 3},
    })

    main.main()
    out = capsys.readouterr().out

    assert "[OK] Finished pentagram (10 vertices)" in out
    assert "[WARN] star_of_diameters {6/3}" in out
    assert os.path.exists(tmp_path / "pentagram_star.png")
    assert os.path.exists(tmp_path / "pentagram_mask.png")
    assert not os.path.exists(tmp_path / "star_of_diameters_star.png")


def test_main_without_presets(tmp_path, monkeypatch, capsys):
    monkeypatch.setattr(main, "OUTPUT_FOLDER", str(tmp_path))
    monkeypatch.setattr(config, "STAR_PRESETS", {})

    main.main()
    assert "[ERROR] No star presets configured" in capsys.readouterr().out


def test_main_searches_each_star_once(tmp_path, monkeypatch):
    import generators.star_polygon as star_polygon

    calls = []
    real_find_inner_radius = star_polygon.find_inner_radius

    def counting_find_inner_radius(points, r):
        calls.append(len(points))
        return real_find_inner_radius(points, r)

    monkeypatch.setattr(star_polygon, "find_inner_radius", counting_find_inner_radius)
    monkeypatch.setattr(main, "OUTPUT_FOLDER", str(tmp_path))
    monkeypatch.setattr(config, "STAR_PRESETS", {"pentagram": {"NUM_POINTS": 5, "DENSITY": 2}})

    main.main()

    assert calls == [5]
    assert os.path.exists(tmp_path / "pentagram_star.png")
