import pytest

from fluidsim.app import default_water, main
from fluidsim.constants import SPHConstants


def test_default_water_grid():
    water = default_water()
    assert len(water.particles) == 16


def test_default_water_config():
    water = default_water()
    assert water.config == SPHConstants(50.0, 2000.0, 1000.0, 625000.0)


def test_default_water_spacing_uses_gap():
    water = default_water()
    xs = sorted({float(p.position[0]) for p in water.particles})
    assert xs[1] - xs[0] == pytest.approx(26)


def test_default_water_is_four_by_four():
    water = default_water()
    xs = {float(p.position[0]) for p in water.particles}
    ys = {float(p.position[1]) for p in water.particles}
    assert len(xs) == 4
    assert len(ys) == 4


def test_main_runs_bounded_frames_headless(monkeypatch):
    monkeypatch.setenv("SDL_VIDEODRIVER", "dummy")
    monkeypatch.setenv("SDL_AUDIODRIVER", "dummy")
    assert main(["--frames", "1"]) == 0


def test_main_rejects_bad_frame_count():
    with pytest.raises(SystemExit):
        main(["--frames", "many"])