import math

import pytest
from ray_physics.coordinates import project_velocity, to_cartesian, to_polar

CENTER = (400.0, 300.0)


@pytest.mark.parametrize("r", [1e-3, 1.0, 40.0, 300.0, 1e6])
@pytest.mark.parametrize("angle", [-3.0, -math.pi / 2, 0.0, 0.7, math.pi, 5.5, 12.0])
def test_round_trip(r, angle):
    r2, phi2 = to_polar(to_cartesian(r, angle, CENTER), CENTER)
    assert math.isclose(r2, r, rel_tol=1e-9)
    assert abs(math.remainder(phi2 - angle, 2.0 * math.pi)) < 1e-9
    assert -math.pi < phi2 <= math.pi


def test_to_polar_axes():
    assert to_polar((500.0, 300.0), CENTER) == (100.0, 0.0)
    r, phi = to_polar((100.0, 300.0), CENTER)
    assert r == 300.0
    assert math.isclose(phi, math.pi)


@pytest.mark.parametrize("point, center", [((-1.0, -0.0), (0.0, 0.0)), ((100.0, -0.0), (400.0, 0.0))])
def test_to_polar_negative_zero_gives_plus_pi(point, center):
    r, phi = to_polar(point, center)
    assert phi == math.pi
    assert r > 0.0


def test_to_polar_degenerate():
    assert to_polar(CENTER, CENTER) == (0.0, 0.0)


def test_project_velocity_radial():
    dr, dphi = project_velocity((100.0, 300.0), (70.0, 0.0), CENTER)
    assert math.isclose(dr, -70.0)
    assert dphi == pytest.approx(0.0, abs=1e-12)


def test_project_velocity_tangential():
    # counter-clockwise motion at r = 100
    dr, dphi = project_velocity((500.0, 300.0), (0.0, 50.0), CENTER)
    assert dr == pytest.approx(0.0, abs=1e-12)
    assert math.isclose(dphi, 0.5)


def test_project_velocity_degenerate():
    assert project_velocity(CENTER, (10.0, -3.0), CENTER) == (0.0, 0.0)
