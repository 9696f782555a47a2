import dataclasses
import math

import pytest
from ray_physics.constants import PIXEL_UNITS, SI_UNITS, PhysicalConstants, mass_for_radius, schwarzschild_radius
from ray_physics.models import BlackHole, StateVector, add, scale, shader_uniforms


def test_capture_radius_follows_mass():
    bh = BlackHole((0.0, 0.0), 200000.0)
    assert math.isclose(bh.capture_radius, 2.0 * 1.0 * 200000.0 / (100.0 * 100.0))
    assert math.isclose(bh.capture_radius, 40.0)


def test_with_capture_radius_solves_for_mass(bh):
    assert math.isclose(bh.capture_radius, 40.0)
    assert math.isclose(bh.mass, mass_for_radius(40.0, PIXEL_UNITS))
    assert bh.position == (400.0, 300.0)


def test_photon_sphere(bh):
    assert math.isclose(bh.photon_sphere_radius, 60.0)


def test_si_units_sun():
    rs = schwarzschild_radius(1.98847e30, SI_UNITS)
    assert 2950.0 < rs < 2956.0


def test_black_hole_is_frozen(bh):
    with pytest.raises(dataclasses.FrozenInstanceError):
        bh.mass = 1.0


@pytest.mark.parametrize("mass", [0.0, -5.0, float("nan"), float("inf")])
def test_rejects_bad_mass(mass):
    with pytest.raises(ValueError):
        BlackHole((0.0, 0.0), mass)


def test_rejects_mass_with_infinite_capture_radius():
    with pytest.raises(ValueError):
        BlackHole((0.0, 0.0), 1e308)


def test_rejects_bad_capture_radius():
    with pytest.raises(ValueError):
        BlackHole.with_capture_radius((0.0, 0.0), 0.0)


def test_constants_validation():
    with pytest.raises(ValueError):
        PhysicalConstants(G=0.0, c=1.0)
    with pytest.raises(ValueError):
        PhysicalConstants(G=1.0, c=-1.0)


def test_constants_from_env(monkeypatch):
    monkeypatch.setenv("RAY_PHYSICS_G", "2.0")
    monkeypatch.setenv("RAY_PHYSICS_C", "10")
    units = PhysicalConstants.from_env()
    assert units == PhysicalConstants(G=2.0, c=10.0)
    bh = BlackHole((0.0, 0.0), 100.0, units)
    assert math.isclose(bh.capture_radius, 4.0)


def test_constants_from_env_defaults(monkeypatch):
    monkeypatch.delenv("RAY_PHYSICS_G", raising=False)
    monkeypatch.delenv("RAY_PHYSICS_C", raising=False)
    assert PhysicalConstants.from_env() == PIXEL_UNITS


def test_state_vector_algebra():
    a = StateVector(1.0, 2.0, 3.0, 4.0)
    b = StateVector(0.5, -1.0, 2.0, 0.0)
    assert add(a, b) == StateVector(1.5, 1.0, 5.0, 4.0)
    assert scale(a, 2.0) == StateVector(2.0, 4.0, 6.0, 8.0)
    assert a == StateVector(1.0, 2.0, 3.0, 4.0)


def test_shader_uniforms(bh):
    u = shader_uniforms(bh, (800, 600))
    assert u["u_blackHolePos"] == (400.0, 300.0)
    assert u["u_mass"] == bh.mass
    assert u["u_Rs"] == bh.capture_radius
    assert u["u_screenSize"] == (800.0, 600.0)
