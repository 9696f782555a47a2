import pytest
from ray_physics.models import BlackHole


@pytest.fixture
def bh():
    # pixel units: G = 1, c = 100
    return BlackHole.with_capture_radius((400.0, 300.0), 40.0)
