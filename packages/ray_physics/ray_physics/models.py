import math
from dataclasses import dataclass, field
from typing import Dict, Tuple

from .constants import PHOTON_SPHERE_FACTOR, PIXEL_UNITS, PhysicalConstants, mass_for_radius, schwarzschild_radius

Point = Tuple[float, float]


@dataclass(frozen=True)
class BlackHole:
    position: Point
    mass: float
    constants: PhysicalConstants = PIXEL_UNITS
    capture_radius: float = field(init=False)

    def __post_init__(self):
        if not (self.mass > 0.0 and math.isfinite(self.mass)):
            raise ValueError(f"mass must be positive and finite, got {self.mass!r}")
        object.__setattr__(self, "position", (float(self.position[0]), float(self.position[1])))
        object.__setattr__(self, "capture_radius", schwarzschild_radius(self.mass, self.constants))
        if not math.isfinite(self.photon_sphere_radius):
            raise ValueError(f"mass {self.mass!r} gives a capture radius of {self.capture_radius!r}")

    @classmethod
    def with_capture_radius(cls, position: Point, capture_radius: float,
                            constants: PhysicalConstants = PIXEL_UNITS) -> "BlackHole":
        if not capture_radius > 0.0:
            raise ValueError(f"capture radius must be positive, got {capture_radius!r}")
        return cls(position, mass_for_radius(capture_radius, constants), constants)

    @property
    def photon_sphere_radius(self) -> float:
        return PHOTON_SPHERE_FACTOR * self.capture_radius


@dataclass(frozen=True)
class StateVector:
    r: float
    phi: float
    dr: float
    dphi: float


def add(a: StateVector, b: StateVector) -> StateVector:
    return StateVector(a.r + b.r, a.phi + b.phi, a.dr + b.dr, a.dphi + b.dphi)


def scale(a: StateVector, k: float) -> StateVector:
    return StateVector(a.r * k, a.phi * k, a.dr * k, a.dphi * k)


def shader_uniforms(bh: BlackHole, screen_size: Tuple[float, float]) -> Dict[str, object]:
    """Parameters shared with the per-pixel lensing shader, keyed by uniform name."""
    return {
        "u_blackHolePos": bh.position,
        "u_mass": bh.mass,
        "u_Rs": bh.capture_radius,
        "u_screenSize": (float(screen_size[0]), float(screen_size[1])),
    }
