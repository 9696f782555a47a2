import math
import os
from dataclasses import dataclass
from typing import Optional

# r is clamped to this before every acceleration evaluation
MIN_RADIUS = 1e-9
PHOTON_SPHERE_FACTOR = 1.5


@dataclass(frozen=True)
class PhysicalConstants:
    G: float
    c: float

    def __post_init__(self):
        if not (self.G > 0.0 and math.isfinite(self.G)):
            raise ValueError(f"G must be positive and finite, got {self.G!r}")
        if not (self.c > 0.0 and math.isfinite(self.c)):
            raise ValueError(f"c must be positive and finite, got {self.c!r}")

    @classmethod
    def from_env(cls, default: Optional["PhysicalConstants"] = None) -> "PhysicalConstants":
        default = default or PIXEL_UNITS
        G = float(os.getenv("RAY_PHYSICS_G", default.G))
        c = float(os.getenv("RAY_PHYSICS_C", default.c))
        return cls(G=G, c=c)


# pixels and pixels per second
PIXEL_UNITS = PhysicalConstants(G=1.0, c=100.0)
SI_UNITS = PhysicalConstants(G=6.67430e-11, c=299_792_458.0)


def schwarzschild_radius(mass: float, constants: PhysicalConstants = PIXEL_UNITS) -> float:
    return 2.0 * constants.G * mass / (constants.c * constants.c)


def mass_for_radius(radius: float, constants: PhysicalConstants = PIXEL_UNITS) -> float:
    return radius * constants.c * constants.c / (2.0 * constants.G)
