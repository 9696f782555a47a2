from typing import Callable, Tuple

from .constants import MIN_RADIUS
from .models import BlackHole, StateVector, add, scale

Derivative = Callable[[StateVector], StateVector]


def accelerate(r: float, dr: float, dphi: float, rs: float, c: float) -> Tuple[float, float]:
    """Radial and angular acceleration of a ray at radius ``r``.

    Simplified equatorial approximation of a null geodesic, not the exact
    Schwarzschild form. ``r`` must be non-zero; callers clamp it.
    """
    d2phi = -(2.0 / r) * dr * dphi
    d2r = -(c * c * rs) / (2.0 * r * r) + r * (dphi * dphi)
    return d2r, d2phi


def geodesic_rhs(state: StateVector, bh: BlackHole) -> StateVector:
    r = max(state.r, MIN_RADIUS)
    d2r, d2phi = accelerate(r, state.dr, state.dphi, bh.capture_radius, bh.constants.c)
    return StateVector(state.dr, state.dphi, d2r, d2phi)


def rk4_step(s0: StateVector, h: float, f: Derivative) -> StateVector:
    k1 = f(s0)
    k2 = f(add(s0, scale(k1, h / 2.0)))
    k3 = f(add(s0, scale(k2, h / 2.0)))
    k4 = f(add(s0, scale(k3, h)))
    slope = add(add(k1, scale(k2, 2.0)), add(scale(k3, 2.0), k4))
    return add(s0, scale(slope, h / 6.0))
