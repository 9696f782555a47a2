import enum
import logging
import math
from collections.abc import Sequence
from typing import Iterable, List

from .coordinates import project_velocity, to_cartesian, to_polar
from .integrators import geodesic_rhs, rk4_step
from .models import BlackHole, Point, StateVector

logger = logging.getLogger(__name__)


class RayStateError(RuntimeError):
    pass


class RayPhase(enum.Enum):
    UNINITIALIZED = "uninitialized"
    ACTIVE = "active"
    TERMINATED = "terminated"


class TrailView(Sequence):
    """Read-only window onto a ray's trail; reflects later appends."""

    def __init__(self, points: List[Point]):
        self._points = points

    def __getitem__(self, index):
        return self._points[index]

    def __len__(self):
        return len(self._points)

    def __repr__(self):
        return f"TrailView({self._points!r})"


class LightRay:
    """A ray bent by a single black hole, integrated in polar coordinates.

    Call ``initialize`` once, then ``step`` once per tick. ``step`` does
    nothing after the ray has crossed the capture radius, and the trail stays
    readable afterwards.
    """

    def __init__(self):
        self.position: Point = (0.0, 0.0)
        self.velocity: Point = (0.0, 0.0)
        self._trail: List[Point] = []
        self.r = 0.0
        self.phi = 0.0
        self.dr = 0.0
        self.dphi = 0.0
        self.d2r = 0.0
        self.d2phi = 0.0
        self.stationary = False
        self.phase = RayPhase.UNINITIALIZED

    @property
    def active(self) -> bool:
        return self.phase is RayPhase.ACTIVE

    @property
    def trail(self) -> TrailView:
        return TrailView(self._trail)

    @property
    def state(self) -> StateVector:
        return StateVector(self.r, self.phi, self.dr, self.dphi)

    def initialize(self, position: Point, velocity: Point, bh: BlackHole) -> None:
        if self.phase is not RayPhase.UNINITIALIZED:
            raise RayStateError(f"cannot initialize a ray that is {self.phase.value}")
        self.position = (float(position[0]), float(position[1]))
        self.velocity = (float(velocity[0]), float(velocity[1]))
        self.r, self.phi = to_polar(self.position, bh.position)
        self.dr, self.dphi = project_velocity(self.position, self.velocity, bh.position)
        self.d2r = 0.0
        self.d2phi = 0.0
        self._trail.clear()
        self._trail.append(self.position)
        # zero-velocity seeds are held in place by step
        self.stationary = self.dr == 0.0 and self.dphi == 0.0
        self.phase = RayPhase.ACTIVE
        logger.debug("ray initialized at r=%.6g phi=%.6g dr=%.6g dphi=%.6g",
                     self.r, self.phi, self.dr, self.dphi)

    def step(self, delta_time: float, bh: BlackHole) -> None:
        """Advance one RK4 step of ``delta_time``, then check for capture.

        The capture test runs after the new point is on the trail, so the last
        point of a captured ray may lie inside the capture radius. A ray seeded
        with zero velocity is held where it is; its trail still grows.
        """
        if not self.active:
            return
        if not self.stationary:
            first: List[StateVector] = []

            def f(state: StateVector) -> StateVector:
                k = geodesic_rhs(state, bh)
                if not first:
                    first.append(k)
                return k

            s1 = rk4_step(self.state, delta_time, f)
            self.r, self.phi, self.dr, self.dphi = s1.r, s1.phi, s1.dr, s1.dphi
            self.d2r, self.d2phi = first[0].dr, first[0].dphi
            self.position = to_cartesian(self.r, self.phi, bh.position)
        self._trail.append(self.position)

        if self.r <= bh.capture_radius:
            self.phase = RayPhase.TERMINATED
            logger.debug("ray captured at r=%.6g (rs=%.6g) after %d points",
                         self.r, bh.capture_radius, len(self._trail))


def advance_all(rays: Iterable[LightRay], delta_time: float, bh: BlackHole) -> int:
    """Step every active ray once; returns how many are still active."""
    remaining = 0
    for ray in rays:
        ray.step(delta_time, bh)
        if ray.active:
            remaining += 1
    return remaining


def launch_fan(source: Point, speed: float, count: int, spread_deg: float, bh: BlackHole,
               base_angle_deg: float = 0.0) -> List[LightRay]:
    """Initialize ``count`` rays leaving ``source`` in a fan ``spread_deg`` wide."""
    if count < 1:
        raise ValueError(f"count must be at least 1, got {count!r}")
    rays = []
    for i in range(count):
        if count == 1:
            offset = 0.0
        else:
            offset = -spread_deg / 2.0 + spread_deg * i / (count - 1)
        angle = math.radians(base_angle_deg + offset)
        ray = LightRay()
        ray.initialize(source, (speed * math.cos(angle), speed * math.sin(angle)), bh)
        rays.append(ray)
    return rays


def summarize(ray: LightRay, bh: BlackHole) -> dict:
    return {
        "trail": list(ray.trail),
        "hit_horizon": ray.phase is RayPhase.TERMINATED,
        "rs": bh.capture_radius,
        # one trail point per step on top of the start point
        "steps_taken": len(ray.trail) - 1,
    }


def integrate_trajectory(bh: BlackHole, x: float, y: float, vx: float, vy: float,
                         steps: int = 1000, dlam: float = 1.0) -> dict:
    ray = LightRay()
    ray.initialize((x, y), (vx, vy), bh)
    for _ in range(steps):
        if not ray.active:
            break
        ray.step(dlam, bh)
    logger.debug("trajectory from (%.6g, %.6g): %d points, captured=%s",
                 x, y, len(ray.trail), not ray.active)
    return summarize(ray, bh)


def integrate_fan(bh: BlackHole, source: Point, speed: float, count: int, spread_deg: float,
                  base_angle_deg: float = 0.0, steps: int = 1000,
                  dlam: float = 1.0) -> List[dict]:
    rays = launch_fan(source, speed, count, spread_deg, bh, base_angle_deg)
    for _ in range(steps):
        if advance_all(rays, dlam, bh) == 0:
            break
    return [summarize(ray, bh) for ray in rays]
