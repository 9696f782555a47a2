"""Conversions between Cartesian points and polar coordinates around a center.

Angles are measured with ``atan2`` and lie in ``(-pi, pi]``. A point sitting
exactly on the center maps to ``(0.0, 0.0)``; callers treat that as singular.
"""
import math
from typing import Tuple

Point = Tuple[float, float]


def to_polar(point: Point, center: Point) -> Tuple[float, float]:
    dx = point[0] - center[0]
    dy = point[1] - center[1]
    phi = math.atan2(dy, dx)
    # atan2(-0.0, x < 0) is -pi
    if phi == -math.pi:
        phi = math.pi
    return math.hypot(dx, dy), phi


def to_cartesian(r: float, phi: float, center: Point) -> Point:
    return (center[0] + r * math.cos(phi), center[1] + r * math.sin(phi))


def project_velocity(point: Point, velocity: Point, center: Point) -> Tuple[float, float]:
    """Split a Cartesian velocity into (dr, dphi) about ``center``.

    The radial unit is ``(point - center) / distance`` and the tangential unit
    is that rotated by +90 degrees. Zero distance gives ``(0.0, 0.0)``.
    """
    dx = point[0] - center[0]
    dy = point[1] - center[1]
    dist = math.hypot(dx, dy)
    if dist == 0.0:
        return 0.0, 0.0
    ux, uy = dx / dist, dy / dist
    dr = velocity[0] * ux + velocity[1] * uy
    dphi = (-velocity[0] * uy + velocity[1] * ux) / dist
    return dr, dphi
