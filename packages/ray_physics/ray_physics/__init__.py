from .constants import MIN_RADIUS, PIXEL_UNITS, SI_UNITS, PhysicalConstants, mass_for_radius, schwarzschild_radius
from .models import BlackHole, StateVector, add, scale, shader_uniforms
from .coordinates import project_velocity, to_cartesian, to_polar
from .integrators import accelerate, geodesic_rhs, rk4_step
from .rays import LightRay, RayPhase, RayStateError, advance_all, integrate_fan, integrate_trajectory, launch_fan
__all__ = ["MIN_RADIUS","PIXEL_UNITS","SI_UNITS","PhysicalConstants","mass_for_radius","schwarzschild_radius",
           "BlackHole","StateVector","add","scale","shader_uniforms",
           "project_velocity","to_cartesian","to_polar",
           "accelerate","geodesic_rhs","rk4_step",
           "LightRay","RayPhase","RayStateError","advance_all","integrate_fan","integrate_trajectory","launch_fan"]
