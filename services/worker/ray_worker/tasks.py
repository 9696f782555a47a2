import logging
import os

from celery import Celery
from ray_physics.constants import PhysicalConstants
from ray_physics.models import BlackHole
from ray_physics.rays import integrate_fan, integrate_trajectory

CELERY_BROKER_URL = os.getenv("CELERY_BROKER_URL", "redis://redis:6379/0")
CELERY_BACKEND_URL = os.getenv("CELERY_BACKEND_URL", "redis://redis:6379/1")

logger = logging.getLogger(__name__)

UNITS = PhysicalConstants.from_env()

celery = Celery("bh", broker=CELERY_BROKER_URL, backend=CELERY_BACKEND_URL)

@celery.task
def integrate_task(mass, x, y, vx, vy, steps=50000, dlam=1.0, center=(0.0, 0.0)):
    bh = BlackHole(center, mass, UNITS)
    result = integrate_trajectory(bh, x, y, vx, vy, steps, dlam)
    logger.info("integrate_task: %d steps, hit_horizon=%s", result["steps_taken"], result["hit_horizon"])
    return result

@celery.task
def fan_task(mass, source, speed, count=30, spread_deg=60.0, base_angle_deg=0.0,
             steps=50000, dlam=1.0, center=(0.0, 0.0)):
    bh = BlackHole(center, mass, UNITS)
    results = integrate_fan(bh, tuple(source), speed, count, spread_deg, base_angle_deg, steps, dlam)
    logger.info("fan_task: %d rays, %d captured", len(results), sum(r["hit_horizon"] for r in results))
    return results
