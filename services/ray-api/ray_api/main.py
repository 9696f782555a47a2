import logging
import os

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from ray_physics.constants import PhysicalConstants
from ray_physics.models import BlackHole
from ray_physics.rays import integrate_fan, integrate_trajectory

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))
logger = logging.getLogger(__name__)

UNITS = PhysicalConstants.from_env()

app = FastAPI(title="Ray API")
app.add_middleware(
    CORSMiddleware,
    allow_origins=os.getenv("CORS_ALLOW_ORIGINS", "*").split(","),
    allow_methods=["*"],
    allow_headers=["*"],
)

@app.exception_handler(ValueError)
def value_error(request: Request, exc: ValueError):
    logger.info("rejected %s: %s", request.url.path, exc)
    return JSONResponse(status_code=422, content={"detail": str(exc)})

class IntegrateReq(BaseModel):
    mass: float = Field(gt=0)
    center_x: float = 0.0; center_y: float = 0.0
    x: float; y: float
    vx: float; vy: float
    steps: int = Field(1000, ge=0)
    dlam: float = Field(1.0, gt=0)

class FanReq(BaseModel):
    mass: float = Field(gt=0)
    center_x: float = 0.0; center_y: float = 0.0
    source_x: float; source_y: float
    speed: float
    count: int = Field(30, ge=1)
    spread_deg: float = 60.0
    base_angle_deg: float = 0.0
    steps: int = Field(1000, ge=0)
    dlam: float = Field(1.0, gt=0)

@app.post("/integrate")
def integrate(req: IntegrateReq):
    bh = BlackHole((req.center_x, req.center_y), req.mass, UNITS)
    result = integrate_trajectory(bh, req.x, req.y, req.vx, req.vy, req.steps, req.dlam)
    logger.info("integrated ray from (%g, %g): %d steps, hit_horizon=%s",
                req.x, req.y, result["steps_taken"], result["hit_horizon"])
    return result

@app.post("/fan")
def fan(req: FanReq):
    bh = BlackHole((req.center_x, req.center_y), req.mass, UNITS)
    results = integrate_fan(bh, (req.source_x, req.source_y), req.speed, req.count,
                            req.spread_deg, req.base_angle_deg, req.steps, req.dlam)
    logger.info("integrated fan of %d rays, %d captured",
                len(results), sum(r["hit_horizon"] for r in results))
    return results

def main():
    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8001")))
