import logging
import os

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field
from ray_physics.constants import PhysicalConstants
from ray_physics.models import BlackHole

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))
logger = logging.getLogger(__name__)

UNITS = PhysicalConstants.from_env()

app = FastAPI(title="Black Hole API")
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

class BHReq(BaseModel):
    mass: float = Field(gt=0)

@app.post("/derived")
def derived(req: BHReq):
    bh = BlackHole((0.0, 0.0), req.mass, UNITS)
    logger.info("derived parameters for mass=%g: rs=%g", req.mass, bh.capture_radius)
    return {
        "mass": req.mass,
        "schwarzschild_radius": bh.capture_radius,
        "photon_sphere_radius": bh.photon_sphere_radius,
    }

def main():
    uvicorn.run(app, host=os.getenv("HOST", "0.0.0.0"), port=int(os.getenv("PORT", "8000")))
