from fastapi import APIRouter

router = APIRouter()

@router.get("/")
def root():
    return {
        "name": "Droplet Control Plane",
        "status": "ok",
        "docs": "/docs",
        "health": "/health",
        "readiness": "/readiness",
        "droplets": "/droplets",
    }
