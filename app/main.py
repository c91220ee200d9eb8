from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.api.health import router as health_router
from app.api.root import router as root_router
from app.api.readiness import router as readiness_router
from app.api.droplets import router as droplets_router
from app.core.config import settings
from app.core.errors import register_error_handlers
from app.core.logging import configure_logging

configure_logging(settings.LOG_LEVEL)

app = FastAPI(title="Droplet Control Plane")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

register_error_handlers(app)

app.include_router(root_router)
app.include_router(health_router)
app.include_router(readiness_router)
app.include_router(droplets_router)
