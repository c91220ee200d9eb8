from fastapi import APIRouter, Depends

from app.core.config import Settings, get_settings
from app.core.probes import Dependency
from app.core.readiness import aggregate
from app.schemas.readiness import ReadinessOut

router = APIRouter(tags=["health"])


@router.get("/readiness", response_model=ReadinessOut)
def readiness(settings: Settings = Depends(get_settings)):
    """
    Always 200; the booleans carry the verdict.
    vault_initialized / digitalocean_initialized mirror the individual probes.
    """
    report = aggregate(settings)
    return ReadinessOut(
        vault_initialized=report.is_ready(Dependency.SECRETS_TOKEN.value),
        digitalocean_initialized=report.is_ready(Dependency.CLOUD_TOKEN.value),
        ready=report.ready,
        dependencies=report.dependencies,
    )
