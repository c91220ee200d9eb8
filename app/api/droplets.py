from fastapi import APIRouter, Depends

from app.api.deps import get_controller
from app.core.lifecycle import LifecycleController
from app.schemas.droplet import BulkDeleteResult, Droplet, DropletDeleted

router = APIRouter(prefix="/droplets", tags=["droplets"])

# LifecycleError subclasses raised below are rendered by app.core.errors.


@router.get("", response_model=list[Droplet])
def list_droplets(controller: LifecycleController = Depends(get_controller)):
    """List every droplet carrying the lifecycle tag (may be empty)."""
    return controller.list_instances()


@router.get("/{droplet_id}", response_model=Droplet)
def get_droplet(droplet_id: str, controller: LifecycleController = Depends(get_controller)):
    return controller.get_instance(droplet_id)


@router.delete("/{droplet_id}", response_model=DropletDeleted)
def delete_droplet(droplet_id: str, controller: LifecycleController = Depends(get_controller)):
    deleted_id = controller.delete_instance(droplet_id)
    return DropletDeleted(message=f"Droplet {deleted_id} deleted", droplet_id=deleted_id)


@router.delete("", response_model=BulkDeleteResult)
def delete_all_droplets(controller: LifecycleController = Depends(get_controller)):
    """
    Ask the provider to delete every tagged droplet.

    200 means the provider accepted the whole request; teardown itself is
    asynchronous, so droplets can still show up in GET /droplets for a while.
    """
    return controller.delete_all_instances()
