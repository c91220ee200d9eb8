from fastapi import Depends

from app.clients.digitalocean import DigitalOceanClient
from app.clients.inventory import TaggedInventory
from app.core.config import Settings, get_settings
from app.core.lifecycle import LifecycleController


def get_inventory(settings: Settings = Depends(get_settings)):
    client = DigitalOceanClient.from_settings(settings)
    try:
        yield client
    finally:
        client.close()


def get_controller(
    settings: Settings = Depends(get_settings),
    inventory: TaggedInventory = Depends(get_inventory),
) -> LifecycleController:
    return LifecycleController(inventory, settings.LIFECYCLE_TAG)
