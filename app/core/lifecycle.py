from __future__ import annotations

import logging

from app.clients.inventory import TaggedInventory
from app.core.errors import InvalidArgument, PartialAcceptance
from app.schemas.droplet import BulkDeleteResult, Droplet

logger = logging.getLogger(__name__)


def parse_droplet_id(raw_id: str) -> int:
    """
    Accepts only plain positive decimal ids ("42", " 42 ").
    Anything else is rejected; never coerced to a default id.
    """
    raw = (raw_id or "").strip()
    if not raw or not (raw.isascii() and raw.isdigit()):
        raise InvalidArgument(f"Invalid droplet id {raw_id!r} (expected a positive integer)")

    v = int(raw)
    if v <= 0:
        raise InvalidArgument(f"Invalid droplet id {raw_id!r} (must be positive)")
    return v


class LifecycleController:
    """
    List / inspect / delete the droplets carrying one lifecycle tag.

    Holds no state besides the inventory handle and the tag, so one instance
    per request is fine and nothing is shared between requests.
    """

    def __init__(self, inventory: TaggedInventory, tag: str) -> None:
        if not tag:
            raise ValueError("lifecycle tag must be non-empty")
        self.inventory = inventory
        self.tag = tag

    def list_instances(self) -> list[Droplet]:
        return self.inventory.list_by_tag(self.tag)

    def get_instance(self, raw_id: str) -> Droplet:
        droplet_id = parse_droplet_id(raw_id)
        return self.inventory.get_by_id(droplet_id)

    def delete_instance(self, raw_id: str) -> int:
        droplet_id = parse_droplet_id(raw_id)
        self.inventory.delete_by_id(droplet_id)
        logger.info("deleted droplet %s", droplet_id)
        return droplet_id

    def delete_all_instances(self) -> BulkDeleteResult:
        result = self.inventory.delete_by_tag(self.tag)
        if not result.succeeded:
            raise PartialAcceptance(
                f"Bulk delete of tag {self.tag!r} was not fully accepted "
                f"(provider status {result.provider_status_code})",
                provider_status_code=result.provider_status_code,
                provider_message=result.raw_message,
            )
        # Acceptance only: the provider tears droplets down asynchronously.
        logger.info("bulk delete accepted for tag %s", self.tag)
        return result
