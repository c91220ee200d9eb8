from typing import Protocol

from app.schemas.droplet import BulkDeleteResult, Droplet


class TaggedInventory(Protocol):
    """
    What the lifecycle controller needs from a cloud provider.

    Errors:
      - RemoteUnavailable: transport, auth or timeout failure
      - NotFound: get/delete of an id the provider does not know
    """

    def list_by_tag(self, tag: str) -> list[Droplet]: ...

    def get_by_id(self, droplet_id: int) -> Droplet: ...

    def delete_by_id(self, droplet_id: int) -> None: ...

    def delete_by_tag(self, tag: str) -> BulkDeleteResult: ...
