from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class Droplet(BaseModel):
    """
    One DigitalOcean droplet as reported by the provider.

    Only the fields the service reasons about are typed; everything else the
    provider sends (networks, image, size, ...) is kept as-is.
    """
    model_config = ConfigDict(extra="allow")

    id: int
    name: str
    tags: list[str] = Field(default_factory=list)
    status: str | None = None


class BulkDeleteResult(BaseModel):
    requested_tag: str
    provider_status_code: int
    succeeded: bool
    raw_message: Any = None


class DropletDeleted(BaseModel):
    message: str
    droplet_id: int
