from app.core.config import Settings
from app.core.errors import NotFound, RemoteUnavailable
from app.schemas.droplet import BulkDeleteResult, Droplet


def make_settings(**overrides) -> Settings:
    values = {
        "VAULT_TOKEN": "vault-test-token",
        "DIGITALOCEAN_TOKEN": "do-test-token",
        "LIFECYCLE_TAG": "minecraft",
    }
    values.update(overrides)
    # explicit kwargs win over the real environment; skip any local .env
    return Settings(_env_file=None, **values)


def make_droplet(droplet_id: int, name: str | None = None, tags=("minecraft",), **extra) -> Droplet:
    return Droplet(
        id=droplet_id,
        name=name or f"mc-{droplet_id}",
        tags=list(tags),
        status="active",
        **extra,
    )


class FakeInventory:
    """In-memory stand-in for the DigitalOcean client; records every call."""

    def __init__(self, droplets=(), bulk_status_code: int = 204, bulk_message=None):
        self.droplets: dict[int, Droplet] = {d.id: d for d in droplets}
        self.bulk_status_code = bulk_status_code
        self.bulk_message = bulk_message
        self.unavailable: str | None = None
        self.calls: list[tuple] = []

    def _check(self):
        if self.unavailable:
            raise RemoteUnavailable(self.unavailable)

    def list_by_tag(self, tag):
        self.calls.append(("list_by_tag", tag))
        self._check()
        return [d for d in self.droplets.values() if tag in d.tags]

    def get_by_id(self, droplet_id):
        self.calls.append(("get_by_id", droplet_id))
        self._check()
        if droplet_id not in self.droplets:
            raise NotFound(f"Droplet {droplet_id} not found", droplet_id=droplet_id)
        return self.droplets[droplet_id]

    def delete_by_id(self, droplet_id):
        self.calls.append(("delete_by_id", droplet_id))
        self._check()
        if droplet_id not in self.droplets:
            raise NotFound(f"Droplet {droplet_id} not found", droplet_id=droplet_id)
        del self.droplets[droplet_id]

    def delete_by_tag(self, tag):
        self.calls.append(("delete_by_tag", tag))
        self._check()
        if self.bulk_status_code == 204:
            for droplet_id in [d.id for d in self.droplets.values() if tag in d.tags]:
                del self.droplets[droplet_id]
        return BulkDeleteResult(
            requested_tag=tag,
            provider_status_code=self.bulk_status_code,
            succeeded=self.bulk_status_code == 204,
            raw_message=self.bulk_message,
        )
