from pydantic import BaseModel, ConfigDict, computed_field


class DependencyStatus(BaseModel):
    """Snapshot of one credential dependency"""
    model_config = ConfigDict(frozen=True)

    name: str
    ready: bool


class ReadinessReport(BaseModel):
    model_config = ConfigDict(frozen=True)

    dependencies: list[DependencyStatus]

    @computed_field
    @property
    def ready(self) -> bool:
        # all() of an empty list is True; the aggregator refuses an empty registry
        return all(d.ready for d in self.dependencies)

    def is_ready(self, name: str) -> bool:
        for d in self.dependencies:
            if d.name == name:
                return d.ready
        return False


class ReadinessOut(BaseModel):
    vault_initialized: bool
    digitalocean_initialized: bool
    ready: bool
    dependencies: list[DependencyStatus]
