import logging
from collections.abc import Callable, Sequence

from app.core.config import Settings
from app.core.probes import Dependency, probe
from app.schemas.readiness import DependencyStatus, ReadinessReport

logger = logging.getLogger(__name__)

Probe = Callable[[Dependency, Settings], bool]

# Order is part of the contract: secrets first, then cloud.
DEFAULT_DEPENDENCIES: tuple[Dependency, ...] = (
    Dependency.SECRETS_TOKEN,
    Dependency.CLOUD_TOKEN,
)


def aggregate(
    settings: Settings,
    *,
    dependencies: Sequence[Dependency] = DEFAULT_DEPENDENCIES,
    probe_fn: Probe = probe,
) -> ReadinessReport:
    """
    Run every registered probe once, in order, and AND the results.

    A probe that blows up counts as not ready; the dependency is still listed.
    An empty or duplicated registry is a programming error and raises.
    """
    if not dependencies:
        raise RuntimeError("readiness probe registry is empty")
    if len(set(dependencies)) != len(dependencies):
        raise RuntimeError(f"readiness probe registry has duplicates: {list(dependencies)}")

    statuses: list[DependencyStatus] = []
    for dep in dependencies:
        try:
            ok = bool(probe_fn(dep, settings))
        except Exception:
            logger.exception("probe for %s raised; reporting it as not ready", dep.value)
            ok = False
        statuses.append(DependencyStatus(name=dep.value, ready=ok))

    report = ReadinessReport(dependencies=statuses)
    if not report.ready:
        logger.debug(
            "service not ready; missing: %s",
            ", ".join(s.name for s in statuses if not s.ready),
        )
    return report
