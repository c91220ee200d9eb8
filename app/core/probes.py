import enum
import logging

from app.core.config import Settings

logger = logging.getLogger(__name__)


class Dependency(str, enum.Enum):
    SECRETS_TOKEN = "secrets-token"
    CLOUD_TOKEN = "cloud-token"


# dependency -> settings attribute holding its credential
_CREDENTIAL_FIELDS = {
    Dependency.SECRETS_TOKEN: "VAULT_TOKEN",
    Dependency.CLOUD_TOKEN: "DIGITALOCEAN_TOKEN",
}


def probe(dependency: Dependency, settings: Settings) -> bool:
    """
    True iff the credential for `dependency` is present and non-empty.

    Local check only: the token is not validated against the remote service.
    """
    dependency = Dependency(dependency)
    field = _CREDENTIAL_FIELDS[dependency]
    value = getattr(settings, field, None)
    if value is None or not str(value).strip():
        logger.debug("credential %s for dependency %s is not set", field, dependency.value)
        return False
    return True
