import pytest

from app.main import app
from app.api.deps import get_inventory
from app.core.config import get_settings
from tests.helpers import FakeInventory, make_settings


@pytest.fixture()
def settings():
    return make_settings()


@pytest.fixture()
def inventory():
    return FakeInventory()


@pytest.fixture(autouse=True)
def override_dependencies(settings, inventory):
    """
    Every API test runs against injected settings and the in-memory inventory,
    so nothing reads the real environment or reaches DigitalOcean.
    Tests that need different tokens reassign app.dependency_overrides[get_settings].
    """
    app.dependency_overrides[get_settings] = lambda: settings
    app.dependency_overrides[get_inventory] = lambda: inventory
    yield
    app.dependency_overrides.clear()
