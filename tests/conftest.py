import pytest

from fastapi.testclient import TestClient

from app.main import app
from app.models import MenuItem
from app.services import MenuCatalog, TableOrderStore, build_table_registry, get_order_store


@pytest.fixture
def catalog() -> MenuCatalog:
    """Two-item menu: 1 Soup, 2 Bread"""

    return MenuCatalog([
        MenuItem(id=1, name="Soup", cooking_time=5),
        MenuItem(id=2, name="Bread", cooking_time=10),
    ])


@pytest.fixture
def store(catalog) -> TableOrderStore:
    """Store with tables 1 and 2"""

    return TableOrderStore(catalog, build_table_registry(2))


@pytest.fixture
def client(store):
    """API client wired to the test store instead of the cached one"""

    app.dependency_overrides[get_order_store] = lambda: store
    yield TestClient(app)
    app.dependency_overrides.clear()
