import pytest

from app.models import MenuItem
from app.services import (
    MENU_ITEM_NAMES,
    MenuCatalog,
    build_menu_catalog,
    build_table_registry,
)


# ========== menu catalog ==========

def test_default_menu():
    catalog = build_menu_catalog(seed=1)

    assert len(catalog) == 20
    assert [item.name for item in catalog] == list(MENU_ITEM_NAMES)
    assert [item.id for item in catalog] == list(range(1, 21))
    assert "Burger" in [item.name for item in catalog]


def test_cooking_times_within_range():
    for seed in range(20):
        catalog = build_menu_catalog(seed=seed)
        assert all(5 <= item.cooking_time <= 15 for item in catalog)


def test_seed_reproduces_menu():
    assert build_menu_catalog(seed=42).items() == build_menu_catalog(seed=42).items()


def test_fixed_cooking_time_range():
    catalog = build_menu_catalog(names=["Tea"], min_minutes=3, max_minutes=3)

    assert catalog.get(1) == MenuItem(id=1, name="Tea", cooking_time=3)


def test_invalid_cooking_time_range():
    with pytest.raises(ValueError):
        build_menu_catalog(min_minutes=10, max_minutes=5)


def test_catalog_lookup(catalog):
    assert 1 in catalog
    assert 3 not in catalog
    assert catalog.get(2).name == "Bread"
    assert catalog.get(3) is None


def test_catalog_rejects_duplicate_ids():
    with pytest.raises(ValueError, match="duplicate"):
        MenuCatalog([
            MenuItem(id=1, name="Soup", cooking_time=5),
            MenuItem(id=1, name="Bread", cooking_time=6),
        ])


def test_menu_items_are_frozen(catalog):
    with pytest.raises(AttributeError):
        catalog.get(1).cooking_time = 99


# ========== table registry ==========

def test_default_registry():
    registry = build_table_registry()

    assert len(registry) == 100
    assert [table.id for table in registry][0] == 1
    assert [table.id for table in registry][-1] == 100
    assert 100 in registry
    assert 101 not in registry
    assert 0 not in registry


@pytest.mark.parametrize("count", [0, 101, -5])
def test_registry_size_limits(count):
    with pytest.raises(ValueError):
        build_table_registry(count)
