import pytest

from pydantic import ValidationError

from app.core.config import Settings, get_settings
from app.services import get_order_store, reset_order_store


def test_defaults():
    settings = Settings()

    assert settings.api_port == 8081
    assert settings.table_count == 100
    assert (settings.cooking_time_min, settings.cooking_time_max) == (5, 15)
    assert settings.base_url == "http://127.0.0.1:8081"


def test_env_override(monkeypatch):
    monkeypatch.setenv("TABLE_COUNT", "12")
    monkeypatch.setenv("MENU_SEED", "4")

    settings = Settings()

    assert settings.table_count == 12
    assert settings.menu_seed == 4


def test_table_count_limit(monkeypatch):
    monkeypatch.setenv("TABLE_COUNT", "101")

    with pytest.raises(ValidationError):
        Settings()


def test_cooking_range_validated():
    with pytest.raises(ValidationError, match="cooking_time_min"):
        Settings(cooking_time_min=20, cooking_time_max=10)


def test_order_store_factory(monkeypatch):
    """The store is built from settings once and cached until reset"""

    monkeypatch.setenv("TABLE_COUNT", "5")
    get_settings.cache_clear()
    reset_order_store()

    try:
        store = get_order_store()

        assert len(store.list_tables()) == 5
        assert get_order_store() is store

        reset_order_store()
        assert get_order_store() is not store
    finally:
        get_settings.cache_clear()
        reset_order_store()
