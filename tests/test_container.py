"""Tests for container wiring."""

import pytest

from home_bar.config import Settings
from home_bar.containers import build_container


def test_build_container_creates_services(settings) -> None:
    container = build_container(settings)

    assert container.inventory_service is not None
    assert container.recipe_service is not None
    assert container.recommendation_service.default_limit == 3


def test_memory_storage_is_seeded_with_sample_data(settings) -> None:
    container = build_container(settings)

    assert len(container.inventory_service.list_items()) == 20
    assert len(container.recipe_service.list_recipes()) == 8


def test_recommendation_limit_comes_from_settings() -> None:
    container = build_container(Settings(storage="memory", recommendation_limit=5))

    assert container.recommendation_service.default_limit == 5


def test_supabase_storage_requires_credentials() -> None:
    settings = Settings(storage="supabase", supabase_url=None, supabase_service_key=None)

    with pytest.raises(RuntimeError, match="SUPABASE_URL"):
        build_container(settings)
