"""Dependency container wiring for the application."""

import logging
from dataclasses import dataclass

from supabase import create_client

from home_bar.adapters.memory_repositories import (
    InMemoryInventoryRepository,
    InMemoryRecipeRepository,
)
from home_bar.adapters.sample_data import load_sample_data
from home_bar.adapters.supabase_inventory_repository import (
    SupabaseInventoryRepository,
)
from home_bar.adapters.supabase_recipe_repository import SupabaseRecipeRepository
from home_bar.config import Settings
from home_bar.services.inventory import InventoryRepository, InventoryService
from home_bar.services.recipes import RecipeRepository, RecipeService
from home_bar.services.recommendations import (
    RecommendationService,
    SeededRandomSource,
)

logger = logging.getLogger(__name__)


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    inventory_service: InventoryService
    recipe_service: RecipeService
    recommendation_service: RecommendationService


def build_repositories(
    settings: Settings,
) -> tuple[InventoryRepository, RecipeRepository]:
    """Create the inventory and recipe repositories for the configured storage."""
    if settings.storage == "memory":
        inventory, recipes = load_sample_data()
        logger.info(
            "Using in-memory storage with sample data",
            extra={"items": len(inventory), "recipes": len(recipes)},
        )
        return (
            InMemoryInventoryRepository.from_items(inventory),
            InMemoryRecipeRepository.from_recipes(recipes),
        )
    if not settings.supabase_url or not settings.supabase_service_key:
        raise RuntimeError(
            "HOME_BAR_SUPABASE_URL and HOME_BAR_SUPABASE_SERVICE_KEY are required "
            "unless HOME_BAR_STORAGE=memory"
        )
    client = create_client(settings.supabase_url, settings.supabase_service_key)
    return (
        SupabaseInventoryRepository(client, settings.inventory_table),
        SupabaseRecipeRepository(client, settings.recipes_table),
    )


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    inventory_repository, recipe_repository = build_repositories(resolved_settings)
    recommendation_service = RecommendationService(
        inventory_repository=inventory_repository,
        recipe_repository=recipe_repository,
        random_source=SeededRandomSource(resolved_settings.random_seed),
        default_limit=resolved_settings.recommendation_limit,
    )
    return AppContainer(
        settings=resolved_settings,
        inventory_service=InventoryService(inventory_repository),
        recipe_service=RecipeService(recipe_repository),
        recommendation_service=recommendation_service,
    )
