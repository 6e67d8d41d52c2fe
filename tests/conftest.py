"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime

import pytest

from home_bar.adapters.memory_repositories import (
    InMemoryInventoryRepository,
    InMemoryRecipeRepository,
)
from home_bar.config import Settings
from home_bar.containers import AppContainer
from home_bar.domain.inventory import InventoryItem
from home_bar.domain.recipes import Ingredient, Recipe
from home_bar.services.inventory import InventoryService
from home_bar.services.recipes import RecipeService
from home_bar.services.recommendations import RecommendationService

TODAY = date(2024, 6, 15)
NOW = datetime(2024, 6, 15, 12, 0, tzinfo=UTC)


def make_item(  # noqa: PLR0913
    name: str,
    category: str = "spirits",
    quantity: float = 1,
    expiration_date: date | None = None,
    item_id: str | None = None,
    brand: str | None = None,
) -> InventoryItem:
    return InventoryItem(
        item_id=item_id or name.lower().replace(" ", "-"),
        name=name,
        category=category,
        quantity=quantity,
        unit="ml",
        purchase_date=date(2024, 1, 1),
        created_at=NOW,
        updated_at=NOW,
        expiration_date=expiration_date,
        brand=brand,
    )


def make_recipe(
    name: str,
    ingredients: list[str | Ingredient] | None = None,
    **kwargs: object,
) -> Recipe:
    lines = [
        entry if isinstance(entry, Ingredient) else Ingredient(name=entry)
        for entry in ingredients or []
    ]
    kwargs.setdefault("difficulty", None)
    kwargs.setdefault("preparation_time", None)
    return Recipe(
        recipe_id=name.lower().replace(" ", "-"),
        name=name,
        created_at=NOW,
        updated_at=NOW,
        ingredients=lines,
        **kwargs,
    )


@dataclass
class FixedRandomSource:
    """Random source replaying fixed values."""

    values: list[float] = field(default_factory=lambda: [0.0])
    calls: int = 0

    def next(self) -> float:
        value = self.values[self.calls % len(self.values)]
        self.calls += 1
        return value


@dataclass
class CountingRecipeRepository(InMemoryRecipeRepository):
    """Recipe repository that counts full listings."""

    list_calls: int = 0

    def list_recipes(self) -> list[Recipe]:
        self.list_calls += 1
        return super().list_recipes()


@pytest.fixture
def settings() -> Settings:
    return Settings(storage="memory", random_seed=7)


@pytest.fixture
def inventory_repository() -> InMemoryInventoryRepository:
    return InMemoryInventoryRepository()


@pytest.fixture
def recipe_repository() -> CountingRecipeRepository:
    return CountingRecipeRepository()


@pytest.fixture
def random_source() -> FixedRandomSource:
    return FixedRandomSource()


@pytest.fixture
def recommendation_service(
    inventory_repository: InMemoryInventoryRepository,
    recipe_repository: CountingRecipeRepository,
    random_source: FixedRandomSource,
) -> RecommendationService:
    return RecommendationService(
        inventory_repository=inventory_repository,
        recipe_repository=recipe_repository,
        random_source=random_source,
    )


@pytest.fixture
def container(
    settings: Settings,
    inventory_repository: InMemoryInventoryRepository,
    recipe_repository: CountingRecipeRepository,
    recommendation_service: RecommendationService,
) -> AppContainer:
    return AppContainer(
        settings=settings,
        inventory_service=InventoryService(inventory_repository),
        recipe_service=RecipeService(recipe_repository),
        recommendation_service=recommendation_service,
    )
