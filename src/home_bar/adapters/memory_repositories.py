"""In-memory repositories for mock mode and tests."""

from dataclasses import dataclass, field, replace

from home_bar.domain.inventory import InventoryItem
from home_bar.domain.recipes import Recipe
from home_bar.services.inventory import InventoryRepository
from home_bar.services.recipes import RecipeRepository


@dataclass
class InMemoryInventoryRepository(InventoryRepository):
    """Dictionary-backed inventory repository."""

    items: dict[str, InventoryItem] = field(default_factory=dict)

    @classmethod
    def from_items(cls, items: list[InventoryItem]) -> "InMemoryInventoryRepository":
        """Create a repository preloaded with items."""
        return cls(items={item.item_id: item for item in items})

    def list_items(self) -> list[InventoryItem]:
        return list(self.items.values())

    def get_item(self, item_id: str) -> InventoryItem | None:
        return self.items.get(item_id)

    def put_item(self, item: InventoryItem) -> InventoryItem:
        self.items[item.item_id] = item
        return item

    def update_item(
        self, item_id: str, changes: dict[str, object]
    ) -> InventoryItem | None:
        current = self.items.get(item_id)
        if current is None:
            return None
        updated = replace(current, **changes)
        self.items[item_id] = updated
        return updated

    def delete_item(self, item_id: str) -> None:
        self.items.pop(item_id, None)


@dataclass
class InMemoryRecipeRepository(RecipeRepository):
    """Dictionary-backed recipe repository."""

    recipes: dict[str, Recipe] = field(default_factory=dict)

    @classmethod
    def from_recipes(cls, recipes: list[Recipe]) -> "InMemoryRecipeRepository":
        """Create a repository preloaded with recipes."""
        return cls(recipes={recipe.recipe_id: recipe for recipe in recipes})

    def list_recipes(self) -> list[Recipe]:
        return sorted(self.recipes.values(), key=lambda recipe: recipe.name)

    def get_recipe(self, recipe_id: str) -> Recipe | None:
        return self.recipes.get(recipe_id)

    def put_recipe(self, recipe: Recipe) -> Recipe:
        self.recipes[recipe.recipe_id] = recipe
        return recipe

    def update_recipe(self, recipe_id: str, changes: dict[str, object]) -> Recipe | None:
        current = self.recipes.get(recipe_id)
        if current is None:
            return None
        updated = replace(current, **changes)
        self.recipes[recipe_id] = updated
        return updated

    def delete_recipe(self, recipe_id: str) -> None:
        self.recipes.pop(recipe_id, None)
