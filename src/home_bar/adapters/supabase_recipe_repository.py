"""Supabase implementation for recipes."""

from dataclasses import dataclass

from supabase import Client

from home_bar.adapters.rows import changes_to_row, parse_recipe_row, recipe_to_row
from home_bar.domain.recipes import Recipe
from home_bar.services.recipes import RecipeRepository


@dataclass
class SupabaseRecipeRepository(RecipeRepository):
    """Supabase-backed repository for the recipes table."""

    client: Client
    table_name: str = "home_bar_recipes"

    def list_recipes(self) -> list[Recipe]:
        """Return every recipe ordered by name."""
        response = (
            self.client.table(self.table_name).select("*").order("name").execute()
        )
        return [parse_recipe_row(row) for row in response.data or []]

    def get_recipe(self, recipe_id: str) -> Recipe | None:
        """Return a recipe by id, if present."""
        response = (
            self.client.table(self.table_name)
            .select("*")
            .eq("recipe_id", recipe_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_recipe_row(response.data[0])

    def put_recipe(self, recipe: Recipe) -> Recipe:
        """Upsert a recipe and return it."""
        response = (
            self.client.table(self.table_name).upsert(recipe_to_row(recipe)).execute()
        )
        if not response.data:
            raise RuntimeError("Failed to store recipe")
        return parse_recipe_row(response.data[0])

    def update_recipe(self, recipe_id: str, changes: dict[str, object]) -> Recipe | None:
        """Update a recipe and return it, if present."""
        response = (
            self.client.table(self.table_name)
            .update(changes_to_row(changes))
            .eq("recipe_id", recipe_id)
            .execute()
        )
        if not response.data:
            return None
        return parse_recipe_row(response.data[0])

    def delete_recipe(self, recipe_id: str) -> None:
        """Delete a recipe."""
        self.client.table(self.table_name).delete().eq("recipe_id", recipe_id).execute()
