"""Services for managing drink recipes."""

import logging
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Protocol
from uuid import uuid4

from home_bar.domain.errors import NotFoundError, ValidationError
from home_bar.domain.recipes import Ingredient, Recipe

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = (
    "name",
    "description",
    "category",
    "glass_type",
    "difficulty",
    "preparation_time",
    "abv",
    "ingredients",
    "instructions",
    "garnish",
    "moods",
    "tags",
    "image_url",
    "temperature",
)


class RecipeRepository(Protocol):
    """Persistence interface for recipes."""

    def list_recipes(self) -> list[Recipe]:
        """Return every recipe."""

    def get_recipe(self, recipe_id: str) -> Recipe | None:
        """Return a recipe by id, if present."""

    def put_recipe(self, recipe: Recipe) -> Recipe:
        """Insert or replace a recipe and return it."""

    def update_recipe(self, recipe_id: str, changes: dict[str, object]) -> Recipe | None:
        """Apply field changes and return the updated recipe, if present."""

    def delete_recipe(self, recipe_id: str) -> None:
        """Delete a recipe."""


@dataclass
class RecipeService:
    """Application service for recipe operations."""

    repository: RecipeRepository

    def list_recipes(self) -> list[Recipe]:
        """Return every recipe."""
        return self.repository.list_recipes()

    def get_recipe(self, recipe_id: str) -> Recipe:
        """Return a recipe or raise NotFoundError."""
        recipe = self.repository.get_recipe(recipe_id)
        if recipe is None:
            raise NotFoundError("Recipe", recipe_id)
        return recipe

    def create_recipe(self, payload: dict[str, object]) -> Recipe:
        """Create a recipe, filling in the form defaults."""
        now = datetime.now(tz=UTC)
        recipe = Recipe(
            recipe_id=str(uuid4()),
            name=str(payload["name"]),
            created_at=now,
            updated_at=now,
            description=str(payload.get("description") or ""),
            category=str(payload.get("category") or "cocktail"),
            glass_type=str(payload.get("glass_type") or ""),
            difficulty=payload.get("difficulty") or "medium",
            preparation_time=payload.get("preparation_time") or 5,
            abv=_checked_abv(payload.get("abv")),
            ingredients=build_ingredients(payload.get("ingredients") or []),
            instructions=list(payload.get("instructions") or []),
            garnish=str(payload.get("garnish") or ""),
            moods=list(payload.get("moods") or []),
            tags=list(payload.get("tags") or []),
            image_url=payload.get("image_url") or None,
            temperature=payload.get("temperature") or None,
        )
        created = self.repository.put_recipe(recipe)
        logger.info("Created recipe", extra={"recipe_id": created.recipe_id})
        return created

    def update_recipe(self, recipe_id: str, payload: dict[str, object]) -> Recipe:
        """Apply a partial update to a recipe."""
        changes = {
            key: value for key, value in payload.items() if key in UPDATABLE_FIELDS
        }
        if not changes:
            raise ValidationError("No valid fields to update")
        if "ingredients" in changes:
            changes["ingredients"] = build_ingredients(changes["ingredients"] or [])
        if "abv" in changes:
            changes["abv"] = _checked_abv(changes["abv"])
        changes["updated_at"] = datetime.now(tz=UTC)
        updated = self.repository.update_recipe(recipe_id, changes)
        if updated is None:
            raise NotFoundError("Recipe", recipe_id)
        return updated

    def delete_recipe(self, recipe_id: str) -> None:
        """Delete a recipe."""
        self.get_recipe(recipe_id)
        self.repository.delete_recipe(recipe_id)
        logger.info("Deleted recipe", extra={"recipe_id": recipe_id})


def build_ingredients(raw: list[object]) -> list[Ingredient]:
    """Build ingredient lines from dicts or existing ingredients."""
    ingredients = []
    for entry in raw:
        if isinstance(entry, Ingredient):
            ingredients.append(entry)
            continue
        if not isinstance(entry, dict):
            raise ValidationError("ingredients must be objects")
        ingredients.append(
            Ingredient(
                name=str(entry.get("name", "")),
                quantity=str(entry.get("quantity") or ""),
                unit=str(entry.get("unit") or ""),
                optional=bool(entry.get("optional", False)),
            )
        )
    return ingredients


def _checked_abv(value: object) -> float | None:
    if value is None:
        return None
    abv = float(value)
    if not 0 <= abv <= 100:  # noqa: PLR2004
        raise ValidationError("abv must be between 0 and 100")
    return abv
