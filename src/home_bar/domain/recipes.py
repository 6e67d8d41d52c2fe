"""Domain models for drink recipes."""

from dataclasses import dataclass, field
from datetime import datetime


@dataclass(frozen=True)
class Ingredient:
    """Ingredient line embedded in a recipe."""

    name: str
    quantity: str = ""
    unit: str = ""
    optional: bool = False


@dataclass(frozen=True)
class Recipe:
    """A drink recipe."""

    recipe_id: str
    name: str
    created_at: datetime
    updated_at: datetime
    description: str = ""
    category: str = "cocktail"
    glass_type: str = ""
    difficulty: str | None = "medium"
    preparation_time: float | None = 5
    abv: float | None = None
    ingredients: list[Ingredient] = field(default_factory=list)
    instructions: list[str] = field(default_factory=list)
    garnish: str = ""
    moods: list[str] = field(default_factory=list)
    tags: list[str] = field(default_factory=list)
    image_url: str | None = None
    temperature: str | None = None
