"""Request models for the HTTP API."""

from datetime import date
from typing import ClassVar, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

InventoryCategory = Literal[
    "spirits",
    "liqueurs",
    "mixers",
    "fruits",
    "herbs",
    "wine",
    "whiskey",
    "beer",
    "sake",
]


class CamelModel(BaseModel):
    """Base model accepting camelCase or snake_case field names."""

    model_config = ConfigDict(
        alias_generator=to_camel, populate_by_name=True, extra="ignore"
    )

    clearable_fields: ClassVar[frozenset[str]] = frozenset()

    def changes(self) -> dict[str, object]:
        """Return the fields sent by the client, dropping nulls that cannot clear."""
        return {
            key: value
            for key, value in self.model_dump(exclude_unset=True).items()
            if value is not None or key in self.clearable_fields
        }


class InventoryItemCreate(CamelModel):
    """Payload for creating an inventory item."""

    name: str = Field(min_length=1)
    category: InventoryCategory
    quantity: float = Field(default=0, ge=0)
    unit: str = "ml"
    expiration_date: date | None = None
    purchase_date: date | None = None
    brand: str | None = None
    notes: str | None = None


class InventoryItemUpdate(CamelModel):
    """Partial update for an inventory item."""

    clearable_fields: ClassVar[frozenset[str]] = frozenset(
        {"expiration_date", "brand", "notes"}
    )

    name: str | None = Field(default=None, min_length=1)
    category: InventoryCategory | None = None
    quantity: float | None = Field(default=None, ge=0)
    unit: str | None = None
    expiration_date: date | None = None
    brand: str | None = None
    notes: str | None = None


class IngredientIn(CamelModel):
    """Ingredient line inside a recipe payload."""

    name: str = Field(min_length=1)
    quantity: str = ""
    unit: str = ""
    optional: bool = False

    @field_validator("quantity", mode="before")
    @classmethod
    def _quantity_text(cls, v: object) -> str:
        if v is None:
            return ""
        if isinstance(v, int | float) and not isinstance(v, bool):
            return f"{v:g}"
        return str(v)


class RecipeCreate(CamelModel):
    """Payload for creating a recipe."""

    name: str = Field(min_length=1)
    description: str = ""
    category: str = "cocktail"
    glass_type: str = ""
    difficulty: str | None = None
    preparation_time: float | None = Field(default=None, ge=0)
    abv: float | None = Field(default=None, ge=0, le=100)
    ingredients: list[IngredientIn] = Field(min_length=1)
    instructions: list[str] = Field(default_factory=list)
    garnish: str = ""
    moods: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    image_url: str | None = None
    temperature: str | None = None


class RecipeUpdate(CamelModel):
    """Partial update for a recipe."""

    clearable_fields: ClassVar[frozenset[str]] = frozenset(
        {"difficulty", "preparation_time", "abv", "image_url", "temperature"}
    )

    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    category: str | None = None
    glass_type: str | None = None
    difficulty: str | None = None
    preparation_time: float | None = Field(default=None, ge=0)
    abv: float | None = Field(default=None, ge=0, le=100)
    ingredients: list[IngredientIn] | None = Field(default=None, min_length=1)
    instructions: list[str] | None = None
    garnish: str | None = None
    moods: list[str] | None = None
    tags: list[str] | None = None
    image_url: str | None = None
    temperature: str | None = None


class RecommendationRequest(CamelModel):
    """Body of a recommendation request."""

    moods: list[str] | None = None
    show_all: bool = False
    limit: int | None = Field(default=None, ge=1)
