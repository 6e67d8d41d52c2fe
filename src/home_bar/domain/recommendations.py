"""Domain models produced by the recommendation engine."""

from dataclasses import dataclass, field

from home_bar.domain.inventory import InventoryItem
from home_bar.domain.recipes import Recipe


@dataclass(frozen=True)
class MatchResult:
    """How well the current inventory covers a recipe."""

    score: float
    available_ingredients: list[str]
    missing_ingredients: list[str]
    match_percentage: float
    can_make: bool


@dataclass(frozen=True)
class ScoredRecipe:
    """A recipe paired with its match result."""

    recipe: Recipe
    match: MatchResult


@dataclass
class RecommendationResult:
    """Outcome of a single recommendation request."""

    selected_moods: list[str]
    recommendations: list[ScoredRecipe] = field(default_factory=list)
    ready_to_drink: list[InventoryItem] = field(default_factory=list)
    organized_by_type: dict[str, list[InventoryItem]] | None = None
    message: str | None = None
    is_lazy_mode: bool = False
    is_surprise_mode: bool = False
    total_recipes: int | None = None
    matched_recipes: int | None = None
