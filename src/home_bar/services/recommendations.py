"""Mood-based drink recommendations."""

import logging
import random
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from datetime import date
from typing import Protocol

from home_bar.domain.inventory import READY_TO_DRINK_CATEGORIES, InventoryItem
from home_bar.domain.recipes import Recipe
from home_bar.domain.recommendations import (
    MatchResult,
    RecommendationResult,
    ScoredRecipe,
)
from home_bar.services.inventory import InventoryRepository
from home_bar.services.moods import (
    LAZY,
    SURPRISE_ME,
    MoodRegistry,
    default_mood_registry,
)
from home_bar.services.recipes import RecipeRepository
from home_bar.services.scoring import score_recipe

logger = logging.getLogger(__name__)

DEFAULT_LIMIT = 3

READY_TO_DRINK_BUCKETS = {
    "whiskey": "whiskeys",
    "sake": "sake",
    "wine": "wines",
    "beer": "beers",
}

Scorer = Callable[[Recipe, Sequence[InventoryItem], Sequence[str], date], MatchResult]


class RandomSource(Protocol):
    """Source of uniform floats in [0, 1)."""

    def next(self) -> float:
        """Return the next float in [0, 1)."""


@dataclass
class SeededRandomSource(RandomSource):
    """Random source backed by ``random.Random``."""

    seed: int | None = None
    _random: random.Random = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._random = random.Random(self.seed)  # noqa: S311

    def next(self) -> float:
        """Return the next float in [0, 1)."""
        return self._random.random()


def normalize_moods(selected_moods: Sequence[str]) -> list[str]:
    """Lower-case and trim mood ids."""
    if isinstance(selected_moods, str) or not isinstance(selected_moods, Sequence):
        raise TypeError("selected_moods must be a sequence of mood ids")
    return [str(mood).strip().lower() for mood in selected_moods]


def ready_to_drink(
    inventory: Sequence[InventoryItem], today: date
) -> list[InventoryItem]:
    """Return stocked, unexpired items that need no mixing."""
    return [
        item
        for item in inventory
        if item.category in READY_TO_DRINK_CATEGORIES and item.is_in_stock(today)
    ]


def organize_by_type(items: Sequence[InventoryItem]) -> dict[str, list[InventoryItem]]:
    """Group ready-to-drink items into one bucket per category."""
    buckets: dict[str, list[InventoryItem]] = {
        bucket: [] for bucket in READY_TO_DRINK_BUCKETS.values()
    }
    for item in items:
        buckets[READY_TO_DRINK_BUCKETS[item.category]].append(item)
    return buckets


def rank(scored: Sequence[ScoredRecipe]) -> list[ScoredRecipe]:
    """Order by score, best first, then by recipe name."""
    return sorted(scored, key=lambda entry: (-entry.match.score, entry.recipe.name))


def _moods_label(moods: Sequence[str]) -> str:
    return ", ".join(moods)


@dataclass
class RecommendationService:
    """Select recipes, or ready-to-drink bottles, for the requested moods."""

    inventory_repository: InventoryRepository
    recipe_repository: RecipeRepository
    moods: MoodRegistry = field(default_factory=default_mood_registry)
    random_source: RandomSource = field(default_factory=SeededRandomSource)
    default_limit: int = DEFAULT_LIMIT
    scorer: Scorer = score_recipe

    def get_recommendations(
        self,
        selected_moods: Sequence[str],
        show_all: bool = False,
        limit: int | None = None,
        today: date | None = None,
    ) -> RecommendationResult:
        """Fetch current inventory and recipes and recommend from them.

        Recipes are not loaded at all for the lazy mood.
        """
        moods = normalize_moods(selected_moods)
        inventory = self.inventory_repository.list_items()
        if moods and moods[0] == LAZY:
            return self.recommend(moods, inventory, [], show_all, limit, today)
        recipes = self.recipe_repository.list_recipes()
        return self.recommend(moods, inventory, recipes, show_all, limit, today)

    def recommend(  # noqa: PLR0913
        self,
        selected_moods: Sequence[str],
        inventory: Sequence[InventoryItem],
        recipes: Sequence[Recipe],
        show_all: bool = False,
        limit: int | None = None,
        today: date | None = None,
    ) -> RecommendationResult:
        """Recommend from already fetched inventory and recipe snapshots."""
        if not isinstance(inventory, Sequence) or not isinstance(recipes, Sequence):
            raise TypeError("inventory and recipes must be sequences")
        resolved_today = today or date.today()
        moods = normalize_moods(selected_moods)
        primary = moods[0] if moods else None

        if primary == LAZY:
            return self._lazy(moods, inventory, resolved_today)

        if not recipes:
            return RecommendationResult(
                selected_moods=moods,
                message="No recipes found. Please add some recipes first.",
                total_recipes=0,
            )

        candidates = self.moods.filter_all(recipes, moods)
        if not candidates:
            logger.info("No recipes matched moods", extra={"moods": moods})
            return RecommendationResult(
                selected_moods=moods,
                message=(
                    "No drinks found matching your criteria: "
                    f"{_moods_label(moods)}. "
                    "Try different moods or update your inventory."
                ),
                total_recipes=len(recipes),
            )

        scored = [
            ScoredRecipe(
                recipe=recipe,
                match=self.scorer(recipe, inventory, moods, resolved_today),
            )
            for recipe in candidates
        ]
        makeable = [entry for entry in scored if entry.match.can_make]

        if primary == SURPRISE_ME:
            pool = makeable or scored
            return RecommendationResult(
                selected_moods=moods,
                recommendations=[self._pick(pool)],
                is_surprise_mode=True,
                total_recipes=len(recipes),
                matched_recipes=len(makeable),
            )

        if not makeable:
            return RecommendationResult(
                selected_moods=moods,
                message=(
                    "No drinks found that you can make with your current "
                    f"inventory for: {_moods_label(moods)}. "
                    "Try different moods or update your inventory."
                ),
                total_recipes=len(recipes),
                matched_recipes=0,
            )

        ranked = rank(makeable)
        if not show_all:
            resolved_limit = self.default_limit if limit is None else limit
            if resolved_limit < 1:
                raise ValueError("limit must be at least 1")
            ranked = ranked[:resolved_limit]
        logger.debug(
            "Selected recommendations",
            extra={"moods": moods, "count": len(ranked), "makeable": len(makeable)},
        )
        return RecommendationResult(
            selected_moods=moods,
            recommendations=ranked,
            total_recipes=len(recipes),
            matched_recipes=len(makeable),
        )

    def _lazy(
        self, moods: list[str], inventory: Sequence[InventoryItem], today: date
    ) -> RecommendationResult:
        items = ready_to_drink(inventory, today)
        result = RecommendationResult(
            selected_moods=moods,
            ready_to_drink=items,
            organized_by_type=organize_by_type(items),
            is_lazy_mode=True,
        )
        if not items:
            result.message = (
                "Nothing ready to drink right now. "
                "Stock up on whiskey, wine, beer or sake."
            )
        return result

    def _pick(self, pool: Sequence[ScoredRecipe]) -> ScoredRecipe:
        index = int(self.random_source.next() * len(pool))
        return pool[min(index, len(pool) - 1)]
