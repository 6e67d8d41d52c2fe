"""Match scoring of a recipe against the current inventory."""

from collections.abc import Sequence
from datetime import date

from home_bar.domain.inventory import InventoryItem
from home_bar.domain.recipes import Recipe
from home_bar.domain.recommendations import MatchResult
from home_bar.services.ingredients import is_available

AVAILABLE_POINTS = 10
OPTIONAL_BONUS = 5
MISSING_PENALTY = 20
MOOD_POINTS = 15
DIFFICULTY_POINTS = {"easy": 8, "medium": 5}
QUICK_PREP_MINUTES = 3
SHORT_PREP_MINUTES = 5
QUICK_PREP_POINTS = 10
SHORT_PREP_POINTS = 5


def score_recipe(
    recipe: Recipe,
    inventory: Sequence[InventoryItem],
    selected_moods: Sequence[str] = (),
    today: date | None = None,
) -> MatchResult:
    """Score how makeable and fitting a recipe is.

    Missing optional ingredients are ignored and never block ``can_make``.
    """
    resolved_today = today or date.today()
    score = 0.0
    available: list[str] = []
    missing: list[str] = []

    for ingredient in recipe.ingredients:
        if is_available(inventory, ingredient.name, resolved_today):
            available.append(ingredient.name)
            score += AVAILABLE_POINTS
            if ingredient.optional:
                score += OPTIONAL_BONUS
        elif not ingredient.optional:
            missing.append(ingredient.name)
            score -= MISSING_PENALTY

    score += _fit_bonus(recipe, selected_moods)

    total = len(recipe.ingredients)
    match_percentage = len(available) / total * 100 if total else 0.0
    return MatchResult(
        score=score,
        available_ingredients=available,
        missing_ingredients=missing,
        match_percentage=match_percentage,
        can_make=not missing,
    )


def _fit_bonus(recipe: Recipe, selected_moods: Sequence[str]) -> float:
    wanted = {mood.lower() for mood in selected_moods}
    bonus = MOOD_POINTS * sum(1 for mood in recipe.moods if mood.lower() in wanted)
    if recipe.difficulty:
        bonus += DIFFICULTY_POINTS.get(recipe.difficulty.lower(), 0)
    if recipe.preparation_time is not None:
        if recipe.preparation_time <= QUICK_PREP_MINUTES:
            bonus += QUICK_PREP_POINTS
        elif recipe.preparation_time <= SHORT_PREP_MINUTES:
            bonus += SHORT_PREP_POINTS
    return bonus
