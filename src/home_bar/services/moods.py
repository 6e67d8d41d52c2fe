"""Mood rules used to narrow recipe recommendations."""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from home_bar.domain.recipes import Recipe

LAZY = "lazy"
SURPRISE_ME = "surprise-me"
MODE_SWITCHES = frozenset({LAZY, SURPRISE_ME})

SPARKLING_TERMS = (
    "tonic",
    "tonic water",
    "club soda",
    "soda water",
    "sparkling wine",
    "prosecco",
    "champagne",
    "cava",
    "seltzer",
    "ginger beer",
)
WARM_TERMS = ("hot", "warm", "toddy", "irish coffee", "mulled")
HEAVY_CLASSICS = ("old fashioned", "negroni", "manhattan")
LIGHT_TERMS = (
    "light tonic",
    "club soda",
    "soda water",
    "beer",
    "tonic water",
    "seltzer",
)
SWEET_TERMS = (
    "juice",
    "syrup",
    "simple syrup",
    "chocolate",
    "choco",
    "mint liqueur",
    "melon",
    "liqueur",
    "sweet",
    "honey",
    "sugar",
    "agave",
)
SOUR_TERMS = ("lemon", "lime", "grapefruit", "citrus")

LIGHT_MAX_ABV = 18
STRONG_MIN_ABV = 20

MoodPredicate = Callable[[Recipe], bool]


def _contains_any(text: str, terms: Iterable[str]) -> bool:
    lowered = text.lower()
    return any(term in lowered for term in terms)


def _has_ingredient(recipe: Recipe, terms: Iterable[str]) -> bool:
    return any(_contains_any(ingredient.name, terms) for ingredient in recipe.ingredients)


def is_sparkling(recipe: Recipe) -> bool:
    """Recipe is topped with something fizzy."""
    return _has_ingredient(recipe, SPARKLING_TERMS)


def is_warm(recipe: Recipe) -> bool:
    """Recipe is served hot."""
    if _contains_any(recipe.name, WARM_TERMS):
        return True
    if _contains_any(recipe.description, WARM_TERMS):
        return True
    if recipe.temperature and recipe.temperature.lower() == "hot":
        return True
    return any(mood.lower() == "warm" for mood in recipe.moods)


def is_light(recipe: Recipe) -> bool:
    """Recipe is low in alcohol or lengthened with a light mixer."""
    if _contains_any(recipe.name, HEAVY_CLASSICS):
        return False
    if _has_ingredient(recipe, LIGHT_TERMS):
        return True
    # An abv of 0 is how the recipe form stores "unknown".
    if recipe.abv and recipe.abv < LIGHT_MAX_ABV:
        return True
    return recipe.category == "beer"


def is_strong(recipe: Recipe) -> bool:
    """Recipe is above the strong abv threshold."""
    return recipe.abv is not None and recipe.abv > STRONG_MIN_ABV


def is_sweet(recipe: Recipe) -> bool:
    """Recipe uses a juice, syrup, liqueur or other sweetener."""
    return _has_ingredient(recipe, SWEET_TERMS)


def is_sour(recipe: Recipe) -> bool:
    """Recipe is citrus-forward."""
    return _has_ingredient(recipe, SOUR_TERMS)


@dataclass(frozen=True)
class MoodRule:
    """Named recipe filter for one mood."""

    mood: str
    predicate: MoodPredicate
    description: str = ""


@dataclass
class MoodRegistry:
    """Lookup table of mood rules.

    Moods without a rule, including the mode switches, keep every recipe.
    """

    rules: dict[str, MoodRule] = field(default_factory=dict)

    def register(self, rule: MoodRule) -> None:
        """Add or replace the rule for a mood."""
        self.rules[rule.mood.lower()] = rule

    def get(self, mood: str) -> MoodRule | None:
        """Return the rule for a mood, if one is registered."""
        return self.rules.get(mood.lower())

    def matches(self, recipe: Recipe, mood: str) -> bool:
        """Return True when the recipe passes the mood's rule."""
        rule = self.get(mood)
        if rule is None:
            return True
        return rule.predicate(recipe)

    def filter(self, recipes: Iterable[Recipe], mood: str) -> list[Recipe]:
        """Return the recipes that pass the mood's rule."""
        return [recipe for recipe in recipes if self.matches(recipe, mood)]

    def filter_all(self, recipes: Iterable[Recipe], moods: Iterable[str]) -> list[Recipe]:
        """Apply every mood in turn, keeping only recipes that pass all of them."""
        candidates = list(recipes)
        for mood in moods:
            candidates = self.filter(candidates, mood)
            if not candidates:
                break
        return candidates

    @property
    def moods(self) -> list[str]:
        """Registered mood ids."""
        return sorted(self.rules)


def default_mood_registry() -> MoodRegistry:
    """Return the registry with the built-in moods."""
    registry = MoodRegistry()
    registry.register(MoodRule("sparkling", is_sparkling, "Topped with bubbles"))
    registry.register(MoodRule("warm", is_warm, "Served hot"))
    registry.register(MoodRule("light", is_light, "Low alcohol or lengthened"))
    registry.register(MoodRule("strong", is_strong, f"Above {STRONG_MIN_ABV}% abv"))
    registry.register(MoodRule("sweet", is_sweet, "Juice, syrup or liqueur"))
    registry.register(MoodRule("sour", is_sour, "Citrus-forward"))
    return registry
