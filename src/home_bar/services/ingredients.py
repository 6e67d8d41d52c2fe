"""Ingredient name normalization and inventory availability checks."""

import re
from collections.abc import Iterable
from datetime import date

from home_bar.domain.inventory import InventoryItem

BASE_SPIRITS = (
    "gin",
    "vodka",
    "rum",
    "tequila",
    "whiskey",
    "bourbon",
    "scotch",
    "brandy",
    "cognac",
)

_WHITESPACE = re.compile(r"\s+")
_BASE_SPIRIT_TAIL = re.compile(r"\b(" + "|".join(BASE_SPIRITS) + r")\b.*")
_FILLER_WORDS = re.compile(r"\b(juice|syrup)\b")
_FRESH = re.compile(r"\bfresh\s+")


def _collapse(value: str) -> str:
    return _WHITESPACE.sub(" ", value).strip()


def normalize_ingredient_name(name: str) -> str:
    """Canonicalize an ingredient name for loose matching.

    "Tanqueray Gin, London Dry" becomes "tanqueray gin", "Fresh Lime Juice"
    becomes "lime" and "Simple Syrup" becomes "simple". Every occurrence of
    the whole words "juice" and "syrup" is removed so the result is stable
    under repeated normalization.
    """
    value = _collapse(name.lower())
    value = _BASE_SPIRIT_TAIL.sub(r"\1", value, count=1)
    value = _collapse(_FILLER_WORDS.sub("", value))
    return _collapse(_FRESH.sub("", value))


def names_match(first: str, second: str) -> bool:
    """Return True when two normalized names are equal or nest in either order."""
    if not first or not second:
        return False
    return first == second or first in second or second in first


def is_available(
    inventory: Iterable[InventoryItem],
    required_name: str,
    today: date | None = None,
) -> bool:
    """Return True when any stocked, unexpired item satisfies the ingredient.

    Checks never consume stock: one bottle satisfies every recipe asking for it.
    """
    resolved_today = today or date.today()
    required = normalize_ingredient_name(required_name)
    for item in inventory:
        if not names_match(normalize_ingredient_name(item.name), required):
            continue
        if item.is_in_stock(resolved_today):
            return True
    return False
