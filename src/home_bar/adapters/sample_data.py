"""Bundled sample inventory and recipes."""

import json
from pathlib import Path

from pydantic.alias_generators import to_snake

from home_bar.adapters.rows import parse_inventory_row, parse_recipe_row
from home_bar.domain.inventory import InventoryItem
from home_bar.domain.recipes import Recipe

SAMPLE_DATA_PATH = Path(__file__).with_name("sample_bar.json")


def _snake_keys(row: dict[str, object]) -> dict[str, object]:
    return {to_snake(key): value for key, value in row.items()}


def load_sample_data(
    path: Path = SAMPLE_DATA_PATH,
) -> tuple[list[InventoryItem], list[Recipe]]:
    """Load sample inventory and recipes from a camelCase JSON document."""
    payload = json.loads(path.read_text(encoding="utf-8"))
    inventory = [
        parse_inventory_row(_snake_keys(row)) for row in payload.get("inventory", [])
    ]
    recipes = [parse_recipe_row(_snake_keys(row)) for row in payload.get("recipes", [])]
    return inventory, recipes
