"""Seed the Supabase inventory and recipe tables with the bundled sample data.

Usage:
    HOME_BAR_SUPABASE_URL=... HOME_BAR_SUPABASE_SERVICE_KEY=... \
        python scripts/seed_database.py
"""

from __future__ import annotations

import logging
import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from home_bar.adapters.sample_data import load_sample_data  # noqa: E402
from home_bar.app_logging import configure_logging  # noqa: E402
from home_bar.config import Settings  # noqa: E402
from home_bar.containers import build_repositories  # noqa: E402

logger = logging.getLogger("home_bar.scripts.seed_database")


def main() -> int:
    """Upsert every sample item and recipe, returning the failure count."""
    configure_logging()
    settings = Settings(storage="supabase")
    inventory_repository, recipe_repository = build_repositories(settings)
    inventory, recipes = load_sample_data()

    failures = 0
    for recipe in recipes:
        try:
            recipe_repository.put_recipe(recipe)
        except Exception:
            failures += 1
            logger.exception("Failed to add recipe", extra={"recipe": recipe.name})
        else:
            logger.info("Added recipe %s", recipe.name)
    for item in inventory:
        try:
            inventory_repository.put_item(item)
        except Exception:
            failures += 1
            logger.exception("Failed to add inventory item", extra={"item": item.name})
        else:
            logger.info("Added inventory item %s", item.name)

    logger.info(
        "Seeded %d recipes and %d items with %d failures",
        len(recipes),
        len(inventory),
        failures,
    )
    return failures


if __name__ == "__main__":
    sys.exit(1 if main() else 0)
