"""Conversion between storage rows and domain models."""

from datetime import UTC, date, datetime

from home_bar.domain.inventory import InventoryItem
from home_bar.domain.recipes import Ingredient, Recipe


def parse_date(value: object) -> date | None:
    """Parse an ISO date or datetime string into a date."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str) and value:
        return date.fromisoformat(value[:10])
    return None


def parse_datetime(value: object) -> datetime:
    """Parse an ISO timestamp, falling back to now."""
    if isinstance(value, datetime):
        return value
    if isinstance(value, str) and value:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    return datetime.now(tz=UTC)


def _float_or_none(value: object) -> float | None:
    if value is None or value == "":
        return None
    return float(value)


def parse_inventory_row(row: dict[str, object]) -> InventoryItem:
    """Parse a snake_case inventory row into a domain model."""
    created_at = parse_datetime(row.get("created_at"))
    return InventoryItem(
        item_id=str(row["item_id"]),
        name=str(row.get("name", "")),
        category=str(row.get("category", "")),
        quantity=float(row.get("quantity") or 0),
        unit=str(row.get("unit") or "ml"),
        purchase_date=parse_date(row.get("purchase_date")) or created_at.date(),
        created_at=created_at,
        updated_at=parse_datetime(row.get("updated_at") or row.get("created_at")),
        expiration_date=parse_date(row.get("expiration_date")),
        brand=row.get("brand") or None,
        notes=row.get("notes") or None,
    )


def parse_ingredient(raw: dict[str, object]) -> Ingredient:
    """Parse an embedded ingredient object."""
    quantity = raw.get("quantity")
    return Ingredient(
        name=str(raw.get("name", "")),
        quantity="" if quantity is None else str(quantity),
        unit=str(raw.get("unit") or ""),
        optional=bool(raw.get("optional", False)),
    )


def parse_recipe_row(row: dict[str, object]) -> Recipe:
    """Parse a snake_case recipe row into a domain model."""
    created_at = parse_datetime(row.get("created_at"))
    return Recipe(
        recipe_id=str(row["recipe_id"]),
        name=str(row.get("name", "")),
        created_at=created_at,
        updated_at=parse_datetime(row.get("updated_at") or row.get("created_at")),
        description=str(row.get("description") or ""),
        category=str(row.get("category") or "cocktail"),
        glass_type=str(row.get("glass_type") or ""),
        difficulty=row.get("difficulty"),
        preparation_time=_float_or_none(row.get("preparation_time")),
        abv=_float_or_none(row.get("abv")),
        ingredients=[parse_ingredient(raw) for raw in row.get("ingredients") or []],
        instructions=[str(step) for step in row.get("instructions") or []],
        garnish=str(row.get("garnish") or ""),
        moods=[str(mood) for mood in row.get("moods") or []],
        tags=[str(tag) for tag in row.get("tags") or []],
        image_url=row.get("image_url") or None,
        temperature=row.get("temperature") or None,
    )


def inventory_to_row(item: InventoryItem) -> dict[str, object]:
    """Serialize an inventory item into a snake_case row."""
    return {
        "item_id": item.item_id,
        "name": item.name,
        "category": item.category,
        "quantity": item.quantity,
        "unit": item.unit,
        "purchase_date": item.purchase_date.isoformat(),
        "expiration_date": item.expiration_date.isoformat()
        if item.expiration_date
        else None,
        "brand": item.brand,
        "notes": item.notes,
        "created_at": item.created_at.isoformat(),
        "updated_at": item.updated_at.isoformat(),
    }


def ingredient_to_dict(ingredient: Ingredient) -> dict[str, object]:
    """Serialize an embedded ingredient."""
    return {
        "name": ingredient.name,
        "quantity": ingredient.quantity,
        "unit": ingredient.unit,
        "optional": ingredient.optional,
    }


def recipe_to_row(recipe: Recipe) -> dict[str, object]:
    """Serialize a recipe into a snake_case row."""
    return {
        "recipe_id": recipe.recipe_id,
        "name": recipe.name,
        "description": recipe.description,
        "category": recipe.category,
        "glass_type": recipe.glass_type,
        "difficulty": recipe.difficulty,
        "preparation_time": recipe.preparation_time,
        "abv": recipe.abv,
        "ingredients": [ingredient_to_dict(item) for item in recipe.ingredients],
        "instructions": recipe.instructions,
        "garnish": recipe.garnish,
        "moods": recipe.moods,
        "tags": recipe.tags,
        "image_url": recipe.image_url,
        "temperature": recipe.temperature,
        "created_at": recipe.created_at.isoformat(),
        "updated_at": recipe.updated_at.isoformat(),
    }


def changes_to_row(changes: dict[str, object]) -> dict[str, object]:
    """Serialize partial field changes for a storage update."""
    row: dict[str, object] = {}
    for key, value in changes.items():
        if key == "ingredients":
            row[key] = [ingredient_to_dict(item) for item in value]
        elif isinstance(value, date | datetime):
            row[key] = value.isoformat()
        else:
            row[key] = value
    return row
