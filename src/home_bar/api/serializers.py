"""JSON serialization of domain models for API responses."""

from home_bar.domain.inventory import InventoryItem
from home_bar.domain.recipes import Recipe
from home_bar.domain.recommendations import RecommendationResult, ScoredRecipe


def serialize_item(item: InventoryItem) -> dict[str, object]:
    """Serialize an inventory item with camelCase keys."""
    return {
        "itemId": item.item_id,
        "name": item.name,
        "category": item.category,
        "quantity": item.quantity,
        "unit": item.unit,
        "expirationDate": item.expiration_date.isoformat()
        if item.expiration_date
        else None,
        "brand": item.brand,
        "notes": item.notes,
        "purchaseDate": item.purchase_date.isoformat(),
        "createdAt": item.created_at.isoformat(),
        "updatedAt": item.updated_at.isoformat(),
    }


def serialize_recipe(recipe: Recipe) -> dict[str, object]:
    """Serialize a recipe with camelCase keys."""
    return {
        "recipeId": recipe.recipe_id,
        "name": recipe.name,
        "description": recipe.description,
        "category": recipe.category,
        "glassType": recipe.glass_type,
        "difficulty": recipe.difficulty,
        "preparationTime": recipe.preparation_time,
        "abv": recipe.abv,
        "ingredients": [
            {
                "name": ingredient.name,
                "quantity": ingredient.quantity,
                "unit": ingredient.unit,
                "optional": ingredient.optional,
            }
            for ingredient in recipe.ingredients
        ],
        "instructions": recipe.instructions,
        "garnish": recipe.garnish,
        "moods": recipe.moods,
        "tags": recipe.tags,
        "imageUrl": recipe.image_url,
        "temperature": recipe.temperature,
        "createdAt": recipe.created_at.isoformat(),
        "updatedAt": recipe.updated_at.isoformat(),
    }


def serialize_scored(entry: ScoredRecipe) -> dict[str, object]:
    """Serialize a recipe merged with its match details."""
    return {
        **serialize_recipe(entry.recipe),
        "matchScore": entry.match.score,
        "availableIngredients": entry.match.available_ingredients,
        "missingIngredients": entry.match.missing_ingredients,
        "matchPercentage": entry.match.match_percentage,
        "canMake": entry.match.can_make,
    }


def serialize_result(result: RecommendationResult) -> dict[str, object]:
    """Serialize a recommendation result, omitting fields that do not apply."""
    body: dict[str, object] = {"selectedMoods": result.selected_moods}
    if result.is_lazy_mode:
        body["recommendations"] = [serialize_item(item) for item in result.ready_to_drink]
        body["organizedByType"] = {
            bucket: [serialize_item(item) for item in items]
            for bucket, items in (result.organized_by_type or {}).items()
        }
        body["totalItems"] = len(result.ready_to_drink)
        body["isLazyMode"] = True
        body["isInventoryMode"] = True
    else:
        body["recommendations"] = [
            serialize_scored(entry) for entry in result.recommendations
        ]
    if result.is_surprise_mode:
        body["isSurpriseMode"] = True
    if result.message is not None:
        body["message"] = result.message
    if result.total_recipes is not None:
        body["totalRecipes"] = result.total_recipes
    if result.matched_recipes is not None:
        body["matchedRecipes"] = result.matched_recipes
    return body
