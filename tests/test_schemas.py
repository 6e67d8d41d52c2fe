"""Tests for request models."""

import pytest
from pydantic import ValidationError

from home_bar.api.schemas import (
    IngredientIn,
    RecipeCreate,
    InventoryItemUpdate,
    RecipeUpdate,
    RecommendationRequest,
)


def test_update_changes_keep_only_sent_fields() -> None:
    update = InventoryItemUpdate.model_validate({"quantity": 0, "brand": None})

    assert update.changes() == {"quantity": 0, "brand": None}


def test_update_changes_drop_nulls_for_required_fields() -> None:
    update = RecipeUpdate.model_validate({"name": None, "abv": None})

    assert update.changes() == {"abv": None}


def test_ingredient_quantity_is_text() -> None:
    assert IngredientIn(name="Gin", quantity=1.5).quantity == "1.5"
    assert IngredientIn(name="Gin", quantity=2).quantity == "2"
    assert IngredientIn(name="Mint", quantity="a handful").quantity == "a handful"


def test_recommendation_request_accepts_camel_case() -> None:
    request = RecommendationRequest.model_validate(
        {"moods": ["sweet"], "showAll": True, "preferences": {"spirit": "gin"}}
    )

    assert request.show_all is True
    assert request.limit is None
    assert "preferences" not in request.model_dump()


def test_recommendation_request_rejects_zero_limit() -> None:
    with pytest.raises(ValidationError):
        RecommendationRequest.model_validate({"moods": ["sweet"], "limit": 0})


def test_recipe_create_requires_an_ingredient() -> None:
    with pytest.raises(ValidationError):
        RecipeCreate.model_validate({"name": "Air", "ingredients": []})

    recipe = RecipeCreate.model_validate(
        {"name": "Gin Neat", "ingredients": [{"name": "Gin"}]}
    )
    assert recipe.ingredients[0].name == "Gin"
