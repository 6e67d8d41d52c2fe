"""Tests for ingredient normalization and availability."""

from datetime import timedelta

import pytest

from home_bar.services.ingredients import (
    is_available,
    names_match,
    normalize_ingredient_name,
)
from tests.conftest import TODAY, make_item


@pytest.mark.parametrize(
    ("raw", "expected"),
    [
        ("Vodka", "vodka"),
        ("Vodka, premium", "vodka"),
        ("  Tanqueray   Gin  London Dry ", "tanqueray gin"),
        ("Fresh Lime Juice", "lime"),
        ("Cranberry Juice", "cranberry"),
        ("Simple Syrup", "simple"),
        ("Agave Syrup", "agave"),
        ("Fresh Mint", "mint"),
        ("Ginger Beer", "ginger beer"),
        ("Cointreau", "cointreau"),
        ("Bourbon Whiskey", "bourbon"),
    ],
)
def test_normalize_examples(raw: str, expected: str) -> None:
    assert normalize_ingredient_name(raw) == expected


def test_normalize_strips_filler_words_everywhere() -> None:
    assert normalize_ingredient_name("juice of lime juice") == "of lime"
    assert normalize_ingredient_name("Syrup, maple syrup") == ", maple"


def test_normalize_keeps_words_that_only_contain_filler() -> None:
    assert normalize_ingredient_name("Juicer Pulp") == "juicer pulp"
    assert normalize_ingredient_name("Refresh Tonic") == "refresh tonic"


@pytest.mark.parametrize(
    "raw",
    [
        "Fresh Lime Juice",
        "juice juice",
        "Fresh fresh mint",
        "Vodka juice, premium",
        "juice fresh",
        "  GIN   and Tonic ",
        "Honey Syrup",
        "",
    ],
)
def test_normalize_is_idempotent(raw: str) -> None:
    once = normalize_ingredient_name(raw)
    assert normalize_ingredient_name(once) == once


def test_names_match_rejects_empty_names() -> None:
    assert not names_match("", "gin")
    assert not names_match("gin", "")
    assert names_match("gin", "tanqueray gin")
    assert names_match("tanqueray gin", "gin")


def test_brand_qualified_inventory_satisfies_generic_ingredient() -> None:
    inventory = [make_item("Tanqueray Gin")]

    assert is_available(inventory, "Gin", TODAY)


def test_zero_quantity_is_not_available() -> None:
    inventory = [make_item("Vodka", quantity=0)]

    assert not is_available(inventory, "Vodka", TODAY)


def test_availability_is_monotonic_in_quantity() -> None:
    empty = [make_item("Vodka", quantity=0)]
    stocked = [make_item("Vodka", quantity=0.5)]

    assert not is_available(empty, "Vodka", TODAY)
    assert is_available(stocked, "Vodka", TODAY)


def test_expired_items_are_not_available() -> None:
    inventory = [
        make_item("Lime Juice", quantity=3, expiration_date=TODAY - timedelta(days=1))
    ]

    assert not is_available(inventory, "Fresh Lime Juice", TODAY)


def test_item_expiring_today_is_available() -> None:
    inventory = [make_item("Lime Juice", expiration_date=TODAY)]

    assert is_available(inventory, "Lime Juice", TODAY)


def test_items_without_expiration_depend_on_quantity_only() -> None:
    inventory = [make_item("Angostura Bitters", quantity=1)]

    assert is_available(inventory, "Angostura Bitters", TODAY)


def test_any_matching_item_is_enough() -> None:
    inventory = [
        make_item("Old Gin", item_id="a", expiration_date=TODAY - timedelta(days=3)),
        make_item("London Gin", item_id="b", quantity=0),
        make_item("Plymouth Gin", item_id="c"),
    ]

    assert is_available(inventory, "Gin", TODAY)


def test_filler_only_requirement_never_matches() -> None:
    inventory = [make_item("Orange Juice")]

    assert not is_available(inventory, "Juice", TODAY)


def test_availability_does_not_consume_stock() -> None:
    inventory = [make_item("Vodka", quantity=1)]

    assert is_available(inventory, "Vodka", TODAY)
    assert is_available(inventory, "Vodka", TODAY)
    assert inventory[0].quantity == 1
