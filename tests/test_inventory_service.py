"""Tests for inventory service."""

from datetime import date, timedelta

import pytest

from home_bar.adapters.memory_repositories import InMemoryInventoryRepository
from home_bar.domain.errors import NotFoundError, ValidationError
from home_bar.services.inventory import InventoryService
from tests.conftest import TODAY, make_item


def test_create_item_applies_defaults() -> None:
    service = InventoryService(InMemoryInventoryRepository())

    item = service.create_item({"name": "Campari", "category": "liqueurs"})

    assert item.quantity == 0
    assert item.unit == "ml"
    assert item.expiration_date is None
    assert item.purchase_date == item.created_at.date()
    assert service.get_item(item.item_id) == item


def test_create_item_rejects_negative_quantity() -> None:
    service = InventoryService(InMemoryInventoryRepository())

    with pytest.raises(ValidationError):
        service.create_item({"name": "Gin", "category": "spirits", "quantity": -1})


def test_update_item_changes_only_allowed_fields() -> None:
    repository = InMemoryInventoryRepository.from_items([make_item("Gin")])
    service = InventoryService(repository)

    updated = service.update_item(
        "gin", {"quantity": 350, "notes": "Half left", "item_id": "hijack"}
    )

    assert updated.item_id == "gin"
    assert updated.quantity == 350
    assert updated.notes == "Half left"
    assert updated.updated_at >= updated.created_at


def test_update_item_requires_fields() -> None:
    repository = InMemoryInventoryRepository.from_items([make_item("Gin")])
    service = InventoryService(repository)

    with pytest.raises(ValidationError):
        service.update_item("gin", {"created_at": "now"})


def test_update_missing_item_raises_not_found() -> None:
    service = InventoryService(InMemoryInventoryRepository())

    with pytest.raises(NotFoundError):
        service.update_item("missing", {"quantity": 1})


def test_delete_item() -> None:
    repository = InMemoryInventoryRepository.from_items([make_item("Gin")])
    service = InventoryService(repository)

    service.delete_item("gin")

    assert repository.items == {}
    with pytest.raises(NotFoundError):
        service.delete_item("gin")


def test_list_expiring_uses_days_ahead() -> None:
    repository = InMemoryInventoryRepository.from_items(
        [
            make_item("Lime Juice", expiration_date=TODAY + timedelta(days=3)),
            make_item("Cream", expiration_date=TODAY + timedelta(days=10)),
            make_item("Old Milk", expiration_date=date(2024, 1, 1)),
            make_item("Gin"),
        ]
    )
    service = InventoryService(repository)

    week = service.list_expiring(7, today=TODAY)
    fortnight = service.list_expiring(14, today=TODAY)

    assert sorted(item.name for item in week) == ["Lime Juice", "Old Milk"]
    assert len(fortnight) == 3
