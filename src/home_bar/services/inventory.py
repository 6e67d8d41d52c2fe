"""Services for managing bar inventory."""

import logging
from dataclasses import dataclass
from datetime import UTC, date, datetime, timedelta
from typing import Protocol
from uuid import uuid4

from home_bar.domain.errors import NotFoundError, ValidationError
from home_bar.domain.inventory import InventoryItem

logger = logging.getLogger(__name__)

UPDATABLE_FIELDS = (
    "name",
    "category",
    "quantity",
    "unit",
    "expiration_date",
    "brand",
    "notes",
)


class InventoryRepository(Protocol):
    """Persistence interface for inventory items."""

    def list_items(self) -> list[InventoryItem]:
        """Return every inventory item."""

    def get_item(self, item_id: str) -> InventoryItem | None:
        """Return an inventory item by id, if present."""

    def put_item(self, item: InventoryItem) -> InventoryItem:
        """Insert or replace an inventory item and return it."""

    def update_item(
        self, item_id: str, changes: dict[str, object]
    ) -> InventoryItem | None:
        """Apply field changes and return the updated item, if present."""

    def delete_item(self, item_id: str) -> None:
        """Delete an inventory item."""


@dataclass
class InventoryService:
    """Application service for inventory operations."""

    repository: InventoryRepository

    def list_items(self) -> list[InventoryItem]:
        """Return every inventory item."""
        return self.repository.list_items()

    def get_item(self, item_id: str) -> InventoryItem:
        """Return an inventory item or raise NotFoundError."""
        item = self.repository.get_item(item_id)
        if item is None:
            raise NotFoundError("Inventory item", item_id)
        return item

    def create_item(self, payload: dict[str, object]) -> InventoryItem:
        """Create an inventory item from validated fields."""
        now = datetime.now(tz=UTC)
        quantity = float(payload.get("quantity") or 0)
        if quantity < 0:
            raise ValidationError("quantity must not be negative")
        item = InventoryItem(
            item_id=str(uuid4()),
            name=str(payload["name"]),
            category=str(payload["category"]),
            quantity=quantity,
            unit=str(payload.get("unit") or "ml"),
            purchase_date=payload.get("purchase_date") or now.date(),
            created_at=now,
            updated_at=now,
            expiration_date=payload.get("expiration_date"),
            brand=payload.get("brand") or None,
            notes=payload.get("notes") or None,
        )
        created = self.repository.put_item(item)
        logger.info("Created inventory item", extra={"item_id": created.item_id})
        return created

    def update_item(self, item_id: str, payload: dict[str, object]) -> InventoryItem:
        """Apply a partial update to an inventory item."""
        changes = {
            key: value for key, value in payload.items() if key in UPDATABLE_FIELDS
        }
        if not changes:
            raise ValidationError("No valid fields to update")
        quantity = changes.get("quantity")
        if quantity is not None and float(quantity) < 0:
            raise ValidationError("quantity must not be negative")
        changes["updated_at"] = datetime.now(tz=UTC)
        updated = self.repository.update_item(item_id, changes)
        if updated is None:
            raise NotFoundError("Inventory item", item_id)
        return updated

    def delete_item(self, item_id: str) -> None:
        """Delete an inventory item."""
        self.get_item(item_id)
        self.repository.delete_item(item_id)
        logger.info("Deleted inventory item", extra={"item_id": item_id})

    def list_expiring(
        self, days_ahead: int = 7, today: date | None = None
    ) -> list[InventoryItem]:
        """Return items whose expiration date falls within the next days."""
        cutoff = (today or date.today()) + timedelta(days=days_ahead)
        return [
            item
            for item in self.repository.list_items()
            if item.expiration_date is not None and item.expiration_date <= cutoff
        ]
