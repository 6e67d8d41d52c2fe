"""Domain models for the home bar inventory."""

from dataclasses import dataclass
from datetime import date, datetime

INVENTORY_CATEGORIES = (
    "spirits",
    "liqueurs",
    "mixers",
    "fruits",
    "herbs",
    "wine",
    "whiskey",
    "beer",
    "sake",
)

READY_TO_DRINK_CATEGORIES = ("whiskey", "wine", "beer", "sake")


@dataclass(frozen=True)
class InventoryItem:
    """A bottle, mixer or garnish stocked in the bar."""

    item_id: str
    name: str
    category: str
    quantity: float
    unit: str
    purchase_date: date
    created_at: datetime
    updated_at: datetime
    expiration_date: date | None = None
    brand: str | None = None
    notes: str | None = None

    def is_expired(self, today: date) -> bool:
        """Return True when the item has an expiration date before today."""
        return self.expiration_date is not None and self.expiration_date < today

    def is_in_stock(self, today: date) -> bool:
        """Return True when the item has quantity left and has not expired."""
        return self.quantity > 0 and not self.is_expired(today)
