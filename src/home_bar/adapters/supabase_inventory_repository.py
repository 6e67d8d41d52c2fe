"""Supabase implementation for inventory items."""

from dataclasses import dataclass

from supabase import Client

from home_bar.adapters.rows import changes_to_row, inventory_to_row, parse_inventory_row
from home_bar.domain.inventory import InventoryItem
from home_bar.services.inventory import InventoryRepository


@dataclass
class SupabaseInventoryRepository(InventoryRepository):
    """Supabase-backed repository for the inventory table."""

    client: Client
    table_name: str = "home_bar_inventory"

    def list_items(self) -> list[InventoryItem]:
        """Return every inventory item."""
        response = self.client.table(self.table_name).select("*").execute()
        return [parse_inventory_row(row) for row in response.data or []]

    def get_item(self, item_id: str) -> InventoryItem | None:
        """Return an inventory item by id, if present."""
        response = (
            self.client.table(self.table_name)
            .select("*")
            .eq("item_id", item_id)
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return parse_inventory_row(response.data[0])

    def put_item(self, item: InventoryItem) -> InventoryItem:
        """Upsert an inventory item and return it."""
        response = (
            self.client.table(self.table_name).upsert(inventory_to_row(item)).execute()
        )
        if not response.data:
            raise RuntimeError("Failed to store inventory item")
        return parse_inventory_row(response.data[0])

    def update_item(
        self, item_id: str, changes: dict[str, object]
    ) -> InventoryItem | None:
        """Update an inventory item and return it, if present."""
        response = (
            self.client.table(self.table_name)
            .update(changes_to_row(changes))
            .eq("item_id", item_id)
            .execute()
        )
        if not response.data:
            return None
        return parse_inventory_row(response.data[0])

    def delete_item(self, item_id: str) -> None:
        """Delete an inventory item."""
        self.client.table(self.table_name).delete().eq("item_id", item_id).execute()
