"""Supabase-backed inventory repository."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from dishcovery.domain.items import InventoryItem
from dishcovery.services.inventory import InventoryRepository

_COLUMNS = "id, user_id, name, expiry_date, created_at, about"


@dataclass
class SupabaseItemRepository(InventoryRepository):
    """Supabase implementation for the ``items`` table.

    Every query filters on ``user_id`` in addition to row-level policies.
    """

    client: Client

    def list_items(self, user_id: UUID) -> list[InventoryItem]:
        """Return the user's items ordered by expiry date."""
        response = (
            self.client.table("items")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .order("expiry_date")
            .execute()
        )
        return [_parse_item(row) for row in response.data or []]

    def create_item(self, user_id: UUID, payload: dict[str, object]) -> InventoryItem:
        """Insert an item row and return it."""
        response = (
            self.client.table("items")
            .insert({"user_id": str(user_id), **payload})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create inventory item")
        return _parse_item(response.data[0])

    def update_item(
        self, user_id: UUID, item_id: UUID, payload: dict[str, object]
    ) -> InventoryItem | None:
        """Update an owned item and return the new row."""
        response = (
            self.client.table("items")
            .update(payload)
            .eq("id", str(item_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        if not response.data:
            return None
        return _parse_item(response.data[0])

    def delete_item(self, user_id: UUID, item_id: UUID) -> bool:
        """Delete an owned item; True when a row was removed."""
        response = (
            self.client.table("items")
            .delete()
            .eq("id", str(item_id))
            .eq("user_id", str(user_id))
            .execute()
        )
        return bool(response.data)


def _parse_item(row: dict[str, object]) -> InventoryItem:
    """Parse an items row into a domain model."""
    created_raw = row.get("created_at")
    created_at = (
        datetime.fromisoformat(created_raw)
        if isinstance(created_raw, str) and created_raw
        else None
    )
    expiry_raw = row.get("expiry_date")
    return InventoryItem(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        name=str(row.get("name") or ""),
        expiry_date=str(expiry_raw) if expiry_raw is not None else "",
        created_at=created_at,
        about=row.get("about"),
    )
