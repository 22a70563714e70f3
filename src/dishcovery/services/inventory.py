"""Inventory management for a user's food items."""

from dataclasses import dataclass
from datetime import date
from typing import Protocol
from uuid import UUID

from dishcovery.domain.expiry import ExpiryStatus, parse_expiry_date
from dishcovery.domain.items import InventoryItem
from dishcovery.errors import NotFoundError, ValidationFailedError
from dishcovery.services.expiry import (
    InventoryFilter,
    filter_items,
    sort_by_expiry,
    today_utc,
)


class InventoryRepository(Protocol):
    """Persistence interface for inventory items, always scoped to a user."""

    def list_items(self, user_id: UUID) -> list[InventoryItem]:
        """Return every item owned by the user."""

    def create_item(self, user_id: UUID, payload: dict[str, object]) -> InventoryItem:
        """Create an item and return it."""

    def update_item(
        self, user_id: UUID, item_id: UUID, payload: dict[str, object]
    ) -> InventoryItem | None:
        """Update an owned item, returning None when nothing matched."""

    def delete_item(self, user_id: UUID, item_id: UUID) -> bool:
        """Delete an owned item, returning False when nothing matched."""


@dataclass
class InventoryService:
    """Application service for the inventory view and add-item flow."""

    repository: InventoryRepository

    def list_items(
        self,
        user_id: UUID,
        inventory_filter: InventoryFilter = InventoryFilter.ALL,
        today: date | None = None,
    ) -> list[tuple[InventoryItem, ExpiryStatus]]:
        """Return the user's items sorted by expiry and annotated with status."""
        items = sort_by_expiry(self.repository.list_items(user_id))
        return filter_items(items, inventory_filter, today or today_utc())

    def add_item(
        self,
        user_id: UUID,
        name: str | None,
        expiry_date: str | None,
        about: str | None = None,
    ) -> InventoryItem:
        """Validate and store a new item."""
        cleaned_name = (name or "").strip()
        if not cleaned_name or not expiry_date:
            raise ValidationFailedError("Item name and expiry date are required")
        parsed = _require_date(expiry_date)
        return self.repository.create_item(
            user_id,
            {
                "name": cleaned_name,
                "expiry_date": parsed.isoformat(),
                "about": (about or "").strip() or None,
            },
        )

    def update_item(
        self,
        user_id: UUID,
        item_id: UUID,
        *,
        name: str | None = None,
        expiry_date: str | None = None,
        about: str | None = None,
    ) -> InventoryItem:
        """Apply an inline edit; only provided fields change."""
        payload: dict[str, object] = {}
        if name is not None:
            cleaned_name = name.strip()
            if not cleaned_name:
                raise ValidationFailedError("Item name cannot be empty")
            payload["name"] = cleaned_name
        if expiry_date is not None:
            payload["expiry_date"] = _require_date(expiry_date).isoformat()
        if about is not None:
            payload["about"] = about.strip() or None
        if not payload:
            raise ValidationFailedError("Nothing to update")
        updated = self.repository.update_item(user_id, item_id, payload)
        if updated is None:
            raise NotFoundError("Item not found")
        return updated

    def delete_item(self, user_id: UUID, item_id: UUID) -> bool:
        """Delete an item; deleting a missing item is a no-op."""
        return self.repository.delete_item(user_id, item_id)


def _require_date(raw: str) -> date:
    parsed = parse_expiry_date(raw)
    if parsed is None:
        raise ValidationFailedError("Expiry date must be a valid date (YYYY-MM-DD)")
    return parsed
