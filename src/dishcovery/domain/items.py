"""Domain models for the food inventory."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class InventoryItem:
    """A food item owned by a user.

    ``expiry_date`` holds the stored value as-is so malformed dates still load.
    """

    id: UUID
    user_id: UUID
    name: str
    expiry_date: str
    created_at: datetime | None
    about: str | None = None
