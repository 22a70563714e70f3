"""Grouping and filtering of inventory items by expiry."""

from dataclasses import dataclass, field
from datetime import UTC, date, datetime
from enum import StrEnum

from dishcovery.domain.expiry import (
    ExpiryBucket,
    ExpiryStatus,
    classify_expiry,
    parse_expiry_date,
)
from dishcovery.domain.items import InventoryItem


class InventoryFilter(StrEnum):
    """Filters offered by the inventory view."""

    ALL = "all"
    EXPIRED = "expired"
    EXPIRING_SOON = "expiring_soon"
    FRESH = "fresh"


@dataclass
class ExpiryGroups:
    """Inventory items partitioned by expiry bucket."""

    expired: list[InventoryItem] = field(default_factory=list)
    expiring_soon: list[InventoryItem] = field(default_factory=list)
    fresh: list[InventoryItem] = field(default_factory=list)
    invalid: list[InventoryItem] = field(default_factory=list)

    @property
    def usable(self) -> list[InventoryItem]:
        """Items that may go into a recipe, soonest first."""
        return [*self.expiring_soon, *self.fresh]


def today_utc() -> date:
    """Return the current UTC calendar date."""
    return datetime.now(tz=UTC).date()


def sort_by_expiry(items: list[InventoryItem]) -> list[InventoryItem]:
    """Sort items by expiry ascending with unparseable dates last."""
    return sorted(
        items,
        key=lambda item: (
            parse_expiry_date(item.expiry_date) is None,
            parse_expiry_date(item.expiry_date) or date.max,
        ),
    )


def partition_items(items: list[InventoryItem], today: date) -> ExpiryGroups:
    """Split items into expired, expiring soon, fresh and invalid groups."""
    groups = ExpiryGroups()
    for item in sort_by_expiry(items):
        bucket = classify_expiry(item.expiry_date, today).bucket
        if bucket is ExpiryBucket.EXPIRED:
            groups.expired.append(item)
        elif bucket is ExpiryBucket.EXPIRING_SOON:
            groups.expiring_soon.append(item)
        elif bucket is ExpiryBucket.FRESH:
            groups.fresh.append(item)
        else:
            groups.invalid.append(item)
    return groups


def filter_items(
    items: list[InventoryItem], inventory_filter: InventoryFilter, today: date
) -> list[tuple[InventoryItem, ExpiryStatus]]:
    """Return items matching the filter, each paired with its expiry status."""
    annotated = [(item, classify_expiry(item.expiry_date, today)) for item in items]
    if inventory_filter is InventoryFilter.ALL:
        return annotated
    wanted = ExpiryBucket(inventory_filter.value)
    return [(item, status) for item, status in annotated if status.bucket is wanted]
