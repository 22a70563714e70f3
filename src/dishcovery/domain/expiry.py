"""Expiry classification for inventory items."""

from dataclasses import dataclass
from datetime import date, datetime
from enum import StrEnum

EXPIRING_SOON_DAYS = 7


class ExpiryBucket(StrEnum):
    """Freshness buckets used by the inventory view and recipe prompts."""

    EXPIRED = "expired"
    EXPIRING_SOON = "expiring_soon"
    FRESH = "fresh"
    INVALID = "invalid"


@dataclass(frozen=True)
class ExpiryStatus:
    """Bucket and display label for one expiry date."""

    bucket: ExpiryBucket
    label: str
    days_remaining: int | None = None


def parse_expiry_date(value: object) -> date | None:
    """Return the calendar date for an ISO date/datetime value, if valid."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return datetime.fromisoformat(value.strip()).date()
    except ValueError:
        return None


def classify_expiry(expiry: object, today: date) -> ExpiryStatus:
    """Classify an expiry date against ``today``. Never raises."""
    parsed = parse_expiry_date(expiry)
    if parsed is None:
        return ExpiryStatus(bucket=ExpiryBucket.INVALID, label="Invalid date")
    days_remaining = (parsed - today).days
    if days_remaining < 0:
        return ExpiryStatus(
            bucket=ExpiryBucket.EXPIRED,
            label="Expired",
            days_remaining=days_remaining,
        )
    if days_remaining <= EXPIRING_SOON_DAYS:
        return ExpiryStatus(
            bucket=ExpiryBucket.EXPIRING_SOON,
            label=f"Expires in {days_remaining} days",
            days_remaining=days_remaining,
        )
    return ExpiryStatus(
        bucket=ExpiryBucket.FRESH,
        label=parsed.strftime("%b %d, %Y"),
        days_remaining=days_remaining,
    )
