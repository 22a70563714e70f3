"""Domain models for the community forum."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class ForumPost:
    """A single append-only forum post."""

    id: UUID
    user_id: UUID
    content: str
    created_at: datetime | None
