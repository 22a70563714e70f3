"""Community forum service."""

from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from dishcovery.domain.forum import ForumPost
from dishcovery.errors import ValidationFailedError

MAX_POST_LENGTH = 2000


class ForumRepository(Protocol):
    """Persistence interface for forum posts."""

    def list_posts(self, limit: int) -> list[ForumPost]:
        """Return posts, newest first."""

    def create_post(self, user_id: UUID, content: str) -> ForumPost:
        """Append a post and return it."""


@dataclass
class ForumService:
    """Append-only forum."""

    repository: ForumRepository

    def list_posts(self, limit: int = 50) -> list[ForumPost]:
        return self.repository.list_posts(limit)

    def create_post(self, user_id: UUID, content: str | None) -> ForumPost:
        """Trim and store a post; blank posts are rejected."""
        cleaned = (content or "").strip()
        if not cleaned:
            raise ValidationFailedError("Post content cannot be empty")
        if len(cleaned) > MAX_POST_LENGTH:
            raise ValidationFailedError(
                f"Posts are limited to {MAX_POST_LENGTH} characters"
            )
        return self.repository.create_post(user_id, cleaned)
