"""Supabase repository for forum posts."""

from dataclasses import dataclass
from datetime import datetime
from uuid import UUID

from supabase import Client

from dishcovery.domain.forum import ForumPost
from dishcovery.services.forum import ForumRepository


@dataclass
class SupabaseForumRepository(ForumRepository):
    """Supabase implementation for the ``forum`` table."""

    client: Client

    def list_posts(self, limit: int) -> list[ForumPost]:
        """Return the newest posts first."""
        response = (
            self.client.table("forum")
            .select("*")
            .order("created_at", desc=True)
            .limit(limit)
            .execute()
        )
        return [_parse_post(row) for row in response.data or []]

    def create_post(self, user_id: UUID, content: str) -> ForumPost:
        """Insert a post row and return it."""
        response = (
            self.client.table("forum")
            .insert({"user_id": str(user_id), "content": content})
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create forum post")
        return _parse_post(response.data[0])


def _parse_post(row: dict[str, object]) -> ForumPost:
    created_raw = row.get("created_at")
    return ForumPost(
        id=UUID(str(row["id"])),
        user_id=UUID(str(row["user_id"])),
        content=str(row.get("content") or ""),
        created_at=(
            datetime.fromisoformat(created_raw)
            if isinstance(created_raw, str) and created_raw
            else None
        ),
    )
