"""Supabase repository for user profiles."""

from dataclasses import dataclass
from uuid import UUID

from supabase import Client

from dishcovery.domain.profiles import UserProfile
from dishcovery.domain.ranks import ChefRank
from dishcovery.services.profiles import ProfileRepository

_COLUMNS = "user_id, about, form_submitted, successful_cooks, rank, email"


@dataclass
class SupabaseProfileRepository(ProfileRepository):
    """Supabase implementation for the ``user_profiles`` table."""

    client: Client

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the stored profile for a user."""
        response = (
            self.client.table("user_profiles")
            .select(_COLUMNS)
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        return _parse_profile(response.data[0])

    def create_profile(self, user_id: UUID, email: str | None) -> UserProfile:
        """Insert the default profile row for a new user."""
        response = (
            self.client.table("user_profiles")
            .insert(
                {
                    "user_id": str(user_id),
                    "email": email,
                    "form_submitted": False,
                    "successful_cooks": 0,
                    "rank": ChefRank.AMATEUR.value,
                }
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to create user profile")
        return _parse_profile(response.data[0])

    def save_about(self, user_id: UUID, about: str) -> UserProfile:
        """Upsert onboarding notes and flag the form as submitted."""
        response = (
            self.client.table("user_profiles")
            .upsert(
                {"user_id": str(user_id), "about": about, "form_submitted": True},
                on_conflict="user_id",
            )
            .execute()
        )
        if not response.data:
            raise RuntimeError("Failed to save profile details")
        return _parse_profile(response.data[0])

    def save_cook_stats(self, user_id: UUID, successful_cooks: int, rank: str) -> None:
        """Upsert the cook counter and rank."""
        self.client.table("user_profiles").upsert(
            {
                "user_id": str(user_id),
                "successful_cooks": successful_cooks,
                "rank": rank,
            },
            on_conflict="user_id",
        ).execute()

    def list_top_cooks(self, limit: int) -> list[dict[str, object]]:
        """Return leaderboard rows ordered by successful cooks."""
        response = (
            self.client.table("user_profiles")
            .select("email, successful_cooks, rank")
            .order("successful_cooks", desc=True)
            .limit(limit)
            .execute()
        )
        return list(response.data or [])


def _parse_profile(row: dict[str, object]) -> UserProfile:
    """Parse a user_profiles row into a domain model."""
    return UserProfile(
        user_id=UUID(str(row["user_id"])),
        about=str(row.get("about") or ""),
        form_submitted=bool(row.get("form_submitted")),
        successful_cooks=int(row.get("successful_cooks") or 0),
        rank=str(row.get("rank") or ChefRank.AMATEUR.value),
        email=row.get("email"),
    )
