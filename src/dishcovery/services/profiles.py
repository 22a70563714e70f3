"""User profile, onboarding and leaderboard logic."""

import logging
from dataclasses import dataclass
from typing import Protocol
from uuid import UUID

from dishcovery.domain.auth import AuthenticatedUser
from dishcovery.domain.profiles import LeaderboardEntry, OnboardingAnswers, UserProfile
from dishcovery.domain.ranks import ChefRank, RankProgress, rank_progress

logger = logging.getLogger(__name__)


class ProfileRepository(Protocol):
    """Persistence interface for user profiles."""

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the profile for a user, if present."""

    def create_profile(self, user_id: UUID, email: str | None) -> UserProfile:
        """Create the default profile row for a new user."""

    def save_about(self, user_id: UUID, about: str) -> UserProfile:
        """Store onboarding notes and mark the form as submitted."""

    def save_cook_stats(self, user_id: UUID, successful_cooks: int, rank: str) -> None:
        """Persist the cook counter and its derived rank."""

    def list_top_cooks(self, limit: int) -> list[dict[str, object]]:
        """Return profiles ordered by successful cooks, highest first."""


@dataclass
class ProfileService:
    """Application service for user profiles."""

    repository: ProfileRepository

    def ensure_profile(self, user: AuthenticatedUser) -> UserProfile:
        """Return the user's profile, creating the default row if missing."""
        existing = self.repository.get_profile(user.id)
        if existing:
            return existing
        logger.info("Creating profile for user %s", user.id)
        return self.repository.create_profile(user.id, user.email)

    def get_about(self, user_id: UUID) -> str:
        """Return the user's free-text preferences, or an empty string."""
        profile = self.repository.get_profile(user_id)
        return profile.about if profile and profile.about else ""

    def submit_onboarding(
        self, user_id: UUID, answers: OnboardingAnswers
    ) -> UserProfile:
        """Store the onboarding answers as the profile notes."""
        return self.repository.save_about(user_id, answers.to_about())

    def progress(self, profile: UserProfile) -> RankProgress:
        """Return rank progress for a profile's current cook count."""
        return rank_progress(profile.successful_cooks)

    def leaderboard(self, limit: int = 10) -> list[LeaderboardEntry]:
        """Return the top cooks with 1-based positions."""
        rows = self.repository.list_top_cooks(limit)
        return [
            LeaderboardEntry(
                position=index,
                email=row.get("email"),
                successful_cooks=int(row.get("successful_cooks") or 0),
                rank=str(row.get("rank") or ChefRank.AMATEUR.value),
            )
            for index, row in enumerate(rows, start=1)
        ]
