"""Domain models for user profiles and the leaderboard."""

from dataclasses import dataclass
from uuid import UUID

from dishcovery.domain.ranks import ChefRank


@dataclass(frozen=True)
class UserProfile:
    """Per-user preferences and cook statistics."""

    user_id: UUID
    about: str
    form_submitted: bool
    successful_cooks: int
    rank: str
    email: str | None


@dataclass(frozen=True)
class LeaderboardEntry:
    """One leaderboard row."""

    position: int
    email: str | None
    successful_cooks: int
    rank: str = ChefRank.AMATEUR.value


@dataclass(frozen=True)
class OnboardingAnswers:
    """Answers from the onboarding form, folded into the profile notes."""

    age: str
    gender: str
    pregnancy_status: str
    diet_preferences: str
    specific_diet: str
    fitness_goals: str
    additional_info: str | None = None

    def to_about(self) -> str:
        """Render the answers as the free-text notes sent to the model."""
        return (
            f"Age: {self.age}, Gender: {self.gender}, "
            f"Pregnancy Status: {self.pregnancy_status}, "
            f"Diet Preferences: {self.diet_preferences}, "
            f"Specific Diet: {self.specific_diet}, "
            f"Fitness Goals: {self.fitness_goals}, "
            f"Additional Info: {self.additional_info or 'None'}"
        )
