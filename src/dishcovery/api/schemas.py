"""Request bodies and response serialisers for the HTTP API."""

from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field

from dishcovery.domain.expiry import ExpiryStatus
from dishcovery.domain.forum import ForumPost
from dishcovery.domain.items import InventoryItem
from dishcovery.domain.profiles import LeaderboardEntry, OnboardingAnswers, UserProfile
from dishcovery.domain.ranks import RankProgress


class _CamelModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class FoodImageRequest(_CamelModel):
    """Body for POST /api/process-food-image."""

    image: str | None = None


class RecipeSuggestionRequest(_CamelModel):
    """Body for POST /api/recipe-suggestions."""

    retry_count: int = Field(default=0, ge=0, alias="retryCount")


class CookConfirmationRequest(_CamelModel):
    """Body for POST /api/recipes/cooked."""

    use_inventory_ingredients: list[str] = Field(
        default_factory=list, alias="useInventoryIngredients"
    )
    inventory_item_ids: list[UUID] = Field(
        default_factory=list, alias="inventoryItemIds"
    )


class ItemCreateRequest(_CamelModel):
    """Body for POST /api/items."""

    name: str | None = None
    expiry_date: str | None = Field(default=None, alias="expiryDate")
    about: str | None = None


class ItemUpdateRequest(_CamelModel):
    """Body for PATCH /api/items/{item_id}."""

    name: str | None = None
    expiry_date: str | None = Field(default=None, alias="expiryDate")
    about: str | None = None


class OnboardingRequest(_CamelModel):
    """Body for POST /api/profile/form."""

    age: str
    gender: str
    pregnancy_status: str = Field(default="Not applicable", alias="pregnancyStatus")
    diet_preferences: str = Field(alias="dietPreferences")
    specific_diet: str = Field(default="None", alias="specificDiet")
    fitness_goals: str = Field(alias="fitnessGoals")
    additional_info: str | None = Field(default=None, alias="additionalInfo")

    def to_answers(self) -> OnboardingAnswers:
        return OnboardingAnswers(
            age=self.age,
            gender=self.gender,
            pregnancy_status=self.pregnancy_status,
            diet_preferences=self.diet_preferences,
            specific_diet=self.specific_diet,
            fitness_goals=self.fitness_goals,
            additional_info=self.additional_info,
        )


class ForumPostRequest(_CamelModel):
    """Body for POST /api/forum."""

    content: str | None = None


def serialize_item(
    item: InventoryItem, status: ExpiryStatus | None = None
) -> dict[str, object]:
    """Render an inventory item, optionally with its expiry status."""
    payload: dict[str, object] = {
        "id": str(item.id),
        "name": item.name,
        "expiryDate": item.expiry_date,
        "createdAt": item.created_at.isoformat() if item.created_at else None,
        "about": item.about,
    }
    if status is not None:
        payload["status"] = {
            "bucket": status.bucket.value,
            "label": status.label,
            "daysRemaining": status.days_remaining,
        }
    return payload


def serialize_profile(
    profile: UserProfile, progress: RankProgress
) -> dict[str, object]:
    """Render a profile with its rank progress."""
    return {
        "userId": str(profile.user_id),
        "email": profile.email,
        "about": profile.about,
        "formSubmitted": profile.form_submitted,
        "successfulCooks": profile.successful_cooks,
        "rank": profile.rank,
        "nextRank": progress.next_rank.value if progress.next_rank else None,
        "remaining": progress.remaining,
        "progressPercent": progress.progress_percent,
    }


def serialize_post(post: ForumPost) -> dict[str, object]:
    return {
        "id": str(post.id),
        "userId": str(post.user_id),
        "content": post.content,
        "createdAt": post.created_at.isoformat() if post.created_at else None,
    }


def serialize_leaderboard_entry(entry: LeaderboardEntry) -> dict[str, object]:
    return {
        "position": entry.position,
        "email": entry.email,
        "successfulCooks": entry.successful_cooks,
        "rank": entry.rank,
    }
