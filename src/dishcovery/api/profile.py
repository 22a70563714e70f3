"""Profile, onboarding and leaderboard endpoints."""

from fastapi import APIRouter, Depends, Query

from dishcovery.api.auth import get_container, require_user
from dishcovery.api.schemas import (
    OnboardingRequest,
    serialize_leaderboard_entry,
    serialize_profile,
)
from dishcovery.containers import AppContainer
from dishcovery.domain.auth import AuthenticatedUser

router = APIRouter(prefix="/api", tags=["profile"])


@router.get("/profile")
async def get_profile(
    user: AuthenticatedUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the user's profile and rank progress."""
    profile = container.profile_service.ensure_profile(user)
    progress = container.profile_service.progress(profile)
    return serialize_profile(profile, progress)


@router.post("/profile/form")
async def submit_onboarding_form(
    body: OnboardingRequest,
    user: AuthenticatedUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Store the onboarding answers as profile notes."""
    profile = container.profile_service.submit_onboarding(user.id, body.to_answers())
    progress = container.profile_service.progress(profile)
    return serialize_profile(profile, progress)


@router.get("/leaderboard", dependencies=[Depends(require_user)])
async def leaderboard(
    limit: int | None = Query(default=None, ge=1, le=100),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Return the top cooks."""
    entries = container.profile_service.leaderboard(
        limit or container.settings.leaderboard_limit
    )
    return {"leaderboard": [serialize_leaderboard_entry(entry) for entry in entries]}
