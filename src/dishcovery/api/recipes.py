"""Recipe suggestion and cook confirmation endpoints."""

from fastapi import APIRouter, Depends

from dishcovery.api.auth import get_container, require_user
from dishcovery.api.schemas import CookConfirmationRequest, RecipeSuggestionRequest
from dishcovery.containers import AppContainer
from dishcovery.domain.auth import AuthenticatedUser

router = APIRouter(prefix="/api", tags=["recipes"])


@router.post("/recipe-suggestions")
async def recipe_suggestions(
    body: RecipeSuggestionRequest | None = None,
    user: AuthenticatedUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Suggest recipes from the user's inventory."""
    retry_count = body.retry_count if body else 0
    suggestions = await container.recipe_service.suggest(user.id, retry_count)
    return suggestions.model_dump(by_alias=True, exclude_none=True)


@router.post("/recipes/cooked")
async def confirm_cooked(
    body: CookConfirmationRequest,
    user: AuthenticatedUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Remove the recipe's ingredients and count the cook."""
    result = container.cook_service.confirm_cooked(
        user.id,
        ingredient_names=body.use_inventory_ingredients,
        item_ids=body.inventory_item_ids,
    )
    return {
        "deletedItemIds": result.deleted_item_ids,
        "successfulCooks": result.successful_cooks,
        "rank": result.rank.value,
        "rankChanged": result.rank_changed,
    }
