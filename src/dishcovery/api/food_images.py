"""Food photo identification endpoint."""

import logging

from fastapi import APIRouter, Depends

from dishcovery.api.auth import get_container, require_user
from dishcovery.api.schemas import FoodImageRequest
from dishcovery.containers import AppContainer
from dishcovery.domain.auth import AuthenticatedUser
from dishcovery.domain.food_images import NOT_FOOD
from dishcovery.services.food_images import decode_image_payload

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api", tags=["food-images"])


@router.post("/process-food-image")
async def process_food_image(
    body: FoodImageRequest,
    user: AuthenticatedUser = Depends(require_user),
    container: AppContainer = Depends(get_container),
) -> dict[str, object]:
    """Identify the food item in an uploaded photo."""
    image_bytes = decode_image_payload(body.image)
    try:
        about = container.profile_service.get_about(user.id)
    except Exception:
        logger.warning(
            "Profile lookup failed for user %s; identifying without preferences",
            user.id,
            exc_info=True,
        )
        about = ""
    result = await container.food_image_service.identify(image_bytes, about=about)
    if result.is_food:
        return {"itemName": result.item_name}
    payload: dict[str, object] = {"itemName": NOT_FOOD, "error": result.message}
    if result.category is not None:
        payload["imageType"] = result.category.value
    return payload
