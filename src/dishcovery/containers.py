"""Dependency container wiring for the application."""

from collections.abc import Awaitable, Callable
from dataclasses import dataclass

from supabase import create_client

from dishcovery.adapters.openai_client import OpenAIGenerativeClient
from dishcovery.adapters.supabase_auth_client import AuthClient, SupabaseAuthClient
from dishcovery.adapters.supabase_forum_repository import SupabaseForumRepository
from dishcovery.adapters.supabase_item_repository import SupabaseItemRepository
from dishcovery.adapters.supabase_profile_repository import (
    SupabaseProfileRepository,
)
from dishcovery.config import Settings
from dishcovery.services.cooking import CookService
from dishcovery.services.food_images import FoodImageService
from dishcovery.services.forum import ForumService
from dishcovery.services.generation import ModelOptions
from dishcovery.services.inventory import InventoryService
from dishcovery.services.profiles import ProfileService
from dishcovery.services.recipes import RecipeService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    auth_client: AuthClient
    inventory_service: InventoryService
    profile_service: ProfileService
    food_image_service: FoodImageService
    recipe_service: RecipeService
    cook_service: CookService
    forum_service: ForumService
    close_resources: Callable[[], Awaitable[None]]


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    item_repository = SupabaseItemRepository(supabase_client)
    profile_repository = SupabaseProfileRepository(supabase_client)
    forum_repository = SupabaseForumRepository(supabase_client)

    openai_client = OpenAIGenerativeClient.create(resolved_settings.openai_api_key)
    model_options = ModelOptions(
        model=resolved_settings.openai_model,
        reasoning_effort=resolved_settings.openai_reasoning_effort,
        store=resolved_settings.openai_store,
    )

    profile_service = ProfileService(profile_repository)

    async def close_resources() -> None:
        await openai_client.close()

    return AppContainer(
        settings=resolved_settings,
        auth_client=SupabaseAuthClient(supabase_client),
        inventory_service=InventoryService(item_repository),
        profile_service=profile_service,
        food_image_service=FoodImageService(
            client=openai_client, options=model_options
        ),
        recipe_service=RecipeService(
            client=openai_client,
            options=model_options,
            inventory_repository=item_repository,
            profile_service=profile_service,
            include_prompt=resolved_settings.debug_prompts,
        ),
        cook_service=CookService(
            inventory_repository=item_repository,
            profile_repository=profile_repository,
        ),
        forum_service=ForumService(forum_repository),
        close_resources=close_resources,
    )
