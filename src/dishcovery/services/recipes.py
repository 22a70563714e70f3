"""Recipe suggestions built from the user's inventory."""

import json
import logging
import re
from dataclasses import dataclass
from datetime import date
from uuid import UUID

from pydantic import ValidationError

from dishcovery.domain.items import InventoryItem
from dishcovery.domain.recipes import AdditionalIngredient, Recipe, RecipeSuggestions
from dishcovery.errors import RecipeGenerationError
from dishcovery.services.expiry import ExpiryGroups, partition_items, today_utc
from dishcovery.services.generation import GenerativeClient, ModelOptions, generate_text
from dishcovery.services.inventory import InventoryRepository
from dishcovery.services.profiles import ProfileService

logger = logging.getLogger(__name__)

EMPTY_INVENTORY_MESSAGE = (
    "No ingredients found in your inventory. Add some food items first."
)
NO_USABLE_INGREDIENTS_MESSAGE = (
    "No usable ingredients found in your inventory. All items appear to be expired."
)
PARSE_FAILURE_MESSAGE = (
    "We encountered an issue generating recipe suggestions. Please try again."
)
DEFAULT_RECIPE_NAME = "Unnamed Recipe"
RECIPE_COUNT = 3

_FENCED_BLOCK = re.compile(r"```(?:json)?([\s\S]*?)```")
_OBJECT_SPAN = re.compile(r"(\{[\s\S]*\})")

_RESPONSE_SCHEMA = """{
  "recipes": [
    {
      "name": "Recipe Name",
      "useInventoryIngredients": ["ingredient1", "ingredient2"],
      "additionalIngredients": [
        {"name": "ingredient3", "buyLink": "https://www.swiggy.com/instamart/search?custom_back=true&query=ingredient3"},
        {"name": "ingredient4", "buyLink": "https://www.swiggy.com/instamart/search?custom_back=true&query=ingredient4"}
      ],
      "instructions": [
        "Detailed instruction 1",
        "Detailed instruction 2"
      ],
      "youtubeLinks": [
        "https://www.youtube.com/results?search_query=recipe+name+tutorial",
        "https://www.youtube.com/results?search_query=how+to+make+recipe+name"
      ]
    }
  ]
}"""


@dataclass
class RecipeService:
    """Compose the recipe prompt, call the model and normalise its reply."""

    client: GenerativeClient
    options: ModelOptions
    inventory_repository: InventoryRepository
    profile_service: ProfileService
    include_prompt: bool = False

    async def suggest(
        self, user_id: UUID, retry_count: int = 0, today: date | None = None
    ) -> RecipeSuggestions:
        """Suggest recipes that use soon-to-expire items first."""
        try:
            items = self.inventory_repository.list_items(user_id)
            if not items:
                return RecipeSuggestions(message=EMPTY_INVENTORY_MESSAGE)
            groups = partition_items(items, today or today_utc())
            if not groups.usable:
                return RecipeSuggestions(message=NO_USABLE_INGREDIENTS_MESSAGE)
            about = self.profile_service.get_about(user_id)
        except Exception as exc:
            raise RecipeGenerationError(str(exc) or type(exc).__name__) from exc

        preferences = collect_preferences(about, items)
        prompt = build_recipe_prompt(groups, preferences, retry_count)
        logger.debug("Recipe prompt for user %s: %s", user_id, prompt)

        try:
            reply = await generate_text(self.client, self.options, prompt)
        except Exception as exc:
            raise RecipeGenerationError(str(exc) or type(exc).__name__) from exc

        recipes = parse_recipe_response(reply)
        if recipes is None:
            logger.warning("Unparseable recipe reply: %s", reply[:500])
            return RecipeSuggestions(message=PARSE_FAILURE_MESSAGE)

        # Usable items take precedence when names repeat.
        linkable = [*groups.usable, *groups.expired, *groups.invalid]
        return RecipeSuggestions(
            recipes=[link_inventory_items(recipe, linkable) for recipe in recipes],
            prompt=prompt if self.include_prompt else None,
        )


def collect_preferences(profile_about: str, items: list[InventoryItem]) -> str:
    """Join profile notes and per-item notes into one preference string."""
    notes = [profile_about, *(item.about or "" for item in items)]
    return " ".join(note.strip() for note in notes if note and note.strip())


def build_recipe_prompt(
    groups: ExpiryGroups, preferences: str, retry_count: int = 0
) -> str:
    """Build the single prompt sent for recipe suggestions."""
    expiring = ", ".join(item.name for item in groups.expiring_soon)
    fresh = ", ".join(item.name for item in groups.fresh)
    expired = ", ".join(item.name for item in groups.expired)

    lines = ["I want you to generate personalized recipe suggestions that I can cook."]
    if preferences:
        lines.append(f"User profile and preferences: {preferences}")
    if retry_count > 0:
        lines.append(
            f"This is attempt #{retry_count + 1}. "
            "Please suggest DIFFERENT recipes than previously."
        )
    lines.extend(
        [
            "",
            f"Based on these ingredients, suggest {RECIPE_COUNT} different recipes "
            "I can make.",
            "Prioritize using ingredients that expire soon.",
            "",
            f"Ingredients that are expiring soon (use these first): {expiring}",
            f"Other available ingredients: {fresh}",
        ]
    )
    if groups.expired:
        lines.append(
            "Warning: These ingredients are expired and should not be used: "
            f"{expired}"
        )
    lines.extend(
        [
            "",
            "For each recipe, provide:",
            "1. Recipe name",
            "2. Ingredients needed from my inventory",
            "3. Additional ingredients I might need to buy "
            "(with links to buy online if possible)",
            "4. Detailed step-by-step preparation instructions (numbered list)",
            "5. YouTube video links for the recipe tutorial",
            "",
            "IMPORTANT: Your response must be in valid, parseable JSON format "
            "with the structure shown below.",
            "Do not include any text, explanation, or markdown outside of the JSON.",
            "Only include the JSON object itself with no additional formatting.",
            "",
            "JSON format:",
            _RESPONSE_SCHEMA,
            "",
            "Double check that:",
            "1. The JSON is valid and can be parsed by a standard JSON parser",
            "2. Each recipe has the five required properties: name, "
            "useInventoryIngredients, additionalIngredients, instructions, "
            "and youtubeLinks",
            "3. All arrays and objects have proper closing brackets",
            "4. All property names are in the exact format shown above",
            "5. All youtubeLinks are formatted correctly and lead to real videos",
        ]
    )
    return "\n".join(lines)


def extract_json_text(reply: str) -> str:
    """Pull the JSON object out of a reply that may carry fences or prose."""
    text = reply
    fenced = _FENCED_BLOCK.search(reply)
    if fenced and fenced.group(1).strip():
        text = fenced.group(1).strip()
    if not text.startswith("{"):
        span = _OBJECT_SPAN.search(reply)
        if span:
            text = span.group(1)
    return text


def parse_recipe_response(reply: str) -> list[Recipe] | None:
    """Parse and normalise the model reply; None when no recipes are usable."""
    try:
        payload = json.loads(extract_json_text(reply))
    except (json.JSONDecodeError, TypeError):
        return None
    if not isinstance(payload, dict):
        return None
    raw_recipes = payload.get("recipes")
    if not isinstance(raw_recipes, list):
        return None
    recipes = []
    for raw in raw_recipes:
        if not isinstance(raw, dict):
            continue
        try:
            recipes.append(normalize_recipe(raw))
        except ValidationError:
            logger.warning("Dropping malformed recipe entry: %r", raw)
    return recipes


def normalize_recipe(raw: dict[str, object]) -> Recipe:
    """Coerce one untrusted recipe object into a complete Recipe."""
    name = raw.get("name")
    if not isinstance(name, str) or not name.strip():
        name = DEFAULT_RECIPE_NAME
    return Recipe(
        name=name.strip(),
        use_inventory_ingredients=_string_list(raw.get("useInventoryIngredients")),
        additional_ingredients=_additional_ingredients(
            raw.get("additionalIngredients")
        ),
        instructions=_string_list(raw.get("instructions")),
        youtube_links=_string_list(raw.get("youtubeLinks")),
    )


def link_inventory_items(recipe: Recipe, items: list[InventoryItem]) -> Recipe:
    """Attach the ids of inventory items the recipe says it uses."""
    exact: dict[str, InventoryItem] = {}
    folded: dict[str, InventoryItem] = {}
    for item in items:
        exact.setdefault(item.name, item)
        folded.setdefault(item.name.casefold(), item)
    item_ids: list[str] = []
    for ingredient in recipe.use_inventory_ingredients:
        match = exact.get(ingredient) or folded.get(ingredient.strip().casefold())
        if match and str(match.id) not in item_ids:
            item_ids.append(str(match.id))
    return recipe.model_copy(update={"inventory_item_ids": item_ids})


def _string_list(value: object) -> list[str]:
    if not isinstance(value, list):
        return []
    return [
        entry if isinstance(entry, str) else str(entry)
        for entry in value
        if entry is not None
    ]


def _additional_ingredients(value: object) -> list[AdditionalIngredient]:
    if not isinstance(value, list):
        return []
    ingredients = []
    for entry in value:
        if isinstance(entry, str) and entry.strip():
            ingredients.append(AdditionalIngredient(name=entry.strip()))
        elif isinstance(entry, dict) and isinstance(entry.get("name"), str):
            link = entry.get("buyLink")
            ingredients.append(
                AdditionalIngredient(
                    name=entry["name"],
                    buy_link=link if isinstance(link, str) else "",
                )
            )
    return ingredients
