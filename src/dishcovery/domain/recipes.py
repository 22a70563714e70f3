"""Models for recipe suggestions produced by the language model."""

from pydantic import BaseModel, ConfigDict, Field


class AdditionalIngredient(BaseModel):
    """An ingredient the user would need to buy."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    buy_link: str = Field(default="", alias="buyLink")


class Recipe(BaseModel):
    """A single suggested recipe, normalised so every field is present."""

    model_config = ConfigDict(populate_by_name=True)

    name: str = "Unnamed Recipe"
    use_inventory_ingredients: list[str] = Field(
        default_factory=list, alias="useInventoryIngredients"
    )
    additional_ingredients: list[AdditionalIngredient] = Field(
        default_factory=list, alias="additionalIngredients"
    )
    instructions: list[str] = Field(default_factory=list)
    youtube_links: list[str] = Field(default_factory=list, alias="youtubeLinks")
    inventory_item_ids: list[str] = Field(
        default_factory=list, alias="inventoryItemIds"
    )


class RecipeSuggestions(BaseModel):
    """Response for a recipe suggestion request."""

    recipes: list[Recipe] = Field(default_factory=list)
    message: str | None = None
    prompt: str | None = None
