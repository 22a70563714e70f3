"""Models for food image identification results."""

from dataclasses import dataclass
from enum import StrEnum

NOT_FOOD = "NOT_FOOD"


class ImageCategory(StrEnum):
    """Non-food categories an image can be rejected as."""

    PERSON = "person"
    LANDSCAPE = "landscape"
    DOCUMENT = "document"
    OBJECT = "object"
    UNCLEAR = "unclear"
    OTHER = "other"


@dataclass(frozen=True)
class FoodIdentification:
    """Either an identified item name or a typed rejection."""

    item_name: str | None
    category: ImageCategory | None = None
    message: str | None = None

    @property
    def is_food(self) -> bool:
        return self.item_name is not None

    @classmethod
    def identified(cls, item_name: str) -> "FoodIdentification":
        return cls(item_name=item_name)

    @classmethod
    def rejected(
        cls, message: str, category: ImageCategory | None = None
    ) -> "FoodIdentification":
        return cls(item_name=None, category=category, message=message)
