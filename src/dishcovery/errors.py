"""Error types shared by services and the HTTP layer."""


class DishcoveryError(Exception):
    """Base class for errors reported to a single requesting user."""

    status_code = 500
    public_message = "Something went wrong. Please try again."

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.public_message)
        self.message = message or self.public_message

    def to_payload(self) -> dict[str, object]:
        """JSON body returned to the client for this error."""
        return {"error": self.message}


class AuthenticationRequiredError(DishcoveryError):
    """Raised when a request carries no valid session."""

    status_code = 401
    public_message = "Authentication required"


class ValidationFailedError(DishcoveryError):
    """Raised when user input is missing or malformed."""

    status_code = 400
    public_message = "Invalid request"


class NotFoundError(DishcoveryError):
    """Raised when a row does not exist or is not owned by the caller."""

    status_code = 404
    public_message = "Not found"


class ExternalServiceError(DishcoveryError):
    """Raised when Supabase or the model provider fails mid-request."""

    def to_payload(self) -> dict[str, object]:
        return {"error": self.public_message, "details": self.message}


class FoodImageProcessingError(ExternalServiceError):
    """The image could not be processed, as opposed to being rejected."""

    public_message = "Failed to process image"

    def to_payload(self) -> dict[str, object]:
        return {**super().to_payload(), "itemName": "ERROR"}


class RecipeGenerationError(ExternalServiceError):
    """Recipe suggestions could not be generated."""

    public_message = "Failed to generate recipe suggestions"


class CookConfirmationError(ExternalServiceError):
    """A cook confirmation failed before any inventory change was made."""

    public_message = "Could not record your cook. Nothing was changed."
    partial = False

    def __init__(
        self, message: str | None = None, deleted_item_ids: list[str] | None = None
    ) -> None:
        super().__init__(message)
        self.deleted_item_ids = deleted_item_ids or []

    def to_payload(self) -> dict[str, object]:
        return {
            "error": self.message,
            "partial": self.partial,
            "deletedItemIds": self.deleted_item_ids,
        }


class PartialCookError(CookConfirmationError):
    """A cook confirmation failed after some ingredients were already removed."""

    public_message = (
        "Some ingredients were removed from your inventory but your cook "
        "count was not updated. Confirm again to finish."
    )
    partial = True
