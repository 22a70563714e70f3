"""Two-stage food image identification using a multimodal model."""

import base64
import binascii
import logging
from dataclasses import dataclass

from dishcovery.domain.food_images import NOT_FOOD, FoodIdentification, ImageCategory
from dishcovery.errors import FoodImageProcessingError, ValidationFailedError
from dishcovery.services.generation import GenerativeClient, ModelOptions, generate_text

logger = logging.getLogger(__name__)

TRIAGE_PROMPT = """Analyze this image and determine what it contains.
Do not respond with any unnecessary details.
ONLY respond with one of these exact answers:
1. "CONTAINS_FOOD" - if the image clearly shows food items
2. "CONTAINS_PERSON" - if the image primarily shows a person
3. "CONTAINS_LANDSCAPE" - if the image shows scenery or outdoor locations
4. "CONTAINS_DOCUMENT" - if the image shows text, documents, or screenshots
5. "CONTAINS_OBJECT" - if the image shows non-food objects (furniture, electronics, etc.)
6. "UNCLEAR_IMAGE" - if the image is blurry, too dark, or otherwise hard to identify
7. "NO_FOOD" - if the image does not contain any clear food items and doesn't match above categories"""

# Checked in order; the first token found anywhere in the reply wins.
TRIAGE_RULES: tuple[tuple[str, ImageCategory, str], ...] = (
    (
        "CONTAINS_PERSON",
        ImageCategory.PERSON,
        "The image appears to show a person rather than food. "
        "Please upload an image that clearly shows a food item.",
    ),
    (
        "CONTAINS_LANDSCAPE",
        ImageCategory.LANDSCAPE,
        "The image appears to show scenery or an outdoor location rather than "
        "food. Please upload an image that clearly shows a food item.",
    ),
    (
        "CONTAINS_DOCUMENT",
        ImageCategory.DOCUMENT,
        "The image appears to show text or a document rather than food. "
        "Please upload an image that clearly shows a food item.",
    ),
    (
        "CONTAINS_OBJECT",
        ImageCategory.OBJECT,
        "The image appears to show a non-food object. "
        "Please upload an image that clearly shows a food item.",
    ),
    (
        "UNCLEAR_IMAGE",
        ImageCategory.UNCLEAR,
        "The image is unclear, too dark, or difficult to identify. "
        "Please upload a clearer image of a food item.",
    ),
    (
        "NO_FOOD",
        ImageCategory.OTHER,
        "No food items were detected in this image. "
        "Please try uploading a different image that clearly shows food.",
    ),
)

UNIDENTIFIED_MESSAGE = (
    "Could not identify any food in this image. "
    "Please try with a clearer image of a food item."
)

_HEDGES = ("cannot identify", "sorry")


@dataclass
class FoodImageService:
    """Classify an uploaded photo and name the food item in it."""

    client: GenerativeClient
    options: ModelOptions

    async def identify(
        self, image_bytes: bytes, about: str | None = None
    ) -> FoodIdentification:
        """Return the item name, or a typed rejection when it is not food."""
        data_url = _to_data_url(image_bytes)
        try:
            triage_reply = await generate_text(
                self.client, self.options, TRIAGE_PROMPT, image_data_url=data_url
            )
            rejection = match_image_category(triage_reply)
            if rejection is not None:
                logger.info("Image rejected during triage as %s", rejection.category)
                return rejection

            name_reply = await generate_text(
                self.client,
                self.options,
                build_identify_prompt(about),
                image_data_url=data_url,
            )
        except Exception as exc:
            raise FoodImageProcessingError(str(exc) or type(exc).__name__) from exc

        return _interpret_name(name_reply)


def match_image_category(reply: str) -> FoodIdentification | None:
    """Map a triage reply to a rejection, or None when it looks like food."""
    for token, category, message in TRIAGE_RULES:
        if token in reply:
            return FoodIdentification.rejected(message, category=category)
    return None


def build_identify_prompt(about: str | None) -> str:
    """Prompt asking for a short item name, weighted by user preferences."""
    lines = ["Identify the food item in this image and provide just the name."]
    if about:
        lines.append(
            f"Note that the user has the following preferences/dietary info: {about}"
        )
    lines.extend(
        [
            "Output only the food item name, nothing else.",
            "Be specific but concise (1-3 words).",
            'If you cannot identify any food in the image, just respond with '
            f'"{NOT_FOOD}" exactly.',
        ]
    )
    return "\n".join(lines)


def _interpret_name(reply: str) -> FoodIdentification:
    lowered = reply.lower()
    if not reply or reply == NOT_FOOD or any(hedge in lowered for hedge in _HEDGES):
        return FoodIdentification.rejected(UNIDENTIFIED_MESSAGE)
    return FoodIdentification.identified(reply.strip().strip('"').strip())


def decode_image_payload(raw: str | None) -> bytes:
    """Decode a data URL or bare base64 string into image bytes."""
    if not raw or not raw.strip():
        raise ValidationFailedError("No image provided")
    payload = raw.strip()
    if payload.startswith("data:"):
        _, _, payload = payload.partition(",")
    try:
        image_bytes = base64.b64decode(payload, validate=True)
    except (binascii.Error, ValueError) as exc:
        raise ValidationFailedError("Image is not valid base64 data") from exc
    if not image_bytes:
        raise ValidationFailedError("No image provided")
    return image_bytes


def _to_data_url(image_bytes: bytes) -> str:
    """Convert bytes to a base64 data URL for image input."""
    mime_type = _detect_mime_type(image_bytes)
    encoded = base64.b64encode(image_bytes).decode("utf-8")
    return f"data:{mime_type};base64,{encoded}"


def _detect_mime_type(image_bytes: bytes) -> str:
    """Infer a basic image MIME type from file signatures."""
    if image_bytes.startswith(b"\xff\xd8\xff"):
        return "image/jpeg"
    if image_bytes.startswith(b"\x89PNG\r\n\x1a\n"):
        return "image/png"
    if image_bytes[:4] == b"RIFF" and image_bytes[8:12] == b"WEBP":
        return "image/webp"
    if image_bytes[:6] in {b"GIF87a", b"GIF89a"}:
        return "image/gif"
    return "image/jpeg"
