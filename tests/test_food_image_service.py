"""Tests for the food image classifier."""

import asyncio
import base64

import pytest

from dishcovery.domain.food_images import ImageCategory
from dishcovery.errors import FoodImageProcessingError, ValidationFailedError
from dishcovery.services.food_images import (
    FoodImageService,
    _to_data_url,
    build_identify_prompt,
    decode_image_payload,
    match_image_category,
)
from tests.conftest import FakeGenerativeClient

PNG_BYTES = b"\x89PNG\r\n\x1a\n" + b"rest"


def _service(client: FakeGenerativeClient, model_options) -> FoodImageService:
    return FoodImageService(client=client, options=model_options)


def test_food_image_is_identified(model_options) -> None:
    client = FakeGenerativeClient(replies=["CONTAINS_FOOD", "Granny Smith apple\n"])

    result = asyncio.run(_service(client, model_options).identify(PNG_BYTES))

    assert result.is_food
    assert result.item_name == "Granny Smith apple"
    assert len(client.calls) == 2
    assert str(client.calls[0]["image_data_url"]).startswith("data:image/png;base64,")


def test_person_token_with_extra_text_is_a_person_rejection(model_options) -> None:
    client = FakeGenerativeClient(
        replies=['Sure! The answer is "CONTAINS_PERSON" because I see a face.']
    )

    result = asyncio.run(_service(client, model_options).identify(PNG_BYTES))

    assert not result.is_food
    assert result.category is ImageCategory.PERSON
    assert "person" in (result.message or "")
    assert len(client.calls) == 1


def test_triage_priority_prefers_person_over_no_food() -> None:
    result = match_image_category("NO_FOOD, CONTAINS_PERSON")

    assert result is not None
    assert result.category is ImageCategory.PERSON


@pytest.mark.parametrize(
    ("reply", "category"),
    [
        ("CONTAINS_LANDSCAPE", ImageCategory.LANDSCAPE),
        ("CONTAINS_DOCUMENT", ImageCategory.DOCUMENT),
        ("CONTAINS_OBJECT", ImageCategory.OBJECT),
        ("UNCLEAR_IMAGE", ImageCategory.UNCLEAR),
        ("NO_FOOD", ImageCategory.OTHER),
    ],
)
def test_triage_categories(reply: str, category: ImageCategory) -> None:
    result = match_image_category(reply)

    assert result is not None
    assert result.category is category


def test_food_reply_is_not_a_rejection() -> None:
    assert match_image_category("CONTAINS_FOOD") is None


@pytest.mark.parametrize(
    "reply", ["NOT_FOOD", "Sorry, I can't tell", "I cannot identify this", ""]
)
def test_hedged_identification_is_generic_rejection(reply: str, model_options) -> None:
    client = FakeGenerativeClient(replies=["CONTAINS_FOOD", reply])

    result = asyncio.run(_service(client, model_options).identify(PNG_BYTES))

    assert not result.is_food
    assert result.category is None
    assert result.message is not None


def test_transport_error_is_distinct_from_rejection(model_options) -> None:
    client = FakeGenerativeClient(error=ConnectionError("network down"))

    with pytest.raises(FoodImageProcessingError) as excinfo:
        asyncio.run(_service(client, model_options).identify(PNG_BYTES))

    assert "network down" in excinfo.value.message
    assert excinfo.value.to_payload()["itemName"] == "ERROR"


def test_identify_prompt_mentions_preferences() -> None:
    prompt = build_identify_prompt("vegan, allergic to nuts")

    assert "vegan, allergic to nuts" in prompt
    assert "1-3 words" in prompt


def test_identify_prompt_without_preferences() -> None:
    assert "preferences" not in build_identify_prompt(None)


def test_decode_image_payload_accepts_data_url_and_bare_base64() -> None:
    encoded = base64.b64encode(PNG_BYTES).decode()

    assert decode_image_payload(f"data:image/png;base64,{encoded}") == PNG_BYTES
    assert decode_image_payload(encoded) == PNG_BYTES


@pytest.mark.parametrize("raw", [None, "", "   ", "data:image/png;base64,***"])
def test_decode_image_payload_rejects_bad_input(raw: str | None) -> None:
    with pytest.raises(ValidationFailedError):
        decode_image_payload(raw)


def test_to_data_url_defaults_to_jpeg() -> None:
    assert _to_data_url(b"unknown").startswith("data:image/jpeg;base64,")
