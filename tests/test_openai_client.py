"""Tests for the OpenAI generative client."""

import asyncio

from dishcovery.adapters.openai_client import OpenAIGenerativeClient
from dishcovery.services.food_images import UNIDENTIFIED_MESSAGE, FoodImageService
from dishcovery.services.profiles import ProfileService
from dishcovery.services.recipes import PARSE_FAILURE_MESSAGE, RecipeService
from tests.conftest import (
    TODAY,
    USER_ID,
    InMemoryInventoryRepository,
    InMemoryProfileRepository,
)


class _FakeResponses:
    def __init__(self, output_text: str) -> None:
        self.output_text = output_text
        self.last_payload: dict[str, object] | None = None

    async def create(self, **kwargs):  # type: ignore[no-untyped-def]
        self.last_payload = kwargs
        return type("Resp", (), {"output_text": self.output_text})()


class _FakeOpenAI:
    def __init__(self, output_text: str = "Banana") -> None:
        self.responses = _FakeResponses(output_text)
        self.closed = False

    async def close(self) -> None:
        self.closed = True


def test_generate_sends_text_and_image() -> None:
    fake = _FakeOpenAI()
    client = OpenAIGenerativeClient(client=fake)

    result = asyncio.run(
        client.generate(
            model="gpt-5.2",
            reasoning_effort="low",
            store=False,
            prompt="Name this food",
            image_data_url="data:image/jpeg;base64,ZmFrZQ==",
        )
    )

    assert result == "Banana"
    payload = fake.responses.last_payload
    assert payload is not None
    assert payload["reasoning"] == {"effort": "low"}
    content = payload["input"][0]["content"]
    assert content[0] == {"type": "input_text", "text": "Name this food"}
    assert content[1]["image_url"].startswith("data:image/jpeg")


def test_generate_text_only_without_reasoning() -> None:
    fake = _FakeOpenAI('{"recipes": []}')
    client = OpenAIGenerativeClient(client=fake)

    asyncio.run(
        client.generate(
            model="gpt-5.2", reasoning_effort=None, store=True, prompt="Recipes"
        )
    )

    payload = fake.responses.last_payload
    assert payload is not None
    assert "reasoning" not in payload
    assert payload["store"] is True
    assert len(payload["input"][0]["content"]) == 1


def test_empty_output_is_returned_as_empty_text() -> None:
    client = OpenAIGenerativeClient(client=_FakeOpenAI(""))

    result = asyncio.run(
        client.generate(
            model="gpt-5.2", reasoning_effort=None, store=False, prompt="x"
        )
    )

    assert result == ""


def test_empty_identification_reply_is_a_rejection(model_options) -> None:
    service = FoodImageService(
        client=OpenAIGenerativeClient(client=_FakeOpenAI("")), options=model_options
    )

    result = asyncio.run(service.identify(b"\xff\xd8\xffjpeg"))

    assert result.is_food is False
    assert result.category is None
    assert result.message == UNIDENTIFIED_MESSAGE


def test_empty_recipe_reply_asks_to_retry(model_options) -> None:
    inventory = InMemoryInventoryRepository()
    inventory.add("Egg", "2026-10-20")
    service = RecipeService(
        client=OpenAIGenerativeClient(client=_FakeOpenAI("")),
        options=model_options,
        inventory_repository=inventory,
        profile_service=ProfileService(InMemoryProfileRepository()),
    )

    result = asyncio.run(service.suggest(USER_ID, today=TODAY))

    assert result.recipes == []
    assert result.message == PARSE_FAILURE_MESSAGE


def test_close_closes_transport() -> None:
    fake = _FakeOpenAI()

    asyncio.run(OpenAIGenerativeClient(client=fake).close())

    assert fake.closed is True
