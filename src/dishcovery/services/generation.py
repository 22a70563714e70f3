"""Interface to the hosted generative model."""

from dataclasses import dataclass
from typing import Protocol


class GenerativeClient(Protocol):
    """Interface for single-shot text generation, optionally with an image."""

    async def generate(  # noqa: PLR0913
        self,
        *,
        model: str,
        reasoning_effort: str | None,
        store: bool,
        prompt: str,
        image_data_url: str | None = None,
    ) -> str:
        """Return the model's raw text reply."""


@dataclass(frozen=True)
class ModelOptions:
    """Model selection shared by every prompt the app sends."""

    model: str
    reasoning_effort: str | None = None
    store: bool = False


async def generate_text(
    client: GenerativeClient,
    options: ModelOptions,
    prompt: str,
    image_data_url: str | None = None,
) -> str:
    """Send one prompt with the configured options and strip the reply."""
    reply = await client.generate(
        model=options.model,
        reasoning_effort=options.reasoning_effort,
        store=options.store,
        prompt=prompt,
        image_data_url=image_data_url,
    )
    return (reply or "").strip()
