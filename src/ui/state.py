"""State management models for the Streamlit UI."""

import logging
from typing import Protocol

import httpx
from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

GENERATION_FAILED_MESSAGE = "Kunne ikke generere artikkelstruktur. Prøv igjen senere."


class StructureClient(Protocol):
    """Anything that can turn a prompt into an article structure."""

    def generate_article_structure(self, prompt: str) -> str: ...


class GenerationState(BaseModel):
    """State for article structure generation."""

    prompt: str | None = Field(default=None, description="Last prompt sent")
    outline: str | None = Field(default=None, description="Generated article structure")
    is_generating: bool = Field(default=False, description="Generation in progress")
    error_message: str | None = Field(default=None, description="Error message")


def run_structure_generation(client: StructureClient, prompt: str) -> GenerationState:
    """Request a structure and return the finished state.

    The returned state never has ``is_generating`` set: request errors and
    unusable response bodies become an error message.
    """
    try:
        outline = client.generate_article_structure(prompt)
    except (httpx.HTTPError, ValueError) as e:
        logger.error(f"Article structure request failed: {e}")
        return GenerationState(prompt=prompt, error_message=GENERATION_FAILED_MESSAGE)
    return GenerationState(prompt=prompt, outline=outline)
