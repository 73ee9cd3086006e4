"""Single-shot completion chain for article structure prompts."""

import logging

from langchain_core.language_models import BaseChatModel
from langchain_core.messages import HumanMessage

from src.llm import get_llm

logger = logging.getLogger(__name__)


class MalformedCompletionError(ValueError):
    """Raised when the provider returns something other than text."""


class StructureGeneratorChain:
    """Forwards a prompt as the only user message and returns the text reply."""

    def __init__(self, llm: BaseChatModel | None = None):
        """Initialize the chain.

        Args:
            llm: Optional chat model. Creates one from settings if not provided.
        """
        self.llm = llm or get_llm()

    @staticmethod
    def _build_messages(prompt: str) -> list[HumanMessage]:
        return [HumanMessage(content=prompt)]

    @staticmethod
    def _extract_text(response) -> str:
        content = getattr(response, "content", None)
        if content is None:
            return ""
        if not isinstance(content, str):
            raise MalformedCompletionError(
                f"Expected text completion, got {type(content).__name__}"
            )
        return content

    def generate(self, prompt: str) -> str:
        """Run one completion.

        Args:
            prompt: Prompt text, passed through unchanged.

        Returns:
            Completion text, or an empty string if the provider returned none.
        """
        response = self.llm.invoke(self._build_messages(prompt))
        return self._extract_text(response)

    async def agenerate(self, prompt: str) -> str:
        """Async version of generate."""
        response = await self.llm.ainvoke(self._build_messages(prompt))
        return self._extract_text(response)
