"""Tests for the structure generator chain."""

import asyncio
from types import SimpleNamespace
from unittest.mock import AsyncMock, MagicMock

import pytest
from langchain_core.language_models.fake_chat_models import FakeListChatModel
from langchain_core.messages import AIMessage, HumanMessage

from src.chains import MalformedCompletionError, StructureGeneratorChain


class TestStructureGeneratorChain:
    """Test StructureGeneratorChain with fake chat models."""

    def test_generate_returns_completion_text(self):
        """The completion text is returned unchanged."""
        chain = StructureGeneratorChain(llm=FakeListChatModel(responses=["# Outline"]))

        assert chain.generate("hello") == "# Outline"

    def test_agenerate_returns_completion_text(self):
        """The async path returns the same text."""
        chain = StructureGeneratorChain(llm=FakeListChatModel(responses=["world"]))

        assert asyncio.run(chain.agenerate("hello")) == "world"

    def test_prompt_is_sole_user_message(self):
        """The prompt is sent as the only human message, exactly once."""
        llm = MagicMock()
        llm.ainvoke = AsyncMock(return_value=AIMessage(content="ok"))
        chain = StructureGeneratorChain(llm=llm)

        asyncio.run(chain.agenerate("Skriv om fjorder"))

        llm.ainvoke.assert_awaited_once_with([HumanMessage(content="Skriv om fjorder")])

    def test_missing_content_becomes_empty_string(self):
        """A response without content yields an empty string."""
        llm = MagicMock()
        llm.invoke.return_value = SimpleNamespace(content=None)

        assert StructureGeneratorChain(llm=llm).generate("hello") == ""

    def test_non_text_content_is_malformed(self):
        """Non-string content is reported as a malformed completion."""
        llm = MagicMock()
        llm.invoke.return_value = SimpleNamespace(content=[{"type": "image"}])

        with pytest.raises(MalformedCompletionError):
            StructureGeneratorChain(llm=llm).generate("hello")
