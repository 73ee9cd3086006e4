"""LLM factory for the article structure endpoint."""

from langchain_openai import ChatOpenAI

from src.config import settings


def get_llm(temperature: float | None = None) -> ChatOpenAI:
    """Get the chat model used for completions.

    The model name is fixed by configuration (``LLM_MODEL``) and the API key
    is read from ``OPENAI_API_KEY`` or Secret Manager.

    Args:
        temperature: Override default temperature. If None, uses
            settings.llm_temperature (which may itself be None, leaving the
            provider default in place).

    Returns:
        ChatOpenAI instance.
    """
    temp = temperature if temperature is not None else settings.llm_temperature

    kwargs = {}
    if temp is not None:
        kwargs["temperature"] = temp

    return ChatOpenAI(
        model=settings.llm_model,
        api_key=settings.openai_api_key or None,
        **kwargs,
    )
