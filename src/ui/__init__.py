"""UI module for Streamlit web interface."""

from src.ui.api_client import APIClient
from src.ui.state import GenerationState
from src.ui.utils import (
    build_structure_prompt,
    format_missing_fields,
    format_option,
    format_words_summary,
)

__all__ = [
    "APIClient",
    "GenerationState",
    "build_structure_prompt",
    "format_missing_fields",
    "format_option",
    "format_words_summary",
]
