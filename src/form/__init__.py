"""Article configuration form: state, transitions and controller."""

from src.form.controller import ArticleFormController, SubmitNotAllowedError
from src.form.models import (
    ArticleLength,
    ArticlePayload,
    ArticleType,
    FormState,
    Language,
    ProjectFolder,
    Tone,
)
from src.form.transitions import can_submit, estimated_word_count

__all__ = [
    "ArticleFormController",
    "ArticleLength",
    "ArticlePayload",
    "ArticleType",
    "FormState",
    "Language",
    "ProjectFolder",
    "SubmitNotAllowedError",
    "Tone",
    "can_submit",
    "estimated_word_count",
]
