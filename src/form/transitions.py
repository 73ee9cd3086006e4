"""Pure state transitions for the article configuration form.

Every function takes the current ``FormState`` and returns a new one; nothing
here touches I/O or UI state, so the coupling and clamping rules can be
tested without a running page.
"""

import re
from typing import Any

from src.form.models import (
    MAX_SOURCES,
    MIN_SOURCES,
    ArticleLength,
    ArticlePayload,
    FormState,
)

DEFAULT_WORD_COUNT = 1000

WORD_COUNTS = {
    ArticleLength.SHORT: 500,
    ArticleLength.MEDIUM: 1000,
    ArticleLength.LONG: 1500,
}

# Fields the page must see filled before it calls submit
REQUIRED_FIELDS = (
    "title",
    "article_type",
    "tone",
    "length",
    "language",
    "keywords",
    "description",
)

_LEADING_INT = re.compile(r"^\s*([+-]?\d+)")


def estimated_word_count(length: ArticleLength | str | None) -> int:
    """Estimate the number of words an article of the given length consumes.

    >>> estimated_word_count("long")
    1500
    >>> estimated_word_count(None)
    1000
    """
    return WORD_COUNTS.get(length, DEFAULT_WORD_COUNT)


def can_submit(length: ArticleLength | str | None, words_remaining: int) -> bool:
    """Whether the word quota allows submitting an article of this length."""
    return estimated_word_count(length) <= words_remaining


def normalize(state: FormState) -> FormState:
    """Enforce the source/search coupling.

    Including sources requires web search, so ``enable_web_search`` is forced
    on for as long as ``include_sources`` is on.
    """
    if state.include_sources and not state.enable_web_search:
        return state.model_copy(update={"enable_web_search": True})
    return state


def apply_change(state: FormState, **changes: Any) -> FormState:
    """Assign fields and re-validate, then normalize.

    Raises:
        pydantic.ValidationError: If a value is outside its field's domain
            (e.g. an unknown tone).
    """
    data = state.model_dump()
    data.update(changes)
    return normalize(FormState.model_validate(data))


def set_include_sources(state: FormState, checked: bool) -> FormState:
    """Toggle source citations.

    Turning sources off resets the source count but leaves web search as it
    was.
    """
    if checked:
        return apply_change(state, include_sources=True)
    return apply_change(state, include_sources=False, number_of_sources=MIN_SOURCES)


def web_search_locked(state: FormState) -> bool:
    """Web search cannot be toggled by the user while sources are included."""
    return state.include_sources


def set_enable_web_search(state: FormState, enabled: bool) -> FormState:
    if web_search_locked(state):
        return state
    return apply_change(state, enable_web_search=enabled)


def parse_number_of_sources(raw: Any) -> int | None:
    """Parse a source count the way a numeric input does.

    Returns None for input without a leading integer or outside the allowed
    range.

    >>> parse_number_of_sources("3")
    3
    >>> parse_number_of_sources("6") is None
    True
    """
    if isinstance(raw, bool):
        return None
    if isinstance(raw, int):
        value = raw
    else:
        match = _LEADING_INT.match(str(raw))
        if match is None:
            return None
        value = int(match.group(1))

    if MIN_SOURCES <= value <= MAX_SOURCES:
        return value
    return None


def set_number_of_sources(state: FormState, raw: Any) -> FormState:
    """Set the source count, ignoring invalid or out-of-range input."""
    value = parse_number_of_sources(raw)
    if value is None:
        return state
    return apply_change(state, number_of_sources=value)


def missing_required_fields(state: FormState) -> list[str]:
    """List required fields that are still empty, in form order."""
    missing = []
    for name in REQUIRED_FIELDS:
        value = getattr(state, name)
        if value is None or (isinstance(value, str) and not value.strip()):
            missing.append(name)
    return missing


def build_payload(state: FormState) -> ArticlePayload:
    """Package the current state into a submission payload."""
    return ArticlePayload(
        title=state.title,
        article_type=state.article_type,
        project_id=state.selected_project_id,
        keywords=state.keywords,
        description=state.description,
        tone=state.tone,
        length=state.length,
        language=state.language,
        include_images=state.include_images,
        include_videos=state.include_videos,
        include_sources=state.include_sources,
        enable_web_search=state.enable_web_search,
        number_of_sources=state.number_of_sources,
    )
