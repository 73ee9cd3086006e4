"""Utility functions for the Streamlit UI."""

from src.form.models import ArticleLength, ArticlePayload, ArticleType, Language, Tone
from src.form.transitions import estimated_word_count

ARTICLE_TYPE_LABELS = {
    ArticleType.SEO: "SEO - Artikkel",
    ArticleType.STUDENT: "Studentoppgave",
    ArticleType.STANDARD: "Standard artikkel",
    ArticleType.LIST: "Liste (F.eks top 5 reisemål)",
}

TONE_LABELS = {
    Tone.FORMAL: "Formell",
    Tone.CASUAL: "Uformell",
    Tone.HUMOROUS: "Humoristisk",
    Tone.SERIOUS: "Seriøs",
    Tone.OPTIMISTIC: "Optimistisk",
}

LENGTH_LABELS = {
    ArticleLength.SHORT: "Kort (~500 ord)",
    ArticleLength.MEDIUM: "Middels (~1000 ord)",
    ArticleLength.LONG: "Lang (~1500 ord)",
}

LANGUAGE_LABELS = {
    Language.NORWEGIAN: "Norsk",
    Language.SWEDISH: "Svensk",
    Language.DANISH: "Dansk",
}

FIELD_LABELS = {
    "title": "Tittel",
    "article_type": "Artikkel type",
    "tone": "Tone",
    "length": "Artikkel lengde",
    "language": "Språk",
    "keywords": "Nøkkelord",
    "description": "Artikkelbeskrivelse",
}

INSUFFICIENT_WORDS_MESSAGE = (
    "Ikke nok ord igjen. Vennligst oppgrader pakken din eller kjøp flere ord."
)

SOURCES_TOOLTIP = (
    "Legg til kildehenvisninger for å støtte påstander og gi kredibilitet til artikkelen."
)
WEB_SEARCH_TOOLTIP = (
    "Tillat AI-en å søke på nettet for oppdatert og relevant informasjon til artikkelen."
)


def format_option(labels: dict, value, placeholder: str) -> str:
    """Display label for a select option; None shows the placeholder."""
    if value is None:
        return placeholder
    return labels.get(value, str(value))


def format_words_summary(words_remaining: int, total_words: int) -> str:
    """Quota line shown under the options.

    >>> format_words_summary(800, 1000)
    'Gjenværende ord: 800 / Totalt: 1000'
    """
    return f"Gjenværende ord: {words_remaining} / Totalt: {total_words}"


def format_missing_fields(fields: list[str]) -> str:
    """Warning listing required fields that are still empty."""
    labels = ", ".join(FIELD_LABELS.get(name, name) for name in fields)
    return f"Fyll ut påkrevde felt: {labels}"


STRUCTURE_PROMPT = """You are an experienced content writer. Create a detailed structure for an article.

## Article
- Title: {title}
- Article type: {article_type}
- Keywords: {keywords}
- Description: {description}
- Tone: {tone}
- Length: about {word_count} words
- Language: {language}

## Extras
{extras}

## Output
Write the whole structure in {language}. Return markdown with an H1 title,
H2 section headings and 2-4 bullet points per section describing what the
section covers. Do not write the article itself."""


def build_structure_prompt(payload: ArticlePayload) -> str:
    """Build the article structure prompt from a form submission.

    Args:
        payload: Submitted form payload.

    Returns:
        Prompt text for the /generate-article-structure endpoint.
    """
    extras = []
    if payload.include_sources:
        extras.append(
            f"- Cite {payload.number_of_sources} credible source(s) and mark where "
            "each citation belongs."
        )
    if payload.enable_web_search:
        extras.append("- Base the structure on current information from the web.")
    if payload.include_images:
        extras.append("- Suggest where images should be placed.")
    if payload.include_videos:
        extras.append("- Suggest where embedded videos would help.")
    if not extras:
        extras.append("- None")

    return STRUCTURE_PROMPT.format(
        title=payload.title,
        article_type=payload.article_type or "standard",
        keywords=payload.keywords,
        description=payload.description,
        tone=payload.tone or "neutral",
        word_count=estimated_word_count(payload.length),
        language=payload.language,
        extras="\n".join(extras),
    )
