"""Streamlit page for configuring and generating an article structure."""

import streamlit as st

from src.config import settings
from src.form import ArticleFormController, ArticlePayload
from src.form.models import MAX_SOURCES, MIN_SOURCES, ArticleLength, ArticleType, Language, Tone
from src.ui.api_client import APIClient
from src.ui.state import GENERATION_FAILED_MESSAGE, GenerationState, run_structure_generation
from src.ui.utils import (
    ARTICLE_TYPE_LABELS,
    INSUFFICIENT_WORDS_MESSAGE,
    LANGUAGE_LABELS,
    LENGTH_LABELS,
    SOURCES_TOOLTIP,
    TONE_LABELS,
    WEB_SEARCH_TOOLTIP,
    build_structure_prompt,
    format_missing_fields,
    format_option,
    format_words_summary,
)

st.set_page_config(
    page_title="Opprett artikkel",
    page_icon="🪄",
    layout="centered",
)

api_client = APIClient()


def submit_article(payload: ArticlePayload) -> None:
    """Submission callback: turn the payload into a prompt and call the API."""
    prompt = build_structure_prompt(payload)
    st.session_state.generation = GenerationState(prompt=prompt, is_generating=True)

    try:
        with st.spinner("Genererer artikkelstruktur..."):
            st.session_state.generation = run_structure_generation(api_client, prompt)
    finally:
        # Never leave the submit button locked after an unexpected error
        if st.session_state.generation.is_generating:
            st.session_state.generation = GenerationState(
                prompt=prompt, error_message=GENERATION_FAILED_MESSAGE
            )


def current_user_identity() -> str:
    """User identity from the ?user= query parameter, falling back to MY_EMAIL."""
    return st.query_params.get("user") or settings.my_email or ""


def init_session_state() -> ArticleFormController:
    """Create the controller once per session; track identity changes."""
    user_identity = current_user_identity()

    if "form_controller" not in st.session_state:
        st.session_state.form_controller = ArticleFormController(
            on_submit=submit_article,
            words_remaining=settings.words_remaining,
            total_words=settings.total_words,
            user_identity=user_identity,
        )
    else:
        st.session_state.form_controller.set_user_identity(user_identity)

    if "generation" not in st.session_state:
        st.session_state.generation = GenerationState()

    controller = st.session_state.form_controller
    state = controller.state
    defaults = {
        "title": state.title,
        "article_type": state.article_type,
        "project": state.selected_project_id,
        "tone": state.tone,
        "length": state.length,
        "language": state.language,
        "keywords": state.keywords,
        "description": state.description,
        "include_sources": state.include_sources,
        "enable_web_search": state.enable_web_search,
        "number_of_sources": state.number_of_sources,
    }
    for key, value in defaults.items():
        if key not in st.session_state:
            st.session_state[key] = value

    return controller


def _bind(handler, key: str):
    """Widget callback forwarding the widget value to a controller handler."""

    def callback():
        handler(st.session_state[key])

    return callback


def _on_include_sources_change():
    controller: ArticleFormController = st.session_state.form_controller
    controller.set_include_sources(st.session_state.include_sources)
    # Coupled fields are written back so the widgets show the normalized state
    st.session_state.enable_web_search = controller.state.enable_web_search
    st.session_state.number_of_sources = controller.state.number_of_sources


def render_fields(controller: ArticleFormController) -> None:
    """Render the main form fields."""
    st.text_input(
        "Tittel",
        key="title",
        placeholder="Skriv inn artikkeltittel",
        on_change=_bind(controller.set_title, "title"),
    )

    st.selectbox(
        "Artikkel type",
        options=[None, *ArticleType],
        key="article_type",
        format_func=lambda v: format_option(ARTICLE_TYPE_LABELS, v, "Velg artikkel type"),
        on_change=_bind(controller.set_article_type, "article_type"),
    )

    folder_names = {str(folder.id): folder.name for folder in controller.folders}
    if st.session_state.project not in folder_names:
        controller.set_project(None)
    if st.session_state.project != controller.state.selected_project_id:
        st.session_state.project = controller.state.selected_project_id
    st.selectbox(
        "Prosjekt",
        options=[None, *folder_names],
        key="project",
        format_func=lambda v: format_option(folder_names, v, "Velg prosjekt (valgfritt)"),
        on_change=_bind(controller.set_project, "project"),
    )

    st.selectbox(
        "Tone",
        options=[None, *Tone],
        key="tone",
        format_func=lambda v: format_option(TONE_LABELS, v, "Velg tone"),
        on_change=_bind(controller.set_tone, "tone"),
    )

    st.selectbox(
        "Artikkel lengde",
        options=[None, *ArticleLength],
        key="length",
        format_func=lambda v: format_option(LENGTH_LABELS, v, "Velg artikkel lengde"),
        on_change=_bind(controller.set_length, "length"),
    )

    st.selectbox(
        "Språk",
        options=list(Language),
        key="language",
        format_func=lambda v: format_option(LANGUAGE_LABELS, v, "Velg språk"),
        on_change=_bind(controller.set_language, "language"),
    )

    st.text_input(
        "Nøkkelord",
        key="keywords",
        placeholder="Skriv inn nøkkelord (kommaseparert)",
        on_change=_bind(controller.set_keywords, "keywords"),
    )

    st.text_area(
        "Artikkelbeskrivelse",
        key="description",
        placeholder="Beskriv hva artikkelen vil handle om",
        height=120,
        on_change=_bind(controller.set_description, "description"),
    )


def render_extra_options(controller: ArticleFormController) -> None:
    """Render the extra option toggles."""
    st.subheader("Ekstra alternativer")

    col1, col2 = st.columns([3, 1])
    with col1:
        st.toggle(
            "Inkluder kilder",
            key="include_sources",
            help=SOURCES_TOOLTIP,
            on_change=_on_include_sources_change,
        )
    with col2:
        if controller.state.include_sources:
            if "number_of_sources" not in st.session_state:
                st.session_state.number_of_sources = controller.state.number_of_sources
            st.number_input(
                "Antall kilder:",
                min_value=MIN_SOURCES,
                max_value=MAX_SOURCES,
                step=1,
                key="number_of_sources",
                on_change=_bind(controller.set_number_of_sources, "number_of_sources"),
            )

    st.toggle(
        "Aktiver websøk",
        key="enable_web_search",
        help=WEB_SEARCH_TOOLTIP,
        disabled=controller.web_search_locked,
        on_change=_bind(controller.set_enable_web_search, "enable_web_search"),
    )


def render_submit(controller: ArticleFormController) -> None:
    """Render the quota line, the submit button and the budget warning."""
    st.caption(format_words_summary(controller.words_remaining, controller.total_words))

    is_disabled = not controller.can_submit or st.session_state.generation.is_generating
    clicked = st.button(
        "🪄 Opprett Artikkel 🪄",
        type="primary",
        disabled=is_disabled,
        use_container_width=True,
    )

    if not controller.can_submit:
        st.error(INSUFFICIENT_WORDS_MESSAGE)

    if clicked:
        missing = controller.missing_required_fields
        if missing:
            st.warning(format_missing_fields(missing))
            return
        controller.submit()


def render_output_section() -> None:
    """Render the generated structure or the last error."""
    generation: GenerationState = st.session_state.generation

    if generation.error_message:
        st.error(f"❌ {generation.error_message}")
        return

    if generation.outline is None:
        return

    st.header("📄 Artikkelstruktur")
    st.markdown(generation.outline)
    st.download_button(
        label="📥 Last ned som markdown",
        data=generation.outline,
        file_name="article_structure.md",
        mime="text/markdown",
    )


def main():
    """Main application entry point."""
    controller = init_session_state()

    st.title("🪄 Opprett artikkel")

    render_fields(controller)
    render_extra_options(controller)
    render_submit(controller)

    st.divider()
    render_output_section()


if __name__ == "__main__":
    main()
