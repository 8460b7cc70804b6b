"""
Reusable UI components for the Streamlit app.
"""

import streamlit as st
from typing import Any, Callable, Dict, List, Optional

from app.models.schemas import AnalysisResult, ParseFailure
from app.utils.helpers import embed_url, estimate_read_minutes, truncate_text
from app.frontend.i18n import translate, other_language


DARK_THEME_CSS = """
<style>
    .stApp, [data-testid="stSidebar"], [data-testid="stHeader"] {
        background-color: #111827;
        color: #e5e7eb;
    }
    .stApp h1, .stApp h2, .stApp h3, .stApp p, .stApp li, .stApp label, .stApp span {
        color: #e5e7eb;
    }
    .stTextInput input {
        background-color: #1f2937;
        color: #e5e7eb;
    }
</style>
"""


def t(key: str, **kwargs) -> str:
    """Translate a key into the language selected in the session."""
    return translate(key, st.session_state.get("language", "id"), **kwargs)


def apply_theme(theme: str):
    """Inject the CSS for the selected theme."""
    if theme == "dark":
        st.markdown(DARK_THEME_CSS, unsafe_allow_html=True)


def header(on_toggle_language: Callable, on_toggle_theme: Callable):
    """
    Display the application header with the language and theme toggles.

    Args:
        on_toggle_language: Called when the language button is pressed
        on_toggle_theme: Called when the theme button is pressed
    """
    col1, col2, col3 = st.columns([6, 1, 1])
    with col1:
        st.title(f"🎬 {t('app.title')}")
        st.markdown(t("app.description"))
    with col2:
        language = st.session_state.get("language", "id")
        st.button(
            f"🌐 {t('language.' + other_language(language))}",
            key="language_toggle",
            on_click=on_toggle_language,
        )
    with col3:
        theme = st.session_state.get("theme", "light")
        label = t("theme.light") if theme == "dark" else t("theme.dark")
        st.button(label, key="theme_toggle", on_click=on_toggle_theme)
    st.divider()


def sidebar(saved_analyses: Optional[List[Dict[str, Any]]] = None):
    """Display the sidebar with settings and recently saved analyses."""
    with st.sidebar:
        st.markdown("## Settings")
        st.text_input("API URL", key="api_url")

        if saved_analyses:
            st.markdown("## Saved")
            for saved in saved_analyses:
                with st.expander(f"#{saved['id']} · {saved['createdAt'][:19]}"):
                    st.text(truncate_text(saved["result"], 400))


def youtube_input(disabled: bool = False) -> Optional[str]:
    """
    Display the YouTube URL form.

    Args:
        disabled: Disable the input and button while a request is running

    Returns:
        The submitted URL (possibly empty) or None when nothing was submitted
    """
    with st.form(key="youtube_form"):
        url = st.text_input(
            t("app.input.label"),
            placeholder=t("app.input.placeholder"),
            disabled=disabled,
        )
        label = t("app.button.analyzing") if disabled else t("app.button.analyze")
        submit = st.form_submit_button(label, disabled=disabled)

    if submit:
        return url
    return None


def loading_spinner(message: str = None):
    """
    Display a loading spinner with a message.

    Args:
        message: Message to display with the spinner
    """
    return st.spinner(message or t("app.loading"))


def display_error(message: str):
    """
    Display an error message.

    Args:
        message: Error message to display
    """
    st.error(message)


def youtube_embed(video_id: str):
    """
    Embed a YouTube video.

    Args:
        video_id: YouTube video ID
    """
    st.markdown(f"""
    <iframe width="100%" height="420" src="{embed_url(video_id)}"
    title="YouTube video player" frameborder="0" allow="accelerometer; autoplay; clipboard-write;
    encrypted-media; gyroscope; picture-in-picture" allowfullscreen></iframe>
    """, unsafe_allow_html=True)


def display_analysis(result: AnalysisResult):
    """
    Display a parsed analysis.

    Args:
        result: Structured analysis to render
    """
    st.markdown(f"## {t('analysis.title')}")

    st.markdown(f"### {t('analysis.topic.title')}")
    st.markdown(result.topic)

    st.markdown(f"### {t('analysis.keyPoints.title')}")
    for i, point in enumerate(result.key_points, start=1):
        st.markdown(f"{i}. {point}")

    st.markdown(f"### {t('analysis.summary.title')}")
    st.markdown(result.summary)


def display_parse_failure(failure: ParseFailure):
    """
    Display why a response could not be parsed, together with the raw text.

    Args:
        failure: Parser failure to show
    """
    st.warning(f"**{t('analysis.error.title')}**")
    st.markdown(t("analysis.error.description"))
    if failure.raw:
        with st.container(border=True):
            st.markdown(failure.raw)
    st.code(failure.raw or t("analysis.noData"), language="markdown")
    st.markdown(f"**{t('analysis.error.details')}** {failure.error}")


def display_raw(raw: str):
    """Show the raw response with its reading time in a copyable block."""
    with st.expander(f"{t('analysis.raw.title')} · {t('app.readTime', minutes=estimate_read_minutes(raw))}"):
        st.code(raw, language="json")


def save_button(status: str, on_save: Callable):
    """
    Display the save button for the current analysis.

    Args:
        status: One of idle, saving, success, error
        on_save: Called when the button is pressed
    """
    labels = {
        "idle": t("analysis.button.save"),
        "saving": t("analysis.button.saving"),
        "success": t("analysis.button.saved"),
        "error": t("analysis.button.error"),
    }
    st.button(
        labels.get(status, labels["idle"]),
        key="save_button",
        disabled=status in ("saving", "success"),
        on_click=on_save,
        type="primary" if status != "error" else "secondary",
    )
