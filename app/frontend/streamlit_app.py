"""
Main Streamlit application for Video Summary AI.
"""

import streamlit as st
from typing import Any, Dict
from dotenv import load_dotenv
import os

from app.frontend.api_client import ApiClient
from app.frontend.i18n import DEFAULT_LANGUAGE, other_language
from app.frontend.components import (
    t, apply_theme, header, sidebar, youtube_input, loading_spinner,
    display_error, youtube_embed, display_analysis, display_parse_failure,
    display_raw, save_button,
)
from app.core.response_parser import parse_analysis
from app.models.schemas import AnalysisResult
from app.utils.logger import logging


load_dotenv()

EMPTY_ANALYSIS = {"is_loading": False, "error": None, "result": None, "video_id": None, "pending_url": None}


def init_session_state():
    """Initialize session state variables."""
    if "api_url" not in st.session_state:
        st.session_state.api_url = os.getenv("API_URL", "http://localhost:8000")

    if "language" not in st.session_state:
        st.session_state.language = DEFAULT_LANGUAGE

    if "theme" not in st.session_state:
        st.session_state.theme = "light"

    if "analysis" not in st.session_state:
        st.session_state.analysis = dict(EMPTY_ANALYSIS)

    if "save_status" not in st.session_state:
        st.session_state.save_status = "idle"


def get_client() -> ApiClient:
    return ApiClient(st.session_state.api_url)


def toggle_language():
    st.session_state.language = other_language(st.session_state.language)


def toggle_theme():
    st.session_state.theme = "light" if st.session_state.theme == "dark" else "dark"


def reset_analysis():
    st.session_state.analysis = dict(EMPTY_ANALYSIS)
    st.session_state.save_status = "idle"


def submit_url(url: str):
    """Validate the URL locally and queue it for analysis."""
    analysis = st.session_state.analysis
    if not url or not url.strip():
        analysis["error"] = t("app.error.url")
        return

    analysis.update(is_loading=True, error=None, pending_url=url.strip())


def run_pending_analysis():
    """
    Call the API for the queued URL.

    The loading flag is always cleared, whatever the outcome.
    """
    analysis = st.session_state.analysis
    url = analysis["pending_url"]

    try:
        with loading_spinner():
            response = get_client().analyze_video(url)

        if "error" in response:
            analysis["error"] = response["error"]
        else:
            analysis["result"] = response["analysis"]
            analysis["video_id"] = response.get("video_id") or get_client().extract_video_id(url)
            st.session_state.save_status = "idle"
    except Exception as e:
        logging.error(f"Error analyzing video: {str(e)}")
        analysis["error"] = t("app.error.analysis")
    finally:
        analysis["is_loading"] = False
        analysis["pending_url"] = None


def request_save():
    st.session_state.save_status = "saving"


def run_pending_save(result: Any):
    """Send the current result to the API and record the outcome."""
    try:
        response = get_client().save_analysis(result)
        st.session_state.save_status = "success" if response.get("success") else "error"
        if not response.get("success"):
            logging.error(f"Error saving analysis: {response.get('error')}")
    except Exception as e:
        logging.error(f"Error saving analysis: {str(e)}")
        st.session_state.save_status = "error"


def load_saved_analyses():
    try:
        return get_client().list_analyses(limit=10)
    except Exception as e:
        logging.warning(f"Could not load saved analyses: {str(e)}")
        return []


def result_view(analysis: Dict[str, Any]):
    """Display the analysis of the current video."""
    raw = analysis["result"]
    outcome = parse_analysis(raw)

    if analysis["video_id"]:
        youtube_embed(analysis["video_id"])

    if isinstance(outcome, AnalysisResult):
        display_analysis(outcome)
        to_save = outcome.to_dict()
    else:
        display_parse_failure(outcome)
        to_save = raw

    display_raw(raw)

    if st.session_state.save_status == "saving":
        run_pending_save(to_save)

    col1, col2 = st.columns([1, 1])
    with col1:
        save_button(st.session_state.save_status, request_save)
    with col2:
        st.button(t("app.button.reset"), key="reset_button", on_click=reset_analysis)


def main():
    """Main application entry point."""
    # Initialize session state
    init_session_state()
    st.set_page_config(
        page_title=t("app.title"),
        page_icon="🎬",
        layout="centered",
    )
    apply_theme(st.session_state.theme)

    header(toggle_language, toggle_theme)
    sidebar(load_saved_analyses())

    analysis = st.session_state.analysis

    if not analysis["result"]:
        url = youtube_input(disabled=analysis["is_loading"])
        if url is not None:
            submit_url(url)
            if analysis["is_loading"]:
                st.rerun()

    if analysis["is_loading"] and analysis["pending_url"]:
        run_pending_analysis()
        st.rerun()

    if analysis["error"]:
        display_error(analysis["error"])

    if analysis["result"]:
        result_view(analysis)


if __name__ == "__main__":
    main()
