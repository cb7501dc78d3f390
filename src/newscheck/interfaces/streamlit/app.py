"""Main Streamlit application entry point."""

import asyncio
import logging

import streamlit as st

from ...application.analyzer import AnalysisService, create_analysis_service
from ...config.logging import configure_logging
from ...config.settings import get_settings
from ...domain.models import AnalysisResult
from ...utils.sanitization import looks_like_url, sanitize_input
from .components import VERDICT_HELP, display_result

logger = logging.getLogger(__name__)


def _initialize_session_state() -> None:
    """Initialize Streamlit session state variables."""
    if "result" not in st.session_state:
        st.session_state.result = None


@st.cache_resource
def _get_analysis_service() -> AnalysisService:
    """Get cached analysis service instance."""
    configure_logging(get_settings().log_level)
    return create_analysis_service()


def _render_header() -> None:
    st.title("🔍 AI-Powered Fact Verification")
    st.markdown(
        "Paste a piece of text or a URL to check it for signs of misinformation."
    )
    st.info(
        "ℹ️ Using pattern analysis with AI enhancement. Results may use local "
        "algorithms when the cloud AI is unavailable."
    )


def _render_info_section() -> None:
    with st.expander("ℹ️ Understanding the verdicts"):
        st.markdown(
            "\n".join(
                f"- **{verdict.value}**: {description}"
                for verdict, description in VERDICT_HELP.items()
            )
        )


def _run_analysis(service: AnalysisService, content: str, as_url: bool) -> AnalysisResult:
    if as_url:
        return asyncio.run(service.analyze_url(content))
    return asyncio.run(service.analyze_content(content))


def _handle_submit(service: AnalysisService, raw: str, as_url: bool) -> None:
    content = sanitize_input(raw)
    if not content:
        st.error("Please enter content to analyze")
        return
    if as_url and not looks_like_url(content):
        st.error("Please enter a valid http(s) URL")
        return

    with st.spinner("Analyzing..."):
        st.session_state.result = _run_analysis(service, content, as_url)

    if st.session_state.result.is_heuristic:
        st.toast("Analysis completed using local algorithms")
    else:
        st.toast("Analysis completed successfully!")


def _get_custom_css() -> str:
    """Get custom CSS for the verdict badge."""
    return """
<style>
    .verdict {
        font-weight: bold;
        font-size: 1.4rem;
        text-align: center;
        padding: 0.5rem;
        border-radius: 5px;
        margin: 0.5rem 0;
    }
    .verdict.true { background-color: #28a745; color: white; }
    .verdict.false { background-color: #dc3545; color: white; }
    .verdict.mixed { background-color: #ffc107; color: black; }
    .verdict.unverified { background-color: #6c757d; color: white; }
</style>
"""


def create_app() -> None:
    """Create and run the Streamlit application."""
    st.set_page_config(
        page_title="NewsCheck",
        page_icon="🔍",
        layout="wide",
        initial_sidebar_state="collapsed",
    )
    st.markdown(_get_custom_css(), unsafe_allow_html=True)

    _initialize_session_state()
    service = _get_analysis_service()

    _render_header()
    _render_info_section()

    text_tab, url_tab = st.tabs(["Text Analysis", "URL Analysis"])
    with text_tab:
        text = st.text_area(
            "Enter text to analyze",
            placeholder="Paste the content you want to fact-check here...",
            height=180,
        )
        if st.button("Analyze text", type="primary"):
            _handle_submit(service, text, as_url=False)
    with url_tab:
        url = st.text_input("Enter URL to analyze", placeholder="https://example.com/article")
        if st.button("Analyze URL", type="primary"):
            _handle_submit(service, url, as_url=True)

    if st.session_state.result is not None:
        st.divider()
        display_result(st.session_state.result)


if __name__ == "__main__":
    create_app()
