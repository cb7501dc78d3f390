"""Reusable Streamlit UI components."""

from typing import Any

import streamlit as st

from ...domain.models import AnalysisResult, Verdict
from ...utils.sanitization import sanitize_html
from .formatters import (
    detail_rows,
    format_analysis_markdown,
    provenance_note,
    verdict_badge_html,
)


def display_verdict(result: AnalysisResult, column: Any) -> None:
    """Display verdict badge and confidence.

    Args:
        result: Analysis to summarize.
        column: Streamlit column/container to display in.
    """
    column.markdown(verdict_badge_html(result.verdict), unsafe_allow_html=True)
    column.metric("Confidence", f"{result.confidence}%")
    column.progress(result.confidence / 100)
    if result.is_credible:
        column.success("Content appears credible")
    else:
        column.error("Content shows signs of misinformation")


def display_reasoning(reasoning: str, column: Any) -> None:
    """Display model reasoning with sanitized HTML."""
    column.markdown("### Reasoning")
    column.markdown(sanitize_html(reasoning), unsafe_allow_html=True)


def display_warnings(result: AnalysisResult, column: Any) -> None:
    if not result.warnings:
        return
    column.markdown("### Warnings")
    for warning in result.warnings:
        column.warning(warning)


def display_detailed_analysis(result: AnalysisResult, column: Any) -> None:
    """Display the five sub-scores as progress bars."""
    column.markdown("### Detailed Analysis")
    for label, score in detail_rows(result):
        column.progress(score / 100, text=f"{label}: {score}%")


def display_sources(result: AnalysisResult, column: Any) -> None:
    if result.sources:
        column.markdown("### Recommended Sources")
        for source in result.sources:
            column.markdown(f"- {source}")
    if result.categories:
        column.caption("Categories: " + ", ".join(result.categories))


def display_provenance(result: AnalysisResult) -> None:
    if result.is_heuristic:
        st.info(provenance_note(result))
    else:
        st.caption(provenance_note(result))


def display_result(result: AnalysisResult) -> None:
    """Render a complete analysis result."""
    display_provenance(result)
    left, right = st.columns([1, 2])
    display_verdict(result, left)
    display_detailed_analysis(result, left)
    display_reasoning(result.reasoning, right)
    display_warnings(result, right)
    display_sources(result, right)
    with st.expander("Copy report"):
        st.code(format_analysis_markdown(result), language="markdown")


VERDICT_HELP = {
    Verdict.TRUE: "Content is factually accurate with reliable sources",
    Verdict.FALSE: "Content contains significant misinformation or false claims",
    Verdict.MIXED: "Content has both accurate and inaccurate elements",
    Verdict.UNVERIFIED: "Cannot be definitively verified with available information",
}
