"""Formatting utilities for Streamlit display."""

import html
from typing import List, Tuple

from ...domain.models import AnalysisResult, Verdict

VERDICT_CSS_CLASSES = {
    Verdict.TRUE: "true",
    Verdict.FALSE: "false",
    Verdict.MIXED: "mixed",
    Verdict.UNVERIFIED: "unverified",
}

DETAIL_LABELS = (
    ("factual_accuracy", "Factual Accuracy"),
    ("source_credibility", "Source Credibility"),
    ("emotional_manipulation", "Emotional Manipulation"),
    ("logical_consistency", "Logical Consistency"),
    ("bias_level", "Bias Level"),
)


def detail_rows(result: AnalysisResult) -> List[Tuple[str, int]]:
    """Return (label, score) pairs for the detailed analysis."""
    detail = result.detailed_analysis
    return [(label, getattr(detail, field)) for field, label in DETAIL_LABELS]


def verdict_badge_html(verdict: Verdict) -> str:
    css_class = VERDICT_CSS_CLASSES.get(verdict, "unverified")
    return f'<div class="verdict {css_class}">{html.escape(verdict.value)}</div>'


def provenance_note(result: AnalysisResult) -> str:
    """Describe which engine produced the result."""
    if result.is_heuristic:
        return "AI service unavailable, used pattern-based analysis."
    return "Analyzed by the remote AI model."


def format_analysis_markdown(result: AnalysisResult) -> str:
    """Format AnalysisResult into a markdown report.

    Args:
        result: AnalysisResult to format.

    Returns:
        Markdown string with every list and score escaped for display.
    """
    warnings_md = (
        "\n".join(f"- {html.escape(w)}" for w in result.warnings)
        if result.warnings
        else "No warnings."
    )
    sources_md = (
        "\n".join(f"- {html.escape(s)}" for s in result.sources)
        if result.sources
        else "No sources provided."
    )
    details_md = "\n".join(f"- {label}: {score}%" for label, score in detail_rows(result))
    categories = ", ".join(html.escape(c) for c in result.categories) or "none"

    return f"""**Verdict:** {result.verdict.value} ({result.confidence}% confidence)

### Reasoning
{html.escape(result.reasoning)}

### Warnings
{warnings_md}

### Detailed Analysis
{details_md}

### Recommended Sources
{sources_md}

_Categories: {categories}. {provenance_note(result)}_
"""
