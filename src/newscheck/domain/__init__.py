"""Domain layer - Core business entities and models."""

from .credibility import (
    CredibilityClass,
    DomainCredibility,
    check_domain,
    extract_hostname,
)
from .models import AnalysisMethod, AnalysisResult, DetailedAnalysis, Verdict

__all__ = [
    "AnalysisMethod",
    "AnalysisResult",
    "CredibilityClass",
    "DetailedAnalysis",
    "DomainCredibility",
    "Verdict",
    "check_domain",
    "extract_hostname",
]
