"""LLM infrastructure implementations."""

from .client import RemoteAnalysisClient, RemoteResponse
from .parser import (
    AnalysisResponseParser,
    ParseOutcome,
    analysis_prompt,
    is_valid_analysis,
)

__all__ = [
    "AnalysisResponseParser",
    "ParseOutcome",
    "RemoteAnalysisClient",
    "RemoteResponse",
    "analysis_prompt",
    "is_valid_analysis",
]
