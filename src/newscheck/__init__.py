"""NewsCheck - credibility analysis with a heuristic fallback."""

from .application.analyzer import AnalysisService, create_analysis_service
from .domain.models import AnalysisMethod, AnalysisResult, DetailedAnalysis, Verdict
from .heuristics.scorer import HeuristicScorer, ScorerConfig, score_content

__version__ = "0.1.0"

__all__ = [
    "AnalysisMethod",
    "AnalysisResult",
    "AnalysisService",
    "DetailedAnalysis",
    "HeuristicScorer",
    "ScorerConfig",
    "Verdict",
    "create_analysis_service",
    "score_content",
]
