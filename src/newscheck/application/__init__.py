"""Application layer - analysis orchestration."""

from .analyzer import AnalysisService, create_analysis_service

__all__ = ["AnalysisService", "create_analysis_service"]
