"""Local heuristic scoring."""

from .scorer import ContentSignals, HeuristicScorer, ScorerConfig, score_content

__all__ = ["ContentSignals", "HeuristicScorer", "ScorerConfig", "score_content"]
