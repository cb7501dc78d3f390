"""Pattern-based content scorer used when the remote model is unavailable."""

import re
from typing import List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, model_validator

from ..domain.models import (
    AnalysisMethod,
    AnalysisResult,
    DetailedAnalysis,
    Verdict,
)


class ScorerConfig(BaseModel):
    """Every tunable constant of the heuristic scorer."""

    model_config = ConfigDict(frozen=True)

    emotional_phrases: Tuple[str, ...] = (
        "shocking",
        "amazing",
        "urgent",
        "breaking",
        "exclusive",
        "must read",
        "you won't believe",
        "doctors hate",
        "one weird trick",
    )
    clickbait_words: Tuple[str, ...] = ("click", "share", "subscribe", "like")

    emotional_weight: int = 25
    caps_weight: int = 20
    caps_run_length: int = 5
    exclamation_weight: int = 15
    exclamation_limit: int = 3
    clickbait_weight: int = 20

    credibility_threshold: int = 30
    confidence_floor: int = 30

    # Verdict cut points on the suspicion score, highest first.
    false_above: int = 60
    mixed_above: int = 40
    unverified_above: int = 20

    factual_accuracy_floor: int = 20
    source_credibility_base: int = 80
    source_credibility_floor: int = 30
    emotional_manipulation_offset: int = 30
    logical_consistency_base: int = 90
    logical_consistency_floor: int = 40
    bias_level_offset: int = 20
    bias_level_ceiling: int = 90

    sources: Tuple[str, ...] = (
        "Snopes.com",
        "FactCheck.org",
        "PolitiFact.com",
        "Reuters Fact Check",
    )
    categories: Tuple[str, ...] = ("general", "fact-check")

    @model_validator(mode="after")
    def _check_cut_points(self) -> "ScorerConfig":
        if not self.false_above > self.mixed_above > self.unverified_above >= 0:
            raise ValueError(
                "verdict cut points must satisfy false_above > mixed_above > unverified_above >= 0"
            )
        if self.caps_run_length < 1:
            raise ValueError("caps_run_length must be positive")
        return self


class ContentSignals(BaseModel):
    """Boolean signals detected in a piece of text."""

    model_config = ConfigDict(frozen=True)

    emotional_language: bool = False
    excessive_caps: bool = False
    excessive_exclamations: bool = False
    clickbait: bool = False


def _clamp(value: int, low: int = 0, high: int = 100) -> int:
    return max(low, min(high, value))


def _word_pattern(words: Tuple[str, ...]) -> Optional[re.Pattern[str]]:
    if not words:
        return None
    alternation = "|".join(re.escape(w) for w in words)
    return re.compile(rf"\b(?:{alternation})\b", re.IGNORECASE)


class HeuristicScorer:
    """Deterministic scorer mapping text to an AnalysisResult.

    The scorer tallies a suspicion score from four signals (emotional
    trigger phrases, a run of uppercase letters, excess exclamation marks
    and clickbait calls to action) and derives every output field from that
    score. It performs no I/O and has no hidden state, so the same text
    always yields the same result.

    Usage:
        ```python
        scorer = HeuristicScorer()
        result = scorer.score("SHOCKING news!!!! Click now")
        ```
    """

    def __init__(self, config: Optional[ScorerConfig] = None) -> None:
        self.config = config or ScorerConfig()
        self._emotional_re = _word_pattern(self.config.emotional_phrases)
        self._clickbait_re = _word_pattern(self.config.clickbait_words)
        self._caps_re = re.compile(rf"[A-Z]{{{self.config.caps_run_length},}}")

    def detect_signals(self, text: str) -> ContentSignals:
        """Detect the four suspicion signals in text."""
        text = text or ""
        return ContentSignals(
            emotional_language=bool(self._emotional_re and self._emotional_re.search(text)),
            excessive_caps=bool(self._caps_re.search(text)),
            excessive_exclamations=text.count("!") > self.config.exclamation_limit,
            clickbait=bool(self._clickbait_re and self._clickbait_re.search(text)),
        )

    def suspicion_score(self, signals: ContentSignals) -> int:
        """Weighted sum of the detected signals."""
        cfg = self.config
        score = 0
        if signals.emotional_language:
            score += cfg.emotional_weight
        if signals.excessive_caps:
            score += cfg.caps_weight
        if signals.excessive_exclamations:
            score += cfg.exclamation_weight
        if signals.clickbait:
            score += cfg.clickbait_weight
        return score

    def verdict_for(self, score: int) -> Verdict:
        """Map a suspicion score onto a verdict using the configured cut points."""
        cfg = self.config
        if score > cfg.false_above:
            return Verdict.FALSE
        if score > cfg.mixed_above:
            return Verdict.MIXED
        if score > cfg.unverified_above:
            return Verdict.UNVERIFIED
        return Verdict.TRUE

    def _reasoning(self, signals: ContentSignals, is_credible: bool) -> str:
        clauses = ["Analysis based on content characteristics."]
        if signals.emotional_language:
            clauses.append("Contains emotional manipulation language.")
        if signals.excessive_caps:
            clauses.append("Uses excessive capitalization.")
        if signals.excessive_exclamations:
            clauses.append("Uses an unusual number of exclamation marks.")
        if signals.clickbait:
            clauses.append("Shows clickbait patterns.")
        if is_credible:
            clauses.append("Content appears relatively neutral.")
        else:
            clauses.append(
                "Content shows multiple warning signs of potential misinformation."
            )
        return " ".join(clauses)

    def _warnings(self, signals: ContentSignals, score: int) -> List[str]:
        if score <= self.config.credibility_threshold:
            return []
        warnings = []
        if signals.emotional_language:
            warnings.append("Emotional manipulation detected")
        if signals.excessive_caps:
            warnings.append("Excessive capitalization used")
        if signals.excessive_exclamations:
            warnings.append("Excessive exclamation marks used")
        if signals.clickbait:
            warnings.append("Clickbait patterns identified")
        warnings.append("Verify claims with multiple reliable sources")
        return warnings

    def _detailed_analysis(self, score: int) -> DetailedAnalysis:
        cfg = self.config
        return DetailedAnalysis(
            factual_accuracy=_clamp(max(cfg.factual_accuracy_floor, 100 - score)),
            source_credibility=_clamp(
                max(cfg.source_credibility_floor, cfg.source_credibility_base - score)
            ),
            emotional_manipulation=_clamp(
                min(100, score + cfg.emotional_manipulation_offset)
            ),
            logical_consistency=_clamp(
                max(cfg.logical_consistency_floor, cfg.logical_consistency_base - score)
            ),
            bias_level=_clamp(min(cfg.bias_level_ceiling, score + cfg.bias_level_offset)),
        )

    def score(self, text: str) -> AnalysisResult:
        """Score text and build a complete AnalysisResult.

        Args:
            text: Content to analyze. Any string is accepted, including empty.

        Returns:
            AnalysisResult tagged with the heuristic analysis method.
        """
        signals = self.detect_signals(text)
        score = self.suspicion_score(signals)
        is_credible = score < self.config.credibility_threshold

        return AnalysisResult(
            is_credible=is_credible,
            confidence=_clamp(max(self.config.confidence_floor, 100 - score)),
            reasoning=self._reasoning(signals, is_credible),
            sources=list(self.config.sources),
            warnings=self._warnings(signals, score),
            verdict=self.verdict_for(score),
            categories=list(self.config.categories),
            detailed_analysis=self._detailed_analysis(score),
            analysis_method=AnalysisMethod.HEURISTIC,
        )


_default_scorer = HeuristicScorer()


def score_content(text: str) -> AnalysisResult:
    """Score text with the default configuration."""
    return _default_scorer.score(text)
