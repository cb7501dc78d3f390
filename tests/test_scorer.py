import pytest
from pydantic import ValidationError

from newscheck.domain.models import AnalysisMethod, Verdict
from newscheck.heuristics.scorer import (
    ContentSignals,
    HeuristicScorer,
    ScorerConfig,
    score_content,
)

NEUTRAL = "The committee released its quarterly report on Tuesday."
SUSPICIOUS = (
    "SHOCKING NEWS! Doctors HATE this ONE WEIRD TRICK that will change your life "
    "FOREVER! Click NOW before it's BANNED! You WON'T BELIEVE what happens next!!!"
)

SAMPLES = [
    "",
    NEUTRAL,
    SUSPICIOUS,
    "Please share this with your friends",
    "BREAKING: exclusive footage!!!!!",
    "UNESCO lists a new heritage site.",
    "!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!!",
    "Subscribe, like and click for more AMAZING shocking urgent news!!!!",
]


@pytest.fixture
def scorer():
    return HeuristicScorer()


def test_neutral_text_is_credible(scorer):
    result = scorer.score(NEUTRAL)
    assert result.is_credible is True
    assert result.verdict == Verdict.TRUE
    assert result.warnings == []
    assert result.confidence == 100
    assert result.reasoning.endswith("Content appears relatively neutral.")


def test_manipulative_text_is_flagged(scorer):
    text = "This one weird trick works. BIGNEWS today!!!!"
    result = scorer.score(text)
    assert result.is_credible is False
    assert result.verdict in {Verdict.FALSE, Verdict.MIXED}
    assert result.warnings
    assert result.warnings[-1] == "Verify claims with multiple reliable sources"
    assert "Emotional manipulation detected" in result.warnings
    assert "Excessive capitalization used" in result.warnings
    assert "Excessive exclamation marks used" in result.warnings
    assert result.confidence == 40


def test_all_signals_give_false_verdict(scorer):
    result = scorer.score(SUSPICIOUS)
    assert result.verdict == Verdict.FALSE
    assert result.confidence == 30
    assert "Clickbait patterns identified" in result.warnings
    detail = result.detailed_analysis
    assert detail.factual_accuracy == 20
    assert detail.source_credibility == 30
    assert detail.emotional_manipulation == 100
    assert detail.logical_consistency == 40
    assert detail.bias_level == 90


def test_neutral_detailed_analysis(scorer):
    detail = scorer.score(NEUTRAL).detailed_analysis
    assert detail.factual_accuracy == 100
    assert detail.source_credibility == 80
    assert detail.emotional_manipulation == 30
    assert detail.logical_consistency == 90
    assert detail.bias_level == 20


def test_result_metadata(scorer):
    result = scorer.score(NEUTRAL)
    assert result.analysis_method == AnalysisMethod.HEURISTIC
    assert result.is_heuristic
    assert result.sources == [
        "Snopes.com",
        "FactCheck.org",
        "PolitiFact.com",
        "Reuters Fact Check",
    ]
    assert result.categories == ["general", "fact-check"]


@pytest.mark.parametrize("text", SAMPLES)
def test_scores_stay_in_range(scorer, text):
    result = scorer.score(text)
    assert 0 <= result.confidence <= 100
    for value in result.detailed_analysis.model_dump().values():
        assert 0 <= value <= 100
    assert result.verdict in set(Verdict)
    assert result.reasoning.strip()


@pytest.mark.parametrize("text", SAMPLES)
def test_scoring_is_deterministic(scorer, text):
    assert scorer.score(text) == scorer.score(text)
    assert score_content(text) == HeuristicScorer().score(text)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("This is shocking", ContentSignals(emotional_language=True)),
        ("you WON'T believe it", ContentSignals(emotional_language=True)),
        ("The NASA budget", ContentSignals()),
        ("The UNESCO budget", ContentSignals(excessive_caps=True)),
        ("Wow!!!", ContentSignals()),
        ("Wow!!!!", ContentSignals(excessive_exclamations=True)),
        ("Like and subscribe", ContentSignals(clickbait=True)),
        ("It is likely to rain", ContentSignals()),
    ],
)
def test_detect_signals(scorer, text, expected):
    assert scorer.detect_signals(text) == expected


@pytest.mark.parametrize(
    "score, verdict",
    [
        (0, Verdict.TRUE),
        (20, Verdict.TRUE),
        (21, Verdict.UNVERIFIED),
        (40, Verdict.UNVERIFIED),
        (41, Verdict.MIXED),
        (60, Verdict.MIXED),
        (61, Verdict.FALSE),
        (150, Verdict.FALSE),
    ],
)
def test_verdict_cut_points(scorer, score, verdict):
    assert scorer.verdict_for(score) == verdict


def test_signals_below_threshold_give_no_warnings(scorer):
    result = scorer.score("Please share this with your friends")
    assert result.is_credible is True
    assert result.verdict == Verdict.TRUE
    assert result.warnings == []

    result = scorer.score("An amazing recovery")
    assert result.is_credible is True
    assert result.verdict == Verdict.UNVERIFIED
    assert result.warnings == []
    assert "Contains emotional manipulation language." in result.reasoning


def test_custom_config_changes_weights():
    scorer = HeuristicScorer(ScorerConfig(clickbait_weight=50))
    result = scorer.score("Click here")
    assert result.is_credible is False
    assert result.verdict == Verdict.MIXED
    assert result.confidence == 50


def test_config_rejects_unordered_cut_points():
    with pytest.raises(ValidationError):
        ScorerConfig(false_above=40, mixed_above=40)
    with pytest.raises(ValidationError):
        ScorerConfig(unverified_above=50)


def test_config_is_immutable():
    config = ScorerConfig()
    with pytest.raises(ValidationError):
        config.caps_weight = 99
