"""Core domain models for the credibility analysis application."""

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class Verdict(str, Enum):
    """Four-way classification of analyzed content."""

    TRUE = "TRUE"
    FALSE = "FALSE"
    MIXED = "MIXED"
    UNVERIFIED = "UNVERIFIED"


class AnalysisMethod(str, Enum):
    """Where an analysis result came from."""

    REMOTE = "remote"
    HEURISTIC = "heuristic"


class _CamelModel(BaseModel):
    """Base model serializing to the camelCase wire names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class DetailedAnalysis(_CamelModel):
    """Five sub-scores, each in [0, 100]."""

    factual_accuracy: int = Field(ge=0, le=100)
    source_credibility: int = Field(ge=0, le=100)
    emotional_manipulation: int = Field(ge=0, le=100)
    logical_consistency: int = Field(ge=0, le=100)
    bias_level: int = Field(ge=0, le=100)


class AnalysisResult(_CamelModel):
    """Complete credibility analysis with verdict and sub-scores."""

    is_credible: bool
    confidence: int = Field(ge=0, le=100)
    reasoning: str
    sources: List[str] = Field(default_factory=list)
    warnings: List[str] = Field(default_factory=list)
    verdict: Verdict
    categories: List[str] = Field(default_factory=list)
    detailed_analysis: DetailedAnalysis
    analysis_method: AnalysisMethod = AnalysisMethod.REMOTE
    fallback_reason: Optional[str] = None

    @field_validator("reasoning")
    @classmethod
    def reasoning_not_empty(cls, v: str) -> str:
        """Ensure reasoning is not empty."""
        if not v or not v.strip():
            raise ValueError("reasoning must not be empty")
        return v

    @property
    def is_heuristic(self) -> bool:
        """True when the result was produced by the local scorer."""
        return self.analysis_method is AnalysisMethod.HEURISTIC
