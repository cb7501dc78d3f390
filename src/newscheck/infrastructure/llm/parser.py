"""LLM response parsing and validation."""

import json
import logging
import math
import re
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ValidationError

from ...domain.models import AnalysisMethod, AnalysisResult, Verdict

logger = logging.getLogger(__name__)

VERDICT_VALUES = frozenset(v.value for v in Verdict)

SUB_SCORE_KEYS = (
    "factualAccuracy",
    "sourceCredibility",
    "emotionalManipulation",
    "logicalConsistency",
    "biasLevel",
)

_FENCE_RE = re.compile(r"```(?:json)?", re.IGNORECASE)


def analysis_prompt(content: str) -> str:
    """Return the prompt instructing the model to emit the analysis JSON.

    Args:
        content: Text under analysis, embedded verbatim.

    Returns:
        Prompt string for credibility analysis.
    """
    return f"""
You are an expert fact-checker and misinformation analyst with expertise in:
- Media literacy and journalism ethics
- Information verification techniques
- Bias detection and analysis
- Scientific method and evidence evaluation
- Social psychology and persuasion tactics

Analyze the following content for credibility, accuracy, and potential misinformation:

CONTENT: "{content}"

Provide your analysis as a valid JSON object with the following structure:
{{
  "isCredible": boolean,
  "confidence": number (0-100),
  "reasoning": "detailed explanation of your analysis in 2-3 sentences",
  "sources": ["list of 3-4 recommended fact-checking sources"],
  "warnings": ["specific concerns or red flags found"],
  "verdict": "TRUE" | "FALSE" | "MIXED" | "UNVERIFIED",
  "categories": ["relevant categories like 'political', 'health', 'science', etc."],
  "detailedAnalysis": {{
    "factualAccuracy": number (0-100),
    "sourceCredibility": number (0-100),
    "emotionalManipulation": number (0-100),
    "logicalConsistency": number (0-100),
    "biasLevel": number (0-100)
  }}
}}

Analysis criteria:
1. Factual accuracy: Check claims against established facts
2. Source credibility: Evaluate reliability of sources mentioned or implied
3. Emotional manipulation: Detect inflammatory language, fear-mongering
4. Logical consistency: Check for logical fallacies or contradictions
5. Bias detection: Identify political, commercial, or ideological bias
6. Evidence quality: Assess supporting evidence and citations
7. Context analysis: Consider timing, framing, and selective reporting

Verdict guidelines:
- TRUE: Content is factually accurate with reliable sources
- FALSE: Content contains significant misinformation or false claims
- MIXED: Content has both accurate and inaccurate elements
- UNVERIFIED: Cannot be definitively verified with available information

Respond ONLY with valid JSON, no additional text or formatting.
"""


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_valid_analysis(value: Any) -> bool:
    """Shallow shape check of a decoded model response.

    Only field presence and types are checked; numeric ranges and list
    element types are left to the repair step.

    Args:
        value: Arbitrary decoded JSON value.

    Returns:
        True if every required field has the expected shape.
    """
    if not isinstance(value, dict):
        return False
    return (
        isinstance(value.get("isCredible"), bool)
        and _is_number(value.get("confidence"))
        and isinstance(value.get("reasoning"), str)
        and isinstance(value.get("sources"), list)
        and isinstance(value.get("warnings"), list)
        and isinstance(value.get("categories"), list)
        and isinstance(value.get("verdict"), str)
        and value["verdict"] in VERDICT_VALUES
        and isinstance(value.get("detailedAnalysis"), dict)
    )


class ParseOutcome(BaseModel):
    """Tagged result of parsing model output.

    ``kind`` is ``"parsed"`` with ``result`` set, or ``"rejected"`` with
    ``reason`` set to one of ``no_json``, ``invalid_json`` or
    ``invalid_shape``.
    """

    kind: Literal["parsed", "rejected"]
    result: Optional[AnalysisResult] = None
    reason: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.kind == "parsed"

    @classmethod
    def parsed(cls, result: AnalysisResult) -> "ParseOutcome":
        return cls(kind="parsed", result=result)

    @classmethod
    def rejected(cls, reason: str) -> "ParseOutcome":
        return cls(kind="rejected", reason=reason)


class AnalysisResponseParser:
    """Parser for model responses into validated AnalysisResult objects."""

    @staticmethod
    def _strip_code_fences(text: str) -> str:
        return _FENCE_RE.sub("", text).strip()

    @staticmethod
    def _extract_json_object(text: str) -> Optional[str]:
        """Slice text from the first '{' to the last '}'.

        Args:
            text: Text potentially containing a JSON object.

        Returns:
            JSON candidate string or None if no braces bracket one.
        """
        start = text.find("{")
        end = text.rfind("}")
        if start == -1 or end <= start:
            return None
        return text[start : end + 1]

    @staticmethod
    def _score(value: Any, default: int = 50) -> int:
        """Round a numeric score and clamp it into [0, 100]."""
        if not _is_number(value):
            return default
        if isinstance(value, float):
            if math.isnan(value):
                return default
            if math.isinf(value):
                return 100 if value > 0 else 0
            value = int(round(value))
        return max(0, min(100, value))

    @classmethod
    def _repair(cls, data: Dict[str, Any]) -> Dict[str, Any]:
        """Normalize a shape-valid object into AnalysisResult fields.

        Args:
            data: Decoded object that passed ``is_valid_analysis``.

        Returns:
            Dictionary ready for AnalysisResult validation.
        """
        detail_raw = data["detailedAnalysis"]
        detail = {key: cls._score(detail_raw.get(key)) for key in SUB_SCORE_KEYS}

        def strings(items: List[Any]) -> List[str]:
            return [str(item) for item in items if item is not None and str(item).strip()]

        reasoning = data["reasoning"].strip() or "No reasoning provided by model."

        return {
            "isCredible": data["isCredible"],
            "confidence": cls._score(data["confidence"]),
            "reasoning": reasoning,
            "sources": strings(data["sources"]),
            "warnings": strings(data["warnings"]),
            "verdict": data["verdict"],
            "categories": strings(data["categories"]),
            "detailedAnalysis": detail,
            "analysisMethod": AnalysisMethod.REMOTE,
        }

    def decode(self, value: Any) -> ParseOutcome:
        """Validate an already-decoded value and build an AnalysisResult."""
        if not is_valid_analysis(value):
            logger.warning("Model response failed shape validation.")
            return ParseOutcome.rejected("invalid_shape")

        repaired = self._repair(value)
        logger.debug("Repaired model response for validation: %s", repaired)
        try:
            return ParseOutcome.parsed(AnalysisResult.model_validate(repaired))
        except ValidationError as ve:
            logger.warning("Model response could not be validated: %s", ve.errors())
            return ParseOutcome.rejected("invalid_shape")

    def parse(self, response_text: str) -> ParseOutcome:
        """Parse raw model output into a tagged outcome.

        Args:
            response_text: Raw text response from the model.

        Returns:
            ParseOutcome; never raises.
        """
        if not isinstance(response_text, str):
            return ParseOutcome.rejected("no_json")

        logger.debug("Model full_response (truncated 1000 chars): %s", response_text[:1000])
        cleaned = self._strip_code_fences(response_text)
        json_str = self._extract_json_object(cleaned)

        if not json_str:
            logger.warning("No JSON object found in model response.")
            return ParseOutcome.rejected("no_json")

        try:
            obj = json.loads(json_str)
        except json.JSONDecodeError as e:
            logger.warning("JSON decode failed for model response: %s", str(e))
            return ParseOutcome.rejected("invalid_json")

        return self.decode(obj)


def parse_analysis(response_text: str) -> ParseOutcome:
    """Parse raw model output with a default parser.

    Args:
        response_text: Raw text response from the model.

    Returns:
        Tagged ParseOutcome.
    """
    return AnalysisResponseParser().parse(response_text)
