"""Credibility analysis service - Core business logic."""

import logging
from typing import Optional

from ..config.settings import Settings, get_settings
from ..domain.credibility import CredibilityClass, check_domain, extract_hostname
from ..domain.models import AnalysisResult
from ..heuristics.scorer import HeuristicScorer
from ..infrastructure.llm.client import RemoteAnalysisClient
from ..infrastructure.llm.parser import AnalysisResponseParser, analysis_prompt

logger = logging.getLogger(__name__)

QUESTIONABLE_CONFIDENCE_CAP = 60


class AnalysisService:
    """Service for performing credibility analysis.

    Coordinates the remote model, response validation and the local
    heuristic scorer. Both public methods always return a well-formed
    AnalysisResult; the ``analysis_method`` field records whether the remote
    model or the heuristic fallback produced it.
    """

    def __init__(
        self,
        remote_client: RemoteAnalysisClient,
        response_parser: Optional[AnalysisResponseParser] = None,
        scorer: Optional[HeuristicScorer] = None,
    ) -> None:
        """Initialize analysis service.

        Args:
            remote_client: Client for the generative model.
            response_parser: Parser for model responses.
            scorer: Heuristic scorer used as the fallback.
        """
        self.remote_client = remote_client
        self.response_parser = response_parser or AnalysisResponseParser()
        self.scorer = scorer or HeuristicScorer()

    def build_prompt(self, content: str) -> str:
        return analysis_prompt(content)

    def _fallback(self, content: str, reason: str) -> AnalysisResult:
        logger.info("Using heuristic analysis (reason: %s)", reason)
        result = self.scorer.score(content)
        return result.model_copy(update={"fallback_reason": reason})

    async def analyze_content(self, content: str) -> AnalysisResult:
        """Analyze text for credibility.

        Args:
            content: Text to analyze.

        Returns:
            AnalysisResult from the remote model, or from the heuristic
            scorer if the remote call or its validation failed.
        """
        try:
            response = await self.remote_client.generate(self.build_prompt(content))
            if not response.ok:
                return self._fallback(content, response.reason or "remote_unavailable")

            outcome = self.response_parser.parse(response.text or "")
            if not outcome.ok or outcome.result is None:
                return self._fallback(content, outcome.reason or "invalid_shape")

            logger.debug("Remote analysis accepted from %s endpoint", response.endpoint)
            return outcome.result
        except Exception:
            logger.exception("Unexpected error during remote analysis")
            return self._fallback(content, "error")

    def apply_domain_check(self, result: AnalysisResult, url: str) -> AnalysisResult:
        """Lower confidence and add a warning for questionable domains.

        Args:
            result: Result of analyzing the URL text.
            url: URL whose hostname is checked.

        Returns:
            A new AnalysisResult, or ``result`` unchanged if the domain is
            trusted, neutral or cannot be determined.
        """
        hostname = extract_hostname(url)
        if hostname is None:
            logger.warning("Could not determine domain for URL %r", url)
            return result

        credibility = check_domain(hostname)
        logger.debug("Domain %s classified as %s", hostname, credibility.classification.value)
        if credibility.classification is not CredibilityClass.QUESTIONABLE:
            return result

        return result.model_copy(
            update={
                "warnings": [
                    *result.warnings,
                    f"Domain {hostname} has low credibility rating",
                ],
                "confidence": min(result.confidence, QUESTIONABLE_CONFIDENCE_CAP),
            }
        )

    async def analyze_url(self, url: str) -> AnalysisResult:
        """Analyze a URL and check its domain against the credibility table.

        Args:
            url: URL to analyze.

        Returns:
            AnalysisResult for the URL, adjusted for domain credibility.
        """
        result = await self.analyze_content(f"URL to analyze: {url}")
        try:
            return self.apply_domain_check(result, url)
        except Exception:
            logger.exception("Domain credibility check failed for %r", url)
            return result


def create_analysis_service(settings: Optional[Settings] = None) -> AnalysisService:
    """Create and configure the analysis service with dependency injection."""
    settings = settings or get_settings()

    remote_client = RemoteAnalysisClient(
        api_key=settings.gemini_api_key,
        model=settings.gemini_model,
        primary_url=settings.gemini_primary_url,
        alternate_url=settings.gemini_alternate_url,
        timeout_seconds=settings.http_timeout_seconds,
        temperature=settings.llm_temperature,
        max_output_tokens=settings.llm_max_output_tokens,
    )

    return AnalysisService(
        remote_client=remote_client,
        response_parser=AnalysisResponseParser(),
        scorer=HeuristicScorer(),
    )
