"""Static domain credibility table."""

from enum import Enum
from typing import Optional
from urllib.parse import urlparse

from pydantic import BaseModel


class CredibilityClass(str, Enum):
    """Trust bucket for a publishing domain."""

    TRUSTED = "trusted"
    QUESTIONABLE = "questionable"
    NEUTRAL = "neutral"


TRUSTED_RATING = 85
QUESTIONABLE_RATING = 25
NEUTRAL_RATING = 50

TRUSTED_DOMAINS = (
    "reuters.com",
    "ap.org",
    "bbc.com",
    "npr.org",
    "pbs.org",
    "cnn.com",
    "nytimes.com",
    "washingtonpost.com",
    "wsj.com",
    "nature.com",
    "science.org",
    "who.int",
    "cdc.gov",
)

QUESTIONABLE_DOMAINS = (
    "infowars.com",
    "breitbart.com",
    "rt.com",
    "sputniknews.com",
)


class DomainCredibility(BaseModel):
    """Classification of a single hostname."""

    domain: str
    classification: CredibilityClass
    rating: int

    @property
    def is_credible(self) -> bool:
        return self.classification is not CredibilityClass.QUESTIONABLE


def _matches(hostname: str, domain: str) -> bool:
    return hostname == domain or hostname.endswith("." + domain)


def check_domain(hostname: str) -> DomainCredibility:
    """Classify a hostname against the credibility table.

    Matching is on the exact hostname or a dot-separated suffix, so
    ``news.bbc.com`` is trusted while ``bbc.com.example.net`` is not.

    Args:
        hostname: Hostname to classify (case-insensitive).

    Returns:
        DomainCredibility with the bucket and its rating.
    """
    host = (hostname or "").strip().lower().rstrip(".")

    if any(_matches(host, d) for d in TRUSTED_DOMAINS):
        return DomainCredibility(
            domain=host, classification=CredibilityClass.TRUSTED, rating=TRUSTED_RATING
        )

    if any(_matches(host, d) for d in QUESTIONABLE_DOMAINS):
        return DomainCredibility(
            domain=host,
            classification=CredibilityClass.QUESTIONABLE,
            rating=QUESTIONABLE_RATING,
        )

    return DomainCredibility(
        domain=host, classification=CredibilityClass.NEUTRAL, rating=NEUTRAL_RATING
    )


def extract_hostname(url: str) -> Optional[str]:
    """Extract the hostname from a URL.

    A URL without a scheme is read as ``https://``.

    Returns:
        Lower-cased hostname, or None if the URL has none.
    """
    if not isinstance(url, str) or not url.strip():
        return None
    candidate = url.strip()
    if "://" not in candidate:
        candidate = "https://" + candidate
    try:
        hostname = urlparse(candidate).hostname
    except ValueError:
        return None
    return hostname or None
