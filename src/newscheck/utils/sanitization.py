"""Input and output sanitization utilities."""

import re
from urllib.parse import urlparse

import bleach

MAX_INPUT_CHARS = 10_000

# Control characters except tab and newline.
_CONTROL_RE = re.compile(r"[\x00-\x08\x0b-\x1f\x7f]")

ALLOWED_TAGS = ["p", "br", "strong", "em", "ul", "ol", "li", "code", "a"]
ALLOWED_ATTRIBUTES = {"a": ["href", "title"]}
ALLOWED_PROTOCOLS = ["http", "https"]


def sanitize_input(text: str, max_chars: int = MAX_INPUT_CHARS) -> str:
    """Clean user-provided text before analysis.

    Args:
        text: Raw input.
        max_chars: Truncation limit.

    Returns:
        Stripped text without control characters, at most ``max_chars`` long.
    """
    if not isinstance(text, str):
        return ""
    cleaned = _CONTROL_RE.sub("", text.replace("\r\n", "\n")).strip()
    return cleaned[:max_chars]


def looks_like_url(value: str) -> bool:
    """Check whether a string is an http(s) URL with a hostname.

    A value without a scheme is read as ``https://``.
    """
    if not isinstance(value, str) or not value.strip() or " " in value.strip():
        return False
    candidate = value.strip()
    if "://" not in candidate:
        candidate = "https://" + candidate
    try:
        parsed = urlparse(candidate)
    except ValueError:
        return False
    return parsed.scheme in ("http", "https") and bool(parsed.hostname) and "." in parsed.hostname


def sanitize_html(content: str) -> str:
    """Sanitize model-provided text before rendering it as HTML.

    Args:
        content: Text that may contain HTML.

    Returns:
        HTML limited to a small tag allow-list with http(s) links only.
    """
    if not isinstance(content, str) or not content:
        return ""

    return bleach.clean(
        content,
        tags=ALLOWED_TAGS,
        attributes=ALLOWED_ATTRIBUTES,
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
    )
