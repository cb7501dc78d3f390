"""Utility functions and helpers."""

from .sanitization import looks_like_url, sanitize_html, sanitize_input

__all__ = ["looks_like_url", "sanitize_html", "sanitize_input"]
