"""Deterministic input gates run before any network call.

These are intentionally lightweight: they reject obviously unusable input
early so that no request is issued for it.
"""

from __future__ import annotations

from urllib.parse import quote_plus, urlsplit

from .errors import InvalidQuery, InvalidURL


def require_non_empty(text: str) -> str:
    if not text or not text.strip():
        raise InvalidQuery("Search query was empty")
    return text


def encode_query(query: str) -> str:
    """Percent-encode a query for the provider's query string."""
    require_non_empty(query)
    try:
        return quote_plus(query, encoding="utf-8", errors="strict")
    except UnicodeEncodeError as e:
        raise InvalidQuery("Search query contains characters that cannot be encoded") from e


def require_http_url(url: str) -> str:
    """Require an absolute http(s) URL with a host."""
    if not url:
        raise InvalidURL("URL was empty")
    try:
        parts = urlsplit(url.strip())
    except ValueError as e:
        raise InvalidURL(f"Malformed URL: {url[:80]}") from e
    if parts.scheme.lower() not in ("http", "https") or not parts.netloc:
        raise InvalidURL(f"Not an http(s) URL: {url[:80]}")
    return url.strip()
